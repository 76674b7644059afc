"""Basic usage example for community service search."""

import asyncio

from service_search import ServiceSearchService, SearchFilters

ADELAIDE_ORGANISATIONS = [
    {
        "id": 2,
        "name": "Adelaide City Mission",
        "type": "Emergency Relief",
        "description": "Emergency accommodation, food relief, support services, community programs",
        "distance": "0.8 km",
        "address": "Adelaide",
        "phone": "08 8210 7600",
        "website": "http://www.adelaidecitymission.org.au",
        "hours": {"today": "24/7", "status": "open"},
        "rating": 4.7,
        "reviewCount": 156,
        "verified": True,
        "accessibility": True,
        "languages": ["English", "Arabic", "Mandarin"],
        "services": ["Emergency accommodation", "Food relief", "Support services", "Community programs"],
    },
    {
        "id": 3,
        "name": "Adelaide Community Healthcare Alliance",
        "type": "Health Services",
        "description": "Primary healthcare, mental health, dental services, community health programs",
        "distance": "1.2 km",
        "address": "Adelaide",
        "phone": "08 8237 3000",
        "hours": {"today": "Monday-Friday 8AM-6PM", "status": "open"},
        "rating": 4.3,
        "reviewCount": 89,
        "verified": True,
        "accessibility": True,
        "languages": ["English", "Vietnamese", "Hindi"],
        "services": ["Primary healthcare", "Mental health", "Dental services"],
    },
    {
        "id": 4,
        "name": "Baptist Care SA",
        "type": "Community Support",
        "description": "Aged care, disability support, family services, housing, employment",
        "distance": "3.2 km",
        "address": "Multiple Locations",
        "phone": "08 8273 7300",
        "hours": {"today": "Monday-Friday 9AM-5PM", "status": "open"},
        "rating": 4.6,
        "reviewCount": 203,
        "verified": True,
        "accessibility": True,
        "languages": ["English", "Spanish", "Cantonese"],
        "services": ["Aged care", "Disability support", "Family services", "Housing", "Employment"],
    },
    {
        "id": 10,
        "name": "Foodbank SA",
        "type": "Food Relief",
        "description": "Food distribution, school programs, community pantries",
        "distance": "8.5 km",
        "address": "Pooraka",
        "phone": "08 8351 1136",
        "hours": {"today": "Monday-Friday 8AM-4PM", "status": "open"},
        "rating": 4.9,
        "reviewCount": 245,
        "verified": True,
        "accessibility": True,
        "languages": ["English", "Arabic", "Italian"],
        "services": ["Food distribution", "School programs", "Community pantries"],
    },
]


async def basic_search_demo():
    """Demonstrate basic search functionality."""
    print("Community Service Search - Basic Usage Demo")
    print("=" * 50)

    async with ServiceSearchService.create(
        records=ADELAIDE_ORGANISATIONS,
        log_level="WARNING"
    ) as service:
        stats = await service.get_stats()
        print(f"\nCatalog contains {stats['service']['total_records']} organisations")

        search_examples = [
            ("I need emergency food", None),
            ("mental health", None),
            ("food", SearchFilters(distance_radius_km="5km")),
            ("support", SearchFilters(language="zh")),
            ("", SearchFilters(language="ca")),
        ]

        for query_text, filters in search_examples:
            print(f"\nQuery: '{query_text}' filters={filters}")

            results = await service.search(query_text, max_results=3, filters=filters)
            if not results:
                print("   No matching organisations")

            for result in results:
                print(f"   {result.rank}. {result.record.name} (score: {result.relevance_score:.1f})")
                if result.matched_terms:
                    print(f"      {service.highlight_result(result)}")
                    print(f"      matched fields: {', '.join(result.matched_fields)}")

        print(f"\nSuggestions for 'emer': {await service.suggest('emer')}")


if __name__ == "__main__":
    asyncio.run(basic_search_demo())
