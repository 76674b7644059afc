"""Pytest configuration and shared fixtures."""

import pytest
from typing import List

from service_search.models.record import SearchableRecord, HoursStatus
from service_search.core.engine import ServiceSearchEngine
from service_search.api.service import ServiceSearchService


@pytest.fixture
def sample_records() -> List[SearchableRecord]:
    """Create a sample of Adelaide community organisations for testing."""
    return [
        SearchableRecord(
            id=1,
            name="Aboriginal Family Support Services",
            category="Aboriginal & Torres Strait Islander Services",
            description="Cultural support, family services, advocacy, emergency relief",
            address="Adelaide",
            services=["Cultural support", "Family services", "Advocacy", "Emergency relief"],
            languages=["English", "Aboriginal languages"],
            accessibility=True,
            verified=True,
            rating=4.5,
            distance="1.5 km",
            hours_today="Monday-Friday 9AM-5PM",
            hours_status=HoursStatus.OPEN,
        ),
        SearchableRecord(
            id=2,
            name="Adelaide City Mission",
            category="Emergency Relief",
            description="Emergency accommodation, food relief, support services, community programs",
            address="Adelaide",
            services=["Emergency accommodation", "Food relief", "Support services", "food"],
            languages=["English", "Arabic", "Mandarin"],
            accessibility=True,
            verified=True,
            rating=4.7,
            distance="0.8 km",
            hours_today="24/7",
            hours_status=HoursStatus.OPEN,
        ),
        SearchableRecord(
            id=3,
            name="Adelaide Community Healthcare Alliance",
            category="Health Services",
            description="Primary healthcare, mental health, dental services, community health programs",
            address="Adelaide",
            services=["Primary healthcare", "Mental health", "Dental services"],
            languages=["English", "Vietnamese", "Hindi"],
            accessibility=True,
            verified=True,
            rating=4.3,
            distance="1.2 km",
            hours_today="Monday-Friday 8AM-6PM",
            hours_status=HoursStatus.OPEN,
        ),
        SearchableRecord(
            id=4,
            name="Baptist Care SA",
            category="Community Support",
            description="Aged care, disability support, family services, housing, employment",
            address="Multiple Locations",
            services=["Aged care", "Disability support", "Housing", "Employment"],
            languages=["English", "Spanish", "Cantonese"],
            accessibility=True,
            verified=True,
            rating=4.6,
            distance="3.2 km",
            hours_today="Monday-Friday 9AM-5PM",
            hours_status=HoursStatus.OPEN,
        ),
        SearchableRecord(
            id=10,
            name="Foodbank SA",
            category="Food Relief",
            description="Food distribution, school programs, community pantries",
            address="Pooraka",
            services=["Food distribution", "School programs", "Community pantries"],
            languages=["English", "Arabic", "Italian"],
            accessibility=True,
            verified=True,
            rating=4.9,
            distance="8.5 km",
            hours_today="Monday-Friday 8AM-4PM",
            hours_status=HoursStatus.OPEN,
        ),
        SearchableRecord(
            id=20,
            name="Westside Legal Aid",
            category="Legal Services",
            description="Free legal advice and tenancy support",
            address="Mile End",
            services=["legal aid", "tenancy"],
            languages=["English", "Farsi"],
            accessibility=False,
            verified=False,
            rating=3.9,
            distance="12 km",
            hours_today="Tuesday 10AM-2PM",
            hours_status=HoursStatus.CLOSED,
        ),
        SearchableRecord(
            id=21,
            name="Mobile Outreach Van",
            category="Outreach",
            description="Meals and blankets delivered across the northern suburbs",
            address="Northern Suburbs",
            services=["meals", "blankets"],
            languages=["English"],
            accessibility=False,
            verified=False,
            rating=4.0,
            distance="varies",
            hours_today="Evenings",
            hours_status=HoursStatus.UNKNOWN,
        ),
    ]


@pytest.fixture
def pantry_record() -> SearchableRecord:
    """Record with no context bonuses, used for exact score checks."""
    return SearchableRecord(
        id="pantry",
        name="Harbour Food Pantry",
        category="Food Relief",
        description="Groceries and meals",
        address="Port Adelaide",
        services=["food parcels", "meals"],
        languages=["English"],
        accessibility=False,
        verified=False,
        rating=4.0,
        distance="20 km",
        hours_today="Monday 9AM-5PM",
        hours_status=HoursStatus.CLOSED,
    )


@pytest.fixture
def engine() -> ServiceSearchEngine:
    """Create a search engine with the default configuration."""
    return ServiceSearchEngine()


@pytest.fixture
async def search_service(sample_records):
    """Create and initialize a search service loaded with sample records."""
    async with ServiceSearchService.create(
        records=sample_records,
        max_workers=2,
        log_level="WARNING"  # Reduce test output
    ) as service:
        yield service
