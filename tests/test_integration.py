"""Integration tests for the async search service."""

import asyncio

import pytest

from service_search.api.service import ServiceSearchService
from service_search.core.exceptions import SearchError, ServiceSearchError, ValidationError
from service_search.models.filters import SearchFilters


class TestServiceSearchServiceIntegration:
    """Integration tests for the complete service."""

    async def test_full_workflow(self, sample_records):
        """Test complete workflow from service creation to highlighted results."""
        async with ServiceSearchService.create(log_level="WARNING") as service:
            await service.add_records(sample_records)

            results = await service.search("emergency food relief")
            assert len(results) > 0
            assert results[0].relevance_score >= results[-1].relevance_score

            highlighted = service.highlight_result(results[0], "description")
            assert "<mark>" in highlighted

            limited = await service.search("support", max_results=2, filters={"accessibility": True})
            assert len(limited) <= 2
            assert all(r.record.accessibility for r in limited)

    async def test_default_max_results(self, sample_records):
        async with ServiceSearchService.create(
            records=sample_records, default_max_results=3, log_level="WARNING"
        ) as service:
            results = await service.search("")
            assert [r.id for r in results] == [1, 2, 3]

    async def test_concurrent_searches(self, search_service):
        """Test concurrent search operations over the same catalog."""
        queries = ["food", "dental", "legal aid", "emergency", "", "lacrosse"]

        results = await asyncio.gather(*(search_service.search(q) for q in queries))

        assert [r.id for r in results[1]] == [3]
        assert results[5] == []
        assert len(results[4]) == 7

        stats = await search_service.get_stats()
        assert stats["engine"]["total_searches"] == len(queries)
        assert stats["engine"]["browse_searches"] == 1

    async def test_add_mapping_records(self, search_service):
        await search_service.add_records([
            {"id": 99, "name": "Northern Adelaide Lacrosse Club", "type": "Sports Club",
             "distance": "6.1 km", "hours": {"today": "Not specified", "status": "unknown"}},
        ])

        results = await search_service.search("lacrosse")
        assert [r.id for r in results] == [99]

    async def test_duplicate_record_rejected(self, search_service, sample_records):
        with pytest.raises(ValidationError, match="Duplicate record ID"):
            await search_service.add_records([sample_records[0]])

    async def test_invalid_max_results(self, search_service):
        with pytest.raises(ValidationError):
            await search_service.search("food", max_results=0)

    async def test_invalid_initial_catalog_raises_validation_error(self, sample_records):
        service = ServiceSearchService(log_level="WARNING")

        with pytest.raises(ValidationError, match="Duplicate record ID") as exc_info:
            await service.initialize([sample_records[0], sample_records[0]])

        assert "initialization failed" not in str(exc_info.value)
        assert not service._initialized
        await service.close()

    async def test_create_with_duplicate_records(self, sample_records):
        with pytest.raises(ValidationError):
            async with ServiceSearchService.create(
                records=[sample_records[0], sample_records[0]], log_level="WARNING"
            ):
                pass

    async def test_engine_failure_keeps_search_error(self, search_service, monkeypatch):
        def fail(*args, **kwargs):
            raise RuntimeError("index unavailable")

        monkeypatch.setattr(search_service.engine, "_rank", fail)

        with pytest.raises(SearchError) as exc_info:
            await search_service.search("food")

        assert str(exc_info.value) == "Search failed: index unavailable"

    async def test_filter_mapping_strings(self, search_service):
        results = await search_service.search("", filters={"accessibility": "no"})
        assert len(results) == 7

    async def test_filters_object(self, search_service):
        results = await search_service.search("", filters=SearchFilters(language="ca"))
        assert [r.id for r in results] == [4]

    async def test_suggest(self, search_service):
        assert await search_service.suggest("legal") == ["legal aid"]

    async def test_highlight_non_text_field(self, search_service):
        results = await search_service.search("dental")

        with pytest.raises(ValidationError):
            search_service.highlight_result(results[0], "services")

    async def test_health_check(self, search_service):
        health = await search_service.health_check()

        assert health["status"] == "healthy"
        assert health["total_records"] == 7

    async def test_uninitialized_service(self):
        service = ServiceSearchService(log_level="WARNING")

        with pytest.raises(ServiceSearchError, match="not initialized"):
            await service.search("food")

        health = await service.health_check()
        assert health["status"] == "not_initialized"
        await service.close()

    async def test_invalid_default_max_results(self):
        with pytest.raises(ValidationError):
            ServiceSearchService(default_max_results=0, log_level="WARNING")
