"""High-level async service over a catalog of community organisations."""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager
from functools import partial
from typing import Any, AsyncIterator, Dict, Iterable, List, Mapping, Optional, Union

from ..core.config import SearchConfig
from ..core.engine import ServiceSearchEngine
from ..core.exceptions import SearchError, ServiceSearchError, ValidationError
from ..models.filters import SearchFilters
from ..models.record import SearchableRecord
from ..models.result import SearchResult
from ..utils.logging_config import setup_logging
from ..utils.validators import validate_candidates

logger = logging.getLogger(__name__)


class ServiceSearchService:
    """
    Service interface for searching a catalog of organisations.

    Holds the records supplied by a data source and runs the synchronous
    engine in a worker pool so concurrent requests do not block the event
    loop. Every search works on a snapshot of the catalog.
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        default_max_results: int = 20,
        max_workers: int = 4,
        log_level: str = "INFO"
    ):
        """
        Initialize service search service.

        Args:
            config: Search configuration shared with the engine
            default_max_results: Result cap used when a search gives none
            max_workers: Number of worker threads
            log_level: Logging level
        """
        setup_logging(level=log_level)

        if default_max_results <= 0:
            raise ValidationError("Default max results must be positive")

        self.default_max_results = default_max_results
        self.engine = ServiceSearchEngine(config=config)
        self.executor = ThreadPoolExecutor(max_workers=max_workers)

        self._records: List[SearchableRecord] = []
        self._initialized = False
        logger.info("Service search service initialized")

    async def initialize(
        self,
        records: Optional[Iterable[Union[SearchableRecord, Mapping[str, Any]]]] = None
    ) -> None:
        """
        Initialize the service, optionally loading an initial catalog.

        Args:
            records: Records or record mappings to load
        """
        try:
            self._initialized = True
            if records is not None:
                await self.add_records(records)
            logger.info("Service initialization complete")

        except ValidationError:
            self._initialized = False
            raise
        except Exception as e:
            self._initialized = False
            logger.error(f"Failed to initialize service: {str(e)}")
            raise ServiceSearchError(f"Service initialization failed: {str(e)}")

    async def add_records(
        self,
        records: Iterable[Union[SearchableRecord, Mapping[str, Any]]]
    ) -> None:
        """
        Add records to the catalog.

        Raises:
            ValidationError: If a record is invalid or its ID already exists
        """
        self._check_initialized()

        new_records = validate_candidates(records)
        existing_ids = {record.id for record in self._records}
        for record in new_records:
            if record.id in existing_ids:
                raise ValidationError(f"Duplicate record ID found: {record.id}")

        # Rebind rather than extend so in-flight searches keep their snapshot
        self._records = self._records + new_records
        logger.info(f"Added {len(new_records)} records")

    async def search(
        self,
        query: str,
        max_results: Optional[int] = None,
        filters: Union[SearchFilters, Mapping[str, Any], None] = None
    ) -> List[SearchResult]:
        """
        Search the catalog.

        Args:
            query: Free-text query
            max_results: Result cap (defaults to ``default_max_results``)
            filters: Optional language/accessibility/distance filters

        Returns:
            Ranked search results

        Raises:
            ValidationError: If the call arguments are invalid
            SearchError: If the engine fails while ranking
            ServiceSearchError: If the search fails
        """
        self._check_initialized()

        if max_results is None:
            max_results = self.default_max_results

        snapshot = tuple(self._records)
        loop = asyncio.get_running_loop()

        try:
            results = await loop.run_in_executor(
                self.executor,
                partial(self.engine.search, query, snapshot, max_results, filters)
            )
            logger.debug(f"Search returned {len(results)} results")
            return results

        except (ValidationError, SearchError):
            raise
        except Exception as e:
            logger.error(f"Search failed: {str(e)}")
            raise ServiceSearchError(f"Search failed: {str(e)}")

    async def suggest(self, partial_query: str) -> List[str]:
        """Autocomplete suggestions for a partially typed query."""
        return self.engine.suggest(partial_query)

    def highlight_result(self, result: SearchResult, field: str = "description") -> str:
        """
        Highlight a text field of a result's record with its matched terms.

        Raises:
            ValidationError: If the field is not a text field of the record
        """
        value = getattr(result.record, field, None)
        if not isinstance(value, str):
            raise ValidationError(f"Cannot highlight non-text field: {field}")
        return self.engine.highlight(value, result.matched_terms)

    async def get_stats(self) -> Dict[str, Any]:
        """Get service and engine statistics."""
        self._check_initialized()

        return {
            'service': {
                'initialized': self._initialized,
                'total_records': len(self._records),
                'default_max_results': self.default_max_results
            },
            'engine': self.engine.get_stats()
        }

    async def health_check(self) -> Dict[str, Any]:
        """Perform health check."""
        if not self._initialized:
            return {
                'status': 'not_initialized',
                'message': 'Service not initialized'
            }

        return {
            'status': 'healthy' if self._records else 'empty',
            'total_records': len(self._records),
            'timestamp': asyncio.get_running_loop().time()
        }

    def _check_initialized(self) -> None:
        """Check if service is properly initialized."""
        if not self._initialized:
            raise ServiceSearchError("Service not initialized. Call initialize() first.")

    async def close(self) -> None:
        """Clean up resources and close the service."""
        self.executor.shutdown(wait=True)
        self._initialized = False
        logger.info("Service closed successfully")

    @classmethod
    @asynccontextmanager
    async def create(
        cls,
        records: Optional[Iterable[Union[SearchableRecord, Mapping[str, Any]]]] = None,
        **kwargs
    ) -> AsyncIterator['ServiceSearchService']:
        """
        Create and manage service lifecycle with context manager.

        Args:
            records: Initial catalog
            **kwargs: Additional service configuration

        Yields:
            Initialized service search service
        """
        service = cls(**kwargs)

        try:
            await service.initialize(records)
            yield service
        finally:
            await service.close()
