"""
Community Service Search

Relevance-ranked keyword search over community organisations and services:
query tokenizing, weighted multi-field scoring with context bonuses,
language/accessibility/distance filters and result highlighting.
"""

from typing import Any, Iterable, List, Mapping, Optional, Union

from .api.service import ServiceSearchService
from .models.record import SearchableRecord, HoursStatus
from .models.filters import SearchFilters
from .models.result import SearchResult
from .core.engine import ServiceSearchEngine
from .core.config import SearchConfig, DEFAULT_CONFIG
from .core.highlighter import highlight
from .core.suggestions import get_search_suggestions
from .core.exceptions import ServiceSearchError, ValidationError, SearchError
from .utils.text_processing import tokenize

__version__ = "1.0.0"


def search(
    query: str,
    candidates: Iterable[Union[SearchableRecord, Mapping[str, Any]]],
    max_results: int,
    filters: Union[SearchFilters, Mapping[str, Any], None] = None,
    config: Optional[SearchConfig] = None
) -> List[SearchResult]:
    """Rank candidates for a query with a one-off engine."""
    return ServiceSearchEngine(config).search(query, candidates, max_results, filters)


__all__ = [
    "search",
    "highlight",
    "tokenize",
    "get_search_suggestions",
    "ServiceSearchService",
    "ServiceSearchEngine",
    "SearchableRecord",
    "HoursStatus",
    "SearchFilters",
    "SearchResult",
    "SearchConfig",
    "DEFAULT_CONFIG",
    "ServiceSearchError",
    "ValidationError",
    "SearchError",
]
