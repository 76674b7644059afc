"""Data models for service search."""

from .record import SearchableRecord, HoursStatus, RecordModel
from .filters import SearchFilters, FiltersModel
from .result import SearchResult

__all__ = [
    "SearchableRecord",
    "HoursStatus",
    "RecordModel",
    "SearchFilters",
    "FiltersModel",
    "SearchResult",
]
