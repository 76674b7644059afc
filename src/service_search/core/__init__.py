"""Core engine components for service search."""

from .engine import ServiceSearchEngine
from .config import SearchConfig, DEFAULT_CONFIG
from .scoring import RelevanceScorer, ScoreBreakdown
from .weights import FieldRule, DEFAULT_FIELD_RULES
from .highlighter import highlight
from .suggestions import get_search_suggestions
from .exceptions import (
    ServiceSearchError,
    ValidationError,
    SearchError,
    ConfigurationError
)

__all__ = [
    "ServiceSearchEngine",
    "SearchConfig",
    "DEFAULT_CONFIG",
    "RelevanceScorer",
    "ScoreBreakdown",
    "FieldRule",
    "DEFAULT_FIELD_RULES",
    "highlight",
    "get_search_suggestions",
    "ServiceSearchError",
    "ValidationError",
    "SearchError",
    "ConfigurationError"
]
