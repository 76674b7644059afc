"""Utility modules for service search."""

from .text_processing import TextProcessor, parse_distance, tokenize, build_searchable_text
from .validators import validate_candidates, validate_filters, validate_max_results
from .logging_config import setup_logging, StructuredLogger

__all__ = [
    "TextProcessor",
    "parse_distance",
    "tokenize",
    "build_searchable_text",
    "validate_candidates",
    "validate_filters",
    "validate_max_results",
    "setup_logging",
    "StructuredLogger",
]
