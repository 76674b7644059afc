"""Text processing utilities for queries and organisation records."""

import re
from typing import Any, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.config import SearchConfig
    from ..models.record import SearchableRecord

# Leading decimal number, optionally followed by a unit such as "km"
_DISTANCE_PATTERN = re.compile(r'^\s*(-?\d+(?:\.\d+)?)\s*(?:[a-zA-Z]+\.?)?\s*$')


def parse_distance(value: Any) -> Optional[float]:
    """
    Parse a distance given as a number or text such as "1.5 km".

    Only "." is understood as a decimal separator. Unparsable values
    return None instead of raising.

    Args:
        value: Number, text with an optional unit suffix, or None

    Returns:
        Distance in kilometres, or None
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        if value != value:  # NaN
            return None
        return float(value)
    if not isinstance(value, str):
        return None

    match = _DISTANCE_PATTERN.match(value)
    if not match:
        return None
    return float(match.group(1))


class TextProcessor:
    """Tokenizes queries and projects records into searchable text."""

    def __init__(self, config: Optional["SearchConfig"] = None):
        """
        Initialize text processor.

        Args:
            config: Search configuration providing the stop-word set
        """
        if config is None:
            from ..core.config import DEFAULT_CONFIG
            config = DEFAULT_CONFIG
        self.config = config

        self.punctuation_pattern = re.compile(r'[^\w\s]')
        self.whitespace_pattern = re.compile(r'\s+')

    def tokenize(self, query: str) -> List[str]:
        """
        Break a query down into meaningful search terms.

        Lowercases, replaces punctuation with spaces, splits on whitespace
        and drops single characters and stop words. Order and duplicates
        are preserved.

        Args:
            query: Raw query text

        Returns:
            Search terms in left-to-right order
        """
        if not query:
            return []

        text = self.punctuation_pattern.sub(' ', query.lower())
        stop_words = self.config.stop_words

        return [
            word for word in self.whitespace_pattern.split(text)
            if len(word) > 1 and word not in stop_words
        ]

    def searchable_text(self, record: "SearchableRecord") -> str:
        """
        Flatten every searchable part of a record into one lowercase string.

        Includes derived phrases for languages ("<language> speaking"),
        accessibility, verification and open-now status so the partial
        matcher can find them.

        Args:
            record: Record to project

        Returns:
            Space-separated lowercase text
        """
        fields = [
            record.name,
            record.category,
            record.description,
            record.address,
            *record.services,
            *(f"{language} speaking" for language in record.languages),
            'accessible wheelchair access' if record.accessibility else '',
            'verified government approved' if record.verified else '',
            '24/7 emergency available' if record.is_open else '',
        ]

        return ' '.join(part for part in fields if part).lower()


def tokenize(query: str, config: Optional["SearchConfig"] = None) -> List[str]:
    """Tokenize a query with the given (or default) configuration."""
    return TextProcessor(config).tokenize(query)


def build_searchable_text(record: "SearchableRecord", config: Optional["SearchConfig"] = None) -> str:
    """Project a record into its searchable text."""
    return TextProcessor(config).searchable_text(record)
