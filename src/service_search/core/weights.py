"""Declarative field weight table used by the relevance scorer."""

import re
from dataclasses import dataclass
from typing import Callable, Tuple

from ..models.record import SearchableRecord

ACCESSIBILITY_KEYWORDS = ("access", "wheelchair", "disability")
AVAILABILITY_KEYWORDS = ("emergency", "24", "urgent")

# (record, term, searchable_text) -> number of matches for this category
Matcher = Callable[[SearchableRecord, str, str], int]


@dataclass(frozen=True)
class FieldRule:
    """
    One row of the weight table.

    Attributes:
        category: Label reported in ``matched_fields``
        weight: Points awarded per match
        matcher: Counts matches of a term for a record
    """
    category: str
    weight: int
    matcher: Matcher

    def score(self, record: SearchableRecord, term: str, searchable_text: str) -> int:
        """Contribution of ``term`` to this category (weight x match count)."""
        return self.weight * self.matcher(record, term, searchable_text)


def match_name(record: SearchableRecord, term: str, searchable_text: str) -> int:
    return int(term in record.name.lower())


def match_category(record: SearchableRecord, term: str, searchable_text: str) -> int:
    return int(term in record.category.lower())


def match_services(record: SearchableRecord, term: str, searchable_text: str) -> int:
    return sum(1 for service in record.services if term in service.lower())


def match_description(record: SearchableRecord, term: str, searchable_text: str) -> int:
    return int(term in record.description.lower())


def match_languages(record: SearchableRecord, term: str, searchable_text: str) -> int:
    count = 0
    for language in record.languages:
        language = language.lower()
        if term in language or term in f"{language} speaking":
            count += 1
    return count


def match_address(record: SearchableRecord, term: str, searchable_text: str) -> int:
    return int(term in record.address.lower())


def match_accessibility(record: SearchableRecord, term: str, searchable_text: str) -> int:
    if not record.accessibility:
        return 0
    return int(any(keyword in term for keyword in ACCESSIBILITY_KEYWORDS))


def match_availability(record: SearchableRecord, term: str, searchable_text: str) -> int:
    if "24" not in record.hours_today.lower():
        return 0
    return int(any(keyword in term for keyword in AVAILABILITY_KEYWORDS))


def match_partial(record: SearchableRecord, term: str, searchable_text: str) -> int:
    """Occurrences of ``term`` at the start of a word anywhere in the searchable text."""
    pattern = re.compile(r"\b" + re.escape(term), re.IGNORECASE)
    return len(pattern.findall(searchable_text))


DEFAULT_FIELD_RULES: Tuple[FieldRule, ...] = (
    FieldRule("name", 100, match_name),
    FieldRule("type", 80, match_category),
    FieldRule("services", 70, match_services),
    FieldRule("description", 50, match_description),
    FieldRule("languages", 40, match_languages),
    FieldRule("address", 30, match_address),
    FieldRule("accessibility", 40, match_accessibility),
    FieldRule("availability", 35, match_availability),
    FieldRule("partial", 10, match_partial),
)
