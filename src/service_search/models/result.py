"""Search result data model."""

from typing import List, Dict, Any
from dataclasses import dataclass, field

from .record import SearchableRecord


@dataclass
class SearchResult:
    """
    Ranked search result annotated with what matched.

    Attributes:
        record: The originating record (shared, never modified)
        relevance_score: Normalised relevance score (0 on the browse path)
        matched_fields: Field categories that contributed to the score
        matched_terms: Query terms that produced a non-zero contribution
        rank: Result ranking position (1-based)
    """
    record: SearchableRecord
    relevance_score: float
    matched_fields: List[str] = field(default_factory=list)
    matched_terms: List[str] = field(default_factory=list)
    rank: int = 1

    def __post_init__(self) -> None:
        """Validate search result."""
        if self.relevance_score < 0:
            raise ValueError("Relevance score cannot be negative")
        if self.rank <= 0:
            raise ValueError("Rank must be positive")

    @property
    def id(self):
        """Identifier of the originating record."""
        return self.record.id

    @property
    def is_browse_result(self) -> bool:
        """Whether the result came from the empty-query browse path."""
        return not self.matched_terms and self.relevance_score == 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        record = self.record
        return {
            "id": record.id,
            "name": record.name,
            "category": record.category,
            "description": record.description,
            "address": record.address,
            "services": list(record.services),
            "languages": list(record.languages),
            "accessibility": record.accessibility,
            "verified": record.verified,
            "rating": record.rating,
            "distance": record.distance,
            "distance_km": record.distance_km,
            "hours_today": record.hours_today,
            "hours_status": record.hours_status.value,
            "phone": record.phone,
            "website": record.website,
            "review_count": record.review_count,
            "metadata": record.metadata,
            "relevance_score": round(self.relevance_score, 4),
            "matched_fields": list(self.matched_fields),
            "matched_terms": list(self.matched_terms),
            "rank": self.rank
        }
