"""Relevance scoring of records against query terms."""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..models.record import SearchableRecord
from .config import DEFAULT_CONFIG, SearchConfig


@dataclass
class ScoreBreakdown:
    """
    Outcome of scoring one record.

    Attributes:
        score: Normalised relevance score
        matched_fields: Categories that contributed, first-match order
        matched_terms: Terms that contributed, first-match order
    """
    score: float
    matched_fields: List[str] = field(default_factory=list)
    matched_terms: List[str] = field(default_factory=list)

    @property
    def has_matches(self) -> bool:
        return bool(self.matched_terms)


class RelevanceScorer:
    """
    Weighted multi-field scorer.

    Each term is checked against every row of the configured weight table
    independently; record-level bonuses are applied once afterwards and the
    total is divided by the number of query terms.
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        """
        Initialize scorer.

        Args:
            config: Search configuration providing weights and bonuses
        """
        self.config = config or DEFAULT_CONFIG

    def score_term(self, record: SearchableRecord, term: str, searchable_text: str):
        """
        Score a single term across all field categories.

        Returns:
            Tuple of (term score, categories matched)
        """
        term_score = 0
        categories = []

        for rule in self.config.field_rules:
            contribution = rule.score(record, term, searchable_text)
            if contribution > 0:
                term_score += contribution
                categories.append(rule.category)

        return term_score, categories

    def context_bonus(self, record: SearchableRecord) -> float:
        """Record-level adjustments for trust, accessibility, rating, hours and distance."""
        config = self.config
        bonus = 0.0

        if record.verified:
            bonus += config.verified_bonus
        if record.accessibility:
            bonus += config.accessibility_bonus
        if record.rating > config.rating_threshold:
            bonus += config.rating_bonus
        if record.is_open:
            bonus += config.open_bonus

        bonus += self.distance_adjustment(record.distance_km)
        return bonus

    def distance_adjustment(self, distance_km: Optional[float]) -> float:
        """Closer is better; unknown distances are not adjusted."""
        if distance_km is None:
            return 0.0

        for limit, bonus in self.config.distance_bands:
            if distance_km <= limit:
                return bonus

        if distance_km > self.config.far_distance_km:
            return self.config.far_distance_penalty
        return 0.0

    def score(
        self,
        record: SearchableRecord,
        query_terms: Sequence[str],
        searchable_text: str
    ) -> ScoreBreakdown:
        """
        Calculate the relevance score for a record.

        Args:
            record: Record being ranked
            query_terms: Terms produced by the tokenizer
            searchable_text: Projected text of ``record``

        Returns:
            ScoreBreakdown with the normalised score and what matched
        """
        total = 0.0
        matched_fields: List[str] = []
        matched_terms: List[str] = []

        for term in query_terms:
            term_score, categories = self.score_term(record, term, searchable_text)
            if term_score <= 0:
                continue

            total += term_score
            if term not in matched_terms:
                matched_terms.append(term)
            for category in categories:
                if category not in matched_fields:
                    matched_fields.append(category)

        total += self.context_bonus(record)

        if query_terms:
            total = total / max(1, len(query_terms))

        return ScoreBreakdown(
            score=total,
            matched_fields=matched_fields,
            matched_terms=matched_terms
        )
