"""Filter and rank pipeline for community service search."""

import logging
import threading
import time
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from ..models.record import SearchableRecord
from ..models.filters import SearchFilters
from ..models.result import SearchResult
from ..utils.validators import validate_candidates, validate_filters, validate_max_results
from ..utils.text_processing import TextProcessor, parse_distance
from ..utils.logging_config import StructuredLogger
from .config import DEFAULT_CONFIG, SearchConfig
from .exceptions import SearchError, ValidationError
from .highlighter import highlight
from .scoring import RelevanceScorer
from .suggestions import get_search_suggestions

logger = logging.getLogger(__name__)


class ServiceSearchEngine:
    """
    Relevance-ranked search over a caller-supplied collection of records.

    Each call filters, tokenizes, scores and sorts from scratch; no state
    is kept between calls apart from counters, and the candidate
    collection is never modified. Equal scores keep their filtered order.
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        """
        Initialize search engine.

        Args:
            config: Tables and weights used by every component
        """
        self.config = config or DEFAULT_CONFIG
        self.text_processor = TextProcessor(self.config)
        self.scorer = RelevanceScorer(self.config)
        self.log = StructuredLogger(__name__)

        self._stats_lock = threading.Lock()
        self._stats = {
            'total_searches': 0,
            'browse_searches': 0,
            'avg_search_time': 0.0
        }

        logger.debug("Service search engine initialized")

    def search(
        self,
        query: str,
        candidates: Iterable[Union[SearchableRecord, Mapping[str, Any]]],
        max_results: int,
        filters: Union[SearchFilters, Mapping[str, Any], None] = None
    ) -> List[SearchResult]:
        """
        Search candidates for the query and return ranked results.

        An empty query, or one made only of stop words, returns the first
        ``max_results`` filtered candidates unranked with a score of 0.

        Args:
            query: Free-text query
            candidates: Records (or record mappings) to search
            max_results: Maximum number of results to return
            filters: Optional language/accessibility/distance filters

        Returns:
            Results ordered by descending relevance

        Raises:
            ValidationError: If max_results, candidates or filters break
                the call contract
            SearchError: If ranking fails unexpectedly
        """
        start_time = time.perf_counter()

        validate_max_results(max_results)
        records = validate_candidates(candidates)
        search_filters = validate_filters(filters)
        if query is None:
            query = ""
        elif not isinstance(query, str):
            raise ValidationError(f"Query must be a string, got {type(query).__name__}")

        try:
            filtered = self.apply_filters(records, search_filters)
            query_terms = self.text_processor.tokenize(query)
            log = self.log.with_context(
                terms=len(query_terms), candidates=len(records), filtered=len(filtered)
            )

            browse = not query.strip() or not query_terms
            if browse:
                results = self._browse(filtered, max_results)
                log.debug("Empty query, returning browse results")
            else:
                results = self._rank(filtered, query_terms, max_results)
                log.debug(f"Ranked {len(results)} results")

        except Exception as e:
            logger.error(f"Search failed: {str(e)}")
            raise SearchError(f"Search failed: {str(e)}") from e

        self._update_search_stats(time.perf_counter() - start_time, browse)
        return results

    def apply_filters(
        self,
        records: List[SearchableRecord],
        filters: Optional[SearchFilters]
    ) -> List[SearchableRecord]:
        """Apply language, accessibility and distance filters in that order."""
        if filters is None:
            return list(records)

        filtered = list(records)

        if filters.language and not self.config.is_any(filters.language):
            filtered = self._filter_language(filtered, str(filters.language))

        if filters.accessibility is True:
            filtered = [record for record in filtered if record.accessibility]

        radius = filters.distance_radius_km
        if radius is not None and not self.config.is_any(radius):
            filtered = self._filter_distance(filtered, radius)

        return filtered

    def _filter_language(self, records: List[SearchableRecord], code: str) -> List[SearchableRecord]:
        search_languages = self.config.language_names(code)
        if code.strip().lower() not in self.config.language_map:
            logger.debug(f"Unknown language code '{code}', matching it literally")

        def speaks(record: SearchableRecord) -> bool:
            for language in record.languages:
                language = language.lower()
                for wanted in search_languages:
                    if wanted in language or (language and language in wanted):
                        return True
            return False

        return [record for record in records if speaks(record)]

    def _filter_distance(self, records: List[SearchableRecord], radius: Any) -> List[SearchableRecord]:
        max_distance = parse_distance(radius)
        if max_distance is None:
            self.log.with_context(radius=repr(radius)).warning("Ignoring unparsable distance radius")
            return records

        return [
            record for record in records
            if record.distance_km is not None and record.distance_km <= max_distance
        ]

    def _browse(self, records: List[SearchableRecord], max_results: int) -> List[SearchResult]:
        return [
            SearchResult(record=record, relevance_score=0.0, rank=rank)
            for rank, record in enumerate(records[:max_results], 1)
        ]

    def _rank(
        self,
        records: List[SearchableRecord],
        query_terms: List[str],
        max_results: int
    ) -> List[SearchResult]:
        scored = []
        for record in records:
            searchable_text = self.text_processor.searchable_text(record)
            breakdown = self.scorer.score(record, query_terms, searchable_text)

            # Bonuses alone never qualify a record
            if not breakdown.has_matches or breakdown.score <= 0:
                continue
            scored.append((record, breakdown))

        # sorted() is stable, so ties keep the filtered order
        scored = sorted(scored, key=lambda item: item[1].score, reverse=True)

        return [
            SearchResult(
                record=record,
                relevance_score=breakdown.score,
                matched_fields=breakdown.matched_fields,
                matched_terms=breakdown.matched_terms,
                rank=rank
            )
            for rank, (record, breakdown) in enumerate(scored[:max_results], 1)
        ]

    def highlight(self, text: str, matched_terms: Iterable[str]) -> str:
        """Highlight matched terms using this engine's markers."""
        return highlight(text, matched_terms, self.config)

    def suggest(self, partial_query: str) -> List[str]:
        """Autocomplete suggestions from this engine's catalog."""
        return get_search_suggestions(partial_query, self.config)

    def _update_search_stats(self, search_time: float, browse: bool) -> None:
        with self._stats_lock:
            self._stats["total_searches"] += 1
            if browse:
                self._stats["browse_searches"] += 1

            total_searches = self._stats["total_searches"]
            current_avg = self._stats["avg_search_time"]
            self._stats["avg_search_time"] = (
                (current_avg * (total_searches - 1) + search_time) / total_searches
            )

    def get_stats(self) -> Dict[str, Any]:
        """Get engine statistics."""
        return {
            **dict(self._stats),
            'field_rules': [rule.category for rule in self.config.field_rules],
        }
