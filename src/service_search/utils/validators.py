"""Input validation utilities."""

from collections.abc import Iterable, Mapping
from typing import Any, List, Optional

from ..models.record import SearchableRecord
from ..models.filters import SearchFilters
from ..core.exceptions import ValidationError


def validate_max_results(max_results: Any) -> None:
    """
    Validate the result cap supplied by the caller.

    Raises:
        ValidationError: If max_results is not a positive integer
    """
    if isinstance(max_results, bool) or not isinstance(max_results, int):
        raise ValidationError(f"Max results must be an integer, got {type(max_results).__name__}")
    if max_results <= 0:
        raise ValidationError(f"Max results must be positive, got {max_results}")


def validate_record(record: Any) -> SearchableRecord:
    """
    Validate a single candidate, converting mappings to records.

    Raises:
        ValidationError: If the candidate cannot be used as a record
    """
    if isinstance(record, Mapping):
        try:
            record = SearchableRecord.from_mapping(record)
        except Exception as e:
            raise ValidationError(f"Record validation failed: {str(e)}")
    elif not isinstance(record, SearchableRecord):
        raise ValidationError(f"Invalid record type: {type(record).__name__}")

    if isinstance(record.id, bool) or not isinstance(record.id, (int, str)):
        raise ValidationError(f"Record ID must be an int or str, got {type(record.id).__name__}")

    return record


def validate_candidates(candidates: Any) -> List[SearchableRecord]:
    """
    Validate a candidate collection and snapshot it as a list.

    Args:
        candidates: Iterable of SearchableRecord instances or mappings

    Returns:
        Records in their original order

    Raises:
        ValidationError: If the collection is not iterable, holds an invalid
            candidate or repeats a record ID
    """
    if candidates is None or isinstance(candidates, (str, bytes, Mapping)):
        raise ValidationError("Candidates must be an iterable of records")
    if not isinstance(candidates, Iterable):
        raise ValidationError(f"Candidates must be iterable, got {type(candidates).__name__}")

    records = []
    seen_ids = set()
    for index, candidate in enumerate(candidates):
        try:
            record = validate_record(candidate)
        except ValidationError as e:
            raise ValidationError(f"Candidate {index}: {str(e)}")

        if record.id in seen_ids:
            raise ValidationError(f"Duplicate record ID found: {record.id}")
        seen_ids.add(record.id)
        records.append(record)

    return records


def validate_filters(filters: Any) -> Optional[SearchFilters]:
    """
    Normalise the optional filter argument.

    Filter values themselves are never rejected; only a filter container
    of the wrong type is.

    Raises:
        ValidationError: If filters is neither SearchFilters, a mapping nor None
    """
    if filters is None or isinstance(filters, SearchFilters):
        return filters
    if isinstance(filters, Mapping):
        return SearchFilters.from_mapping(filters)
    raise ValidationError(f"Invalid filters type: {type(filters).__name__}")
