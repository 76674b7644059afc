"""Autocomplete suggestions from the service category catalog."""

from typing import List, Optional

from .config import DEFAULT_CONFIG, SearchConfig


def get_search_suggestions(partial_query: str, config: Optional[SearchConfig] = None) -> List[str]:
    """
    Suggest catalog phrases containing the partial query.

    A blank query returns the head of the catalog.
    """
    config = config or DEFAULT_CONFIG
    limit = config.max_suggestions

    if not partial_query or not partial_query.strip():
        return list(config.suggestions[:limit])

    needle = partial_query.lower()
    return [s for s in config.suggestions if needle in s.lower()][:limit]
