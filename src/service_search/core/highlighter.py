"""Highlighting of matched terms in display text."""

import re
from typing import Iterable, List, Optional

from .config import DEFAULT_CONFIG, SearchConfig


def _ordered_terms(terms: Iterable[str]) -> List[str]:
    """Unique non-empty terms, longest first, ties alphabetical."""
    unique = {term for term in terms if term}
    return sorted(unique, key=lambda term: (-len(term), term))


def highlight(
    text: str,
    matched_terms: Iterable[str],
    config: Optional[SearchConfig] = None
) -> str:
    """
    Wrap every case-insensitive occurrence of each matched term in markers.

    Terms are applied longest first. Each pass works on the output of the
    previous one but never rewrites inside an inserted marker, so a shorter
    term found within a highlighted span ends up nested, e.g.
    ``<mark>f<mark>oo</mark>d</mark>``.

    Args:
        text: Display text
        matched_terms: Terms to emphasise
        config: Supplies the opening/closing markers

    Returns:
        Text with markers inserted, or ``text`` unchanged when there is
        nothing to highlight
    """
    config = config or DEFAULT_CONFIG
    terms = _ordered_terms(matched_terms)
    if not text or not terms:
        return text

    opening, closing = config.highlight_open, config.highlight_close
    marker_pattern = re.compile(f"({re.escape(opening)}|{re.escape(closing)})")

    highlighted = text
    for term in terms:
        term_pattern = re.compile(re.escape(term), re.IGNORECASE)
        segments = marker_pattern.split(highlighted)

        # Odd indexes are the markers captured by split
        for index in range(0, len(segments), 2):
            segments[index] = term_pattern.sub(
                lambda match: f"{opening}{match.group(0)}{closing}",
                segments[index]
            )
        highlighted = "".join(segments)

    return highlighted
