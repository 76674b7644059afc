"""Immutable configuration shared by the search components."""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, FrozenSet, Mapping, Tuple

from .exceptions import ConfigurationError
from .weights import DEFAULT_FIELD_RULES, FieldRule

DEFAULT_STOP_WORDS = frozenset({
    'a', 'an', 'and', 'are', 'as', 'at', 'be', 'by', 'for', 'from',
    'has', 'he', 'in', 'is', 'it', 'its', 'of', 'on', 'that', 'the',
    'to', 'was', 'will', 'with', 'i', 'need', 'want', 'looking', 'find',
    'help', 'me', 'my', 'can', 'you', 'please', 'am', 'im', "i'm",
    'where', 'how', 'what', 'when', 'who', 'why',
})

DEFAULT_LANGUAGE_MAP: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    'en': ('english',),
    'ar': ('arabic',),
    'zh': ('mandarin', 'chinese'),
    'hi': ('hindi',),
    'es': ('spanish',),
    'vi': ('vietnamese',),
    'it': ('italian',),
    'fa': ('farsi', 'persian'),
    'ca': ('cantonese',),
})

DEFAULT_SUGGESTIONS = (
    'food support',
    'emergency food',
    'food bank',
    'housing assistance',
    'emergency accommodation',
    'mental health support',
    'counselling services',
    'disability support',
    'aged care',
    'family services',
    'crisis support',
    'domestic violence help',
    'legal aid',
    'employment help',
    'youth services',
    'community programs',
    'health services',
    'medical help',
    'dental services',
    'translation services',
    'multicultural support',
    'aboriginal services',
    'veterans support',
    'recreation programs',
    'sports clubs',
    'lacrosse',
    'fitness programs',
    'childcare',
    'education programs',
    'training courses',
)


@dataclass(frozen=True)
class SearchConfig:
    """
    Tables and constants that drive tokenizing, filtering and scoring.

    Built once and handed to each component; nothing reads module globals
    at search time.

    Attributes:
        stop_words: Low-signal words dropped by the tokenizer
        language_map: Language code -> canonical language names
        any_sentinel: Filter value meaning "do not filter"
        field_rules: Per-term weight table
        verified_bonus: Added once for verified records
        accessibility_bonus: Added once for accessible records
        rating_threshold: Ratings strictly above this earn ``rating_bonus``
        rating_bonus: Added once for highly rated records
        open_bonus: Added once for records open now
        distance_bands: (max_km, bonus) pairs checked in order
        far_distance_km: Distances strictly above this are penalised
        far_distance_penalty: Adjustment for far records
        suggestions: Catalog used for autocomplete
        max_suggestions: Cap on returned suggestions
        highlight_open: Marker inserted before a highlighted term
        highlight_close: Marker inserted after a highlighted term
    """
    stop_words: FrozenSet[str] = DEFAULT_STOP_WORDS
    language_map: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: DEFAULT_LANGUAGE_MAP)
    any_sentinel: str = "any"
    field_rules: Tuple[FieldRule, ...] = DEFAULT_FIELD_RULES
    verified_bonus: float = 5
    accessibility_bonus: float = 5
    rating_threshold: float = 4.5
    rating_bonus: float = 10
    open_bonus: float = 8
    distance_bands: Tuple[Tuple[float, float], ...] = ((2, 15), (5, 10), (10, 5))
    far_distance_km: float = 50
    far_distance_penalty: float = -10
    suggestions: Tuple[str, ...] = DEFAULT_SUGGESTIONS
    max_suggestions: int = 8
    highlight_open: str = "<mark>"
    highlight_close: str = "</mark>"

    def __post_init__(self) -> None:
        """Validate and freeze configuration values."""
        if not self.highlight_open or not self.highlight_close:
            raise ConfigurationError("Highlight markers cannot be empty")
        if self.max_suggestions <= 0:
            raise ConfigurationError("Max suggestions must be positive")
        if not self.field_rules:
            raise ConfigurationError("At least one field rule is required")
        if not self.any_sentinel:
            raise ConfigurationError("The 'any' sentinel cannot be empty")

        # Freeze caller-supplied collections so a config can be shared
        object.__setattr__(self, "stop_words", frozenset(w.lower() for w in self.stop_words))
        object.__setattr__(self, "language_map", MappingProxyType({
            code.lower(): tuple(name.lower() for name in names)
            for code, names in self.language_map.items()
        }))
        object.__setattr__(self, "field_rules", tuple(self.field_rules))
        object.__setattr__(self, "distance_bands", tuple(
            (float(limit), float(bonus)) for limit, bonus in self.distance_bands
        ))
        object.__setattr__(self, "suggestions", tuple(self.suggestions))

    def with_overrides(self, **changes: Any) -> "SearchConfig":
        """Return a copy with selected values replaced."""
        return replace(self, **changes)

    def language_names(self, code: str) -> Tuple[str, ...]:
        """Canonical names for a language code; unknown codes map to themselves."""
        code = code.strip().lower()
        return self.language_map.get(code, (code,))

    def is_any(self, value: Any) -> bool:
        """Whether a filter value is the "do not filter" sentinel."""
        return isinstance(value, str) and value.strip().lower() == self.any_sentinel


DEFAULT_CONFIG = SearchConfig()
