"""Search filter data model."""

import logging
from typing import Any, Mapping, Optional, Union
from dataclasses import dataclass
from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchFilters:
    """
    Optional pre-filters applied before ranking.

    Attributes:
        language: Language code such as "en" or "zh" (None or "any" = all)
        accessibility: When True only accessible records are kept
        distance_radius_km: Radius ceiling, number or text like "5km"
            (None or "any" = unbounded)
    """
    language: Optional[str] = None
    accessibility: Optional[bool] = None
    distance_radius_km: Union[float, str, None] = None

    @property
    def is_empty(self) -> bool:
        """Whether no filter is requested at all."""
        return not self.language and not self.accessibility and self.distance_radius_km is None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SearchFilters":
        """Build filters from a UI-style mapping ("distance" is an alias for the radius)."""
        return FiltersModel.from_mapping(data).to_filters()


class FiltersModel(BaseModel):
    """Pydantic model for filter validation in API contexts."""

    language: Optional[str] = Field(None, description="Language code or 'any'")
    accessibility: Optional[bool] = Field(None, description="Accessible records only")
    distance_radius_km: Union[float, str, None] = Field(None, description="Radius in km or 'any'")

    @field_validator('language')
    @classmethod
    def normalize_language(cls, v: Optional[str]) -> Optional[str]:
        """Blank language codes mean no language filter."""
        if v is None or not v.strip():
            return None
        return v.strip().lower()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FiltersModel":
        """
        Coerce a UI-style mapping field by field.

        Strings such as "false" or "no" become booleans. A value that cannot
        be coerced is dropped, so that field applies no filter.
        """
        raw = {
            "language": data.get("language"),
            "accessibility": data.get("accessibility"),
            "distance_radius_km": data.get("distance_radius_km", data.get("distance")),
        }

        accepted = {}
        for name, value in raw.items():
            if value is None:
                continue
            try:
                accepted[name] = getattr(cls(**{name: value}), name)
            except PydanticValidationError:
                logger.warning(f"Ignoring invalid {name} filter: {value!r}")

        return cls(**accepted)

    def to_filters(self) -> SearchFilters:
        """Convert to SearchFilters dataclass."""
        return SearchFilters(
            language=self.language,
            accessibility=self.accessibility,
            distance_radius_km=self.distance_radius_km
        )
