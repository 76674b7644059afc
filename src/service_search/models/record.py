"""Searchable record data model with validation."""

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union
from dataclasses import dataclass, field
from pydantic import BaseModel, Field, field_validator


class HoursStatus(str, Enum):
    """Opening status reported for an organisation today."""
    OPEN = "open"
    CLOSED = "closed"
    CLOSING_SOON = "closing-soon"
    UNKNOWN = "unknown"


# Keys consumed by from_mapping; anything else lands in metadata
_KNOWN_KEYS = {
    "id", "name", "type", "category", "description", "address",
    "services", "languages", "accessibility", "verified", "rating",
    "distance", "distance_km", "hours", "hours_today", "hours_status",
    "phone", "website", "review_count", "reviewCount", "metadata",
}


@dataclass
class SearchableRecord:
    """
    Community organisation or service that can be searched and ranked.

    Attributes:
        id: Unique record identifier within one candidate collection
        name: Organisation name
        category: Organisation type, e.g. "Food Relief"
        description: Free-text description of what is offered
        address: Suburb or street address
        services: Short service labels and keywords
        languages: Languages spoken at the organisation
        accessibility: Wheelchair/physical accessibility flag
        verified: Whether the organisation has been verified
        rating: Review score, conventionally 0.0-5.0
        distance: Distance from the searcher, number or text like "1.5 km"
        hours_today: Free-text opening hours for today
        hours_status: Current opening status
        phone: Contact phone number
        website: Optional website URL
        review_count: Number of reviews behind the rating
        metadata: Additional fields the engine does not read
    """
    id: Union[int, str]
    name: str
    category: str = ""
    description: str = ""
    address: str = ""
    services: List[str] = field(default_factory=list)
    languages: List[str] = field(default_factory=list)
    accessibility: bool = False
    verified: bool = False
    rating: float = 0.0
    distance: Union[float, str, None] = None
    hours_today: str = ""
    hours_status: HoursStatus = HoursStatus.UNKNOWN
    phone: str = ""
    website: Optional[str] = None
    review_count: int = 0
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate record after initialization."""
        if self.id is None or (isinstance(self.id, str) and not self.id.strip()):
            raise ValueError("Record ID cannot be empty")
        if not self.name or not self.name.strip():
            raise ValueError("Record name cannot be empty")
        if not isinstance(self.hours_status, HoursStatus):
            try:
                self.hours_status = HoursStatus(str(self.hours_status).lower())
            except ValueError:
                raise ValueError(f"Invalid hours status: {self.hours_status}")
        if self.rating < 0:
            raise ValueError("Rating cannot be negative")
        # Absent collections are treated as empty
        self.services = list(self.services or [])
        self.languages = list(self.languages or [])
        self.category = self.category or ""
        self.description = self.description or ""
        self.address = self.address or ""
        self.hours_today = self.hours_today or ""

    @property
    def distance_km(self) -> Optional[float]:
        """Numeric distance in kilometres, or None when it cannot be parsed."""
        from ..utils.text_processing import parse_distance
        return parse_distance(self.distance)

    @property
    def is_open(self) -> bool:
        """Whether the organisation reports itself open right now."""
        return self.hours_status == HoursStatus.OPEN

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SearchableRecord":
        """
        Build a record from the dataset dictionary shape.

        Accepts either ``type`` or ``category`` for the organisation type and
        either a nested ``hours`` mapping (``today``/``status``) or flat
        ``hours_today``/``hours_status`` keys. Unknown keys are kept in
        ``metadata``.
        """
        return RecordModel.from_mapping(data).to_record()


class RecordModel(BaseModel):
    """Pydantic model for record validation at ingestion boundaries."""

    id: Union[int, str] = Field(..., description="Unique record identifier")
    name: str = Field(..., min_length=1, description="Organisation name")
    category: str = Field("", description="Organisation type")
    description: str = Field("", description="Organisation description")
    address: str = Field("", description="Address or suburb")
    services: List[str] = Field(default_factory=list, description="Service labels")
    languages: List[str] = Field(default_factory=list, description="Languages spoken")
    accessibility: bool = Field(False, description="Wheelchair accessible")
    verified: bool = Field(False, description="Verified organisation")
    rating: float = Field(0.0, ge=0.0, description="Review score")
    distance: Union[float, str, None] = Field(None, description="Distance from searcher")
    hours_today: str = Field("", description="Opening hours today")
    hours_status: HoursStatus = Field(HoursStatus.UNKNOWN, description="Opening status")
    phone: str = Field("", description="Contact phone number")
    website: Optional[str] = Field(None, description="Website URL")
    review_count: int = Field(0, ge=0, description="Number of reviews")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Additional fields")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure name is not just whitespace."""
        if not v.strip():
            raise ValueError('Name cannot be empty or whitespace only')
        return v.strip()

    @field_validator('hours_status', mode='before')
    @classmethod
    def normalize_hours_status(cls, v: Any) -> Any:
        """Accept status strings in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RecordModel":
        """Flatten the dataset dictionary shape into model fields."""
        hours = data.get("hours") or {}
        metadata = dict(data.get("metadata") or {})
        metadata.update({k: v for k, v in data.items() if k not in _KNOWN_KEYS})

        fields = {
            "id": data.get("id"),
            "name": data.get("name", ""),
            "category": data.get("category", data.get("type")) or "",
            "description": data.get("description") or "",
            "address": data.get("address") or "",
            "services": data.get("services") or [],
            "languages": data.get("languages") or [],
            "accessibility": bool(data.get("accessibility", False)),
            "verified": bool(data.get("verified", False)),
            "rating": data.get("rating") or 0.0,
            "distance": data.get("distance", data.get("distance_km")),
            "hours_today": data.get("hours_today", hours.get("today")) or "",
            "hours_status": data.get("hours_status", hours.get("status")) or HoursStatus.UNKNOWN,
            "phone": data.get("phone") or "",
            "website": data.get("website"),
            "review_count": data.get("review_count", data.get("reviewCount")) or 0,
            "metadata": metadata,
        }
        return cls(**fields)

    def to_record(self) -> SearchableRecord:
        """Convert to SearchableRecord dataclass."""
        return SearchableRecord(
            id=self.id,
            name=self.name,
            category=self.category,
            description=self.description,
            address=self.address,
            services=list(self.services),
            languages=list(self.languages),
            accessibility=self.accessibility,
            verified=self.verified,
            rating=self.rating,
            distance=self.distance,
            hours_today=self.hours_today,
            hours_status=self.hours_status,
            phone=self.phone,
            website=self.website,
            review_count=self.review_count,
            metadata=dict(self.metadata)
        )
