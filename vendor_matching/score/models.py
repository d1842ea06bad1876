"""Vendor-request matching types."""
import math
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator

Icon = Literal["check", "warning", "info", "star"]
Severity = Literal["low", "medium", "high"]
Confidence = Literal["high", "medium", "low"]
Urgency = Literal["low", "medium", "high", "emergency"]


class MatchFactor(BaseModel):
    """Individual scoring factor result."""

    model_config = ConfigDict(frozen=True)

    name: str
    score: float = Field(ge=0, le=100)
    weight: float = Field(ge=0, le=1)
    weighted: float
    reason: str
    icon: Icon = "info"


class MatchWarning(BaseModel):
    """Potential issue with a match, surfaced alongside a still-valid score."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    message: str
    factor: str


class MatchScoreResult(BaseModel):
    """Complete match score result for a vendor-request pair."""

    model_config = ConfigDict(frozen=True)

    vendor_id: str
    total_score: int = Field(ge=0, le=100)
    confidence: Confidence
    factors: Tuple[MatchFactor, ...]
    warnings: Tuple[MatchWarning, ...] = ()
    recommended: bool = False
    rank: Optional[int] = None
    scoring_version: str

    def factor(self, name: str) -> Optional[MatchFactor]:
        """Look up a factor by name."""
        for f in self.factors:
            if f.name == name:
                return f
        return None

    @property
    def has_high_severity_warning(self) -> bool:
        return any(w.severity == "high" for w in self.warnings)


def _none_to_empty(value):
    return () if value is None else value


def _nan_to_none(value):
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


class ServiceRequest(BaseModel):
    """Service request record as supplied by the data layer."""

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    id: str
    service_type: str
    urgency: Urgency = "medium"
    zip_code: Optional[str] = None
    property_location: str = ""
    property_address: Optional[str] = None
    budget_range: Optional[str] = None
    # Legacy budget fields
    budget_min: Optional[float] = None
    budget_max: Optional[float] = None
    service_details: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None

    @field_validator("budget_min", "budget_max", mode="before")
    @classmethod
    def _clean_budget(cls, value):
        return _nan_to_none(value)

    @field_validator("property_location", mode="before")
    @classmethod
    def _location_text(cls, value):
        return value or ""

    @field_validator("urgency", mode="before")
    @classmethod
    def _default_urgency(cls, value):
        return str(value).strip().lower() if value else "medium"


class Vendor(BaseModel):
    """Vendor profile as supplied by the data layer."""

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    id: str
    business_name: str = ""
    status: str = "active"
    services: Tuple[str, ...] = ()
    service_areas: Tuple[str, ...] = ()
    service_specialties: Optional[Dict[str, Optional[List[str]]]] = None
    emergency_services: bool = False
    service_hours_weekdays: bool = False
    service_hours_weekends: bool = False
    service_hours_24_7: bool = False
    job_size_range: Optional[Tuple[str, ...]] = None
    licensed: bool = False
    insured: bool = False
    performance_score: float = 50.0
    total_reviews: int = 0

    @field_validator("services", "service_areas", mode="before")
    @classmethod
    def _clean_lists(cls, value):
        return _none_to_empty(value)

    @field_validator("business_name", mode="before")
    @classmethod
    def _name_text(cls, value):
        return value or ""

    @field_validator("status", mode="before")
    @classmethod
    def _default_status(cls, value):
        return str(value).strip().lower() if value else "active"

    @field_validator(
        "emergency_services",
        "service_hours_weekdays",
        "service_hours_weekends",
        "service_hours_24_7",
        "licensed",
        "insured",
        mode="before"
    )
    @classmethod
    def _clean_flags(cls, value):
        value = _nan_to_none(value)
        return False if value is None else value

    @field_validator("performance_score", mode="before")
    @classmethod
    def _clean_performance(cls, value):
        value = _nan_to_none(value)
        return 50.0 if value is None else value

    @field_validator("total_reviews", mode="before")
    @classmethod
    def _clean_reviews(cls, value):
        value = _nan_to_none(value)
        return 0 if value is None else value


class VendorMatchData(Vendor):
    """Vendor profile plus externally computed historical statistics."""

    pending_jobs_count: Optional[int] = None
    avg_response_time_hours: Optional[float] = None
    acceptance_rate: Optional[float] = None
    completion_rate: Optional[float] = None

    @field_validator(
        "pending_jobs_count",
        "avg_response_time_hours",
        "acceptance_rate",
        "completion_rate",
        mode="before"
    )
    @classmethod
    def _clean_stats(cls, value):
        return _nan_to_none(value)


class VendorWithMatchScore(VendorMatchData):
    """Vendor with match score attached, for display."""

    match_score: MatchScoreResult


class MatchingContext(BaseModel):
    """Request-derived data computed once and shared by every vendor scoring call."""

    model_config = ConfigDict(frozen=True)

    request: ServiceRequest
    zip_code: Optional[str]
    service_type: str
    urgency: Urgency
    is_emergency: bool
    is_weekend: bool
    budget_range: Optional[str] = None
    budget_min: Optional[float] = None
    budget_max: Optional[float] = None
    service_details: Optional[Dict[str, Any]] = None


class ScoringMeta(BaseModel):
    total_eligible: int
    total_recommended: int
    average_score: int
    scoring_version: str


class Suggestions(BaseModel):
    """Recommended vendors and everyone else, for the admin matching view."""

    request: Dict[str, Any]
    suggestions: List[VendorWithMatchScore]
    other_vendors: List[VendorWithMatchScore]
    meta: ScoringMeta
