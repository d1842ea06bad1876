"""Validated scoring configuration.

The configuration is loaded once per process. Anything that would make the
engine miscompute (weights not summing to 1.0, unordered tier tables,
inverted ranges) fails here, at load time, and never inside scoring.
"""
import copy
import json
import logging
import math
from pathlib import Path
from typing import Annotated, Dict, Literal, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from vendor_matching.config import settings
from vendor_matching.score.rules import DEFAULT_SCORING_CONFIG

logger = logging.getLogger(__name__)

WEIGHT_SUM_TOLERANCE = 0.001

Score = Annotated[float, Field(ge=0, le=100)]

# Tier levels that have reason templates
ResponseTimeLevel = Literal["excellent", "good", "average", "poor", "very_slow"]
CapacityLevel = Literal["available", "good", "limited", "busy"]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class Weights(_Frozen):
    """Per-factor weights, each in [0, 1], summing to 1.0."""

    service_match: float = Field(ge=0, le=1)
    location_match: float = Field(ge=0, le=1)
    performance_score: float = Field(ge=0, le=1)
    response_time: float = Field(ge=0, le=1)
    availability: float = Field(ge=0, le=1)
    specialty_match: float = Field(ge=0, le=1)
    capacity: float = Field(ge=0, le=1)
    price_fit: float = Field(ge=0, le=1)

    @model_validator(mode="after")
    def _check_sum(self):
        total = sum(self.model_dump().values())
        if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
            raise ValueError(f"Match scoring weights sum to {total}, expected 1.0")
        return self


class Thresholds(_Frozen):
    recommended: Score
    high_confidence: Score
    medium_confidence: Score
    max_recommendations: int = Field(ge=0)
    high_confidence_data_ratio: float = Field(ge=0, le=1)
    medium_confidence_data_ratio: float = Field(ge=0, le=1)

    @model_validator(mode="after")
    def _check_order(self):
        if self.high_confidence < self.medium_confidence:
            raise ValueError(
                f"high_confidence ({self.high_confidence}) must be >= "
                f"medium_confidence ({self.medium_confidence})"
            )
        return self


class ServiceMatchConfig(_Frozen):
    exact_match_score: Score
    no_match_score: Score


class LocationMatchConfig(_Frozen):
    exact_zip_score: Score
    prefix4_score: Score
    prefix3_score: Score
    state_match_score: Score
    no_match_score: Score
    zip_unknown_score: Score
    no_service_areas_score: Score


def _check_ascending(bounds, name: str):
    if not bounds:
        raise ValueError(f"{name} must not be empty")
    for lower, upper in zip(bounds, bounds[1:]):
        if not upper > lower:
            raise ValueError(f"{name} must be strictly ascending, got {lower} then {upper}")
    if not math.isinf(bounds[-1]):
        raise ValueError(f"last {name} bound must be unbounded (inf), got {bounds[-1]}")


class ResponseTimeBucket(_Frozen):
    max_hours: float = Field(ge=0)
    score: Score
    level: ResponseTimeLevel


class ResponseTimeConfig(_Frozen):
    buckets: Tuple[ResponseTimeBucket, ...]
    no_data_score: Score

    @field_validator("buckets")
    @classmethod
    def _check_buckets(cls, buckets):
        _check_ascending([b.max_hours for b in buckets], "response time buckets")
        return buckets


class AvailabilityConfig(_Frozen):
    emergency_match_score: Score
    emergency_no_match_score: Score
    standard_score: Score
    full_availability_bonus: float = Field(ge=0)
    weekend_bonus: float = Field(ge=0)


class SpecialtyMatchConfig(_Frozen):
    has_specialty_score: Score
    no_specialty_required_score: Score
    missing_specialty_score: Score
    detail_fields: Tuple[str, ...]


class CapacityTier(_Frozen):
    max_jobs: float = Field(ge=0)
    score: Score
    level: CapacityLevel


class CapacityConfig(_Frozen):
    tiers: Tuple[CapacityTier, ...]
    no_data_score: Score

    @field_validator("tiers")
    @classmethod
    def _check_tiers(cls, tiers):
        _check_ascending([t.max_jobs for t in tiers], "capacity tiers")
        return tiers


class PriceRange(_Frozen):
    min: float = Field(ge=0)
    max: float

    @model_validator(mode="after")
    def _check_bounds(self):
        if self.max < self.min:
            raise ValueError(f"price range max ({self.max}) is below min ({self.min})")
        return self


class PriceFitConfig(_Frozen):
    good_fit_score: Score
    partial_fit_score: Score
    no_data_score: Score
    poor_fit_score: Score
    budget_ranges: Dict[str, PriceRange]
    job_sizes: Dict[str, PriceRange]


class ScoringConfig(_Frozen):
    """Complete, versioned scoring configuration."""

    version: str
    weights: Weights
    thresholds: Thresholds
    service: ServiceMatchConfig
    location: LocationMatchConfig
    response_time: ResponseTimeConfig
    availability: AvailabilityConfig
    specialty: SpecialtyMatchConfig
    capacity: CapacityConfig
    price_fit: PriceFitConfig


def _deep_merge(base: Dict, override: Dict) -> Dict:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_scoring_config(
    path: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict] = None
) -> ScoringConfig:
    """
    Build and validate the scoring configuration.

    Args:
        path: Optional JSON file overriding any subset of the defaults
        overrides: Optional dict applied after the file

    Returns:
        Validated ScoringConfig

    Raises:
        FileNotFoundError: If path is given but doesn't exist
        ValueError: If the resulting configuration is invalid
    """
    raw = DEFAULT_SCORING_CONFIG
    source = "defaults"

    if path is not None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Scoring config not found: {path}")
        with open(path, encoding="utf-8") as f:
            raw = _deep_merge(raw, json.load(f))
        source = str(path)

    if overrides:
        raw = _deep_merge(raw, overrides)

    config = ScoringConfig.model_validate(raw)
    logger.info(f"Loaded scoring config v{config.version} from {source}")
    return config


# Process-wide configuration, loaded once at import
SCORING_CONFIG = load_scoring_config(settings.scoring_config_path)
