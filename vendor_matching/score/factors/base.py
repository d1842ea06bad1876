"""Shared pieces for factor calculators."""
import math
from typing import Optional, Tuple

from vendor_matching.score.models import Icon, MatchFactor, MatchWarning
from vendor_matching.score.rules import MAX_SCORE, MIN_SCORE

SERVICE_MATCH = "Service Match"
LOCATION = "Location"
PERFORMANCE = "Performance"
RESPONSE_TIME = "Response Time"
AVAILABILITY = "Availability"
SPECIALTY = "Specialty"
CAPACITY = "Capacity"
PRICE_FIT = "Price Fit"

# Fixed order of factors in every MatchScoreResult
FACTOR_ORDER = (
    SERVICE_MATCH,
    LOCATION,
    PERFORMANCE,
    RESPONSE_TIME,
    AVAILABILITY,
    SPECIALTY,
    CAPACITY,
    PRICE_FIT,
)

FactorResult = Tuple[MatchFactor, Optional[MatchWarning]]


def clamp_score(score: float) -> float:
    return max(MIN_SCORE, min(MAX_SCORE, score))


def is_missing(value) -> bool:
    """None or NaN."""
    return value is None or (isinstance(value, float) and math.isnan(value))


def build_factor(name: str, score: float, weight: float, reason: str, icon: Icon) -> MatchFactor:
    """Create a factor with the score clamped to [0, 100] before weighting."""
    score = clamp_score(score)
    return MatchFactor(
        name=name,
        score=score,
        weight=weight,
        weighted=score * weight,
        reason=reason,
        icon=icon,
    )
