"""Availability / urgency factor."""
from typing import Optional

from vendor_matching.score.factors.base import AVAILABILITY, FactorResult, build_factor
from vendor_matching.score.models import MatchWarning
from vendor_matching.score.reasons import format_reason
from vendor_matching.score.scoring_config import SCORING_CONFIG, ScoringConfig


def calculate_availability(
    emergency_services: bool,
    weekdays: bool,
    weekends: bool,
    is_24_7: bool,
    is_emergency: bool,
    is_weekend: bool,
    config: Optional[ScoringConfig] = None
) -> FactorResult:
    """
    Score how well vendor availability matches request urgency.

    Args:
        emergency_services: Vendor offers emergency services
        weekdays: Vendor works weekdays
        weekends: Vendor works weekends
        is_24_7: Vendor is available 24/7
        is_emergency: Request urgency is "emergency"
        is_weekend: Request falls on a weekend
        config: Scoring configuration

    Returns:
        Tuple of (factor, warning). Emergency requests against vendors
        without emergency services raise a high-severity warning.
    """
    config = config or SCORING_CONFIG
    rules = config.availability
    weight = config.weights.availability

    if is_emergency:
        if emergency_services:
            return build_factor(AVAILABILITY, rules.emergency_match_score, weight,
                                format_reason("AVAIL_EMERGENCY"), "check"), None

        factor = build_factor(AVAILABILITY, rules.emergency_no_match_score, weight,
                              format_reason("AVAIL_NO_EMERGENCY"), "warning")
        warning = MatchWarning(
            severity="high",
            message=format_reason("WARN_NO_EMERGENCY"),
            factor=AVAILABILITY,
        )
        return factor, warning

    score = rules.standard_score
    code = "AVAIL_STANDARD"
    icon = "info"

    if is_24_7:
        score += rules.full_availability_bonus
        code = "AVAIL_24_7"
        icon = "star"
    elif is_weekend and weekends:
        score += rules.weekend_bonus
        code = "AVAIL_WEEKEND"
        icon = "check"
    elif weekdays:
        code = "AVAIL_WEEKDAY"
        icon = "check"

    # build_factor caps at 100
    return build_factor(AVAILABILITY, score, weight, format_reason(code), icon), None
