"""Performance score factor."""
from typing import Optional

from vendor_matching.score.factors.base import PERFORMANCE, FactorResult, build_factor, clamp_score, is_missing
from vendor_matching.score.models import MatchWarning
from vendor_matching.score.reasons import format_reason, round_half_up
from vendor_matching.score.scoring_config import SCORING_CONFIG, ScoringConfig
from vendor_matching.score.tiers import TIER_LABELS, get_score_tier

LOW_PERFORMANCE_SCORE = 30
# Neutral score used by the vendor scoring job before any reviews exist
DEFAULT_PERFORMANCE_SCORE = 50

TIER_ICONS = {
    "excellent": "star",
    "good": "star",
    "average": "info",
}


def calculate_performance_score(
    performance_score: Optional[float],
    total_reviews: Optional[int],
    config: Optional[ScoringConfig] = None
) -> FactorResult:
    """
    Use the vendor's aggregate performance score (already 0-100) directly.

    A vendor without reviews is flagged as new rather than penalized.
    """
    config = config or SCORING_CONFIG
    weight = config.weights.performance_score

    score = clamp_score(DEFAULT_PERFORMANCE_SCORE if is_missing(performance_score) else performance_score)
    has_reviews = (total_reviews or 0) > 0

    if not has_reviews:
        return build_factor(PERFORMANCE, score, weight, format_reason("PERF_NEW"), "info"), None

    tier = get_score_tier(score, has_reviews)
    reason = format_reason("PERF_RATING", label=TIER_LABELS[tier], score=round_half_up(score))
    factor = build_factor(PERFORMANCE, score, weight, reason, TIER_ICONS.get(tier, "warning"))

    if score < LOW_PERFORMANCE_SCORE:
        warning = MatchWarning(
            severity="medium",
            message=format_reason("WARN_LOW_PERFORMANCE"),
            factor=PERFORMANCE,
        )
        return factor, warning

    return factor, None
