"""Response time factor."""
from typing import Optional

from vendor_matching.score.factors.base import RESPONSE_TIME, FactorResult, build_factor, is_missing
from vendor_matching.score.reasons import format_reason, round_half_up
from vendor_matching.score.scoring_config import SCORING_CONFIG, ScoringConfig

ICONS = {
    "excellent": "star",
    "good": "check",
    "average": "info",
}


def calculate_response_time(
    avg_response_time_hours: Optional[float],
    config: Optional[ScoringConfig] = None
) -> FactorResult:
    """
    Bucket the vendor's historical average response time.

    No history scores neutral instead of landing in the worst bucket.
    """
    config = config or SCORING_CONFIG
    rules = config.response_time
    weight = config.weights.response_time

    if is_missing(avg_response_time_hours):
        return build_factor(RESPONSE_TIME, rules.no_data_score, weight,
                            format_reason("RESP_NO_DATA"), "info"), None

    hours = max(0.0, float(avg_response_time_hours))

    # First bucket whose bound is not exceeded; the last bucket is unbounded
    bucket = next(b for b in rules.buckets if hours <= b.max_hours)

    reason = format_reason(f"RESP_{bucket.level.upper()}", hours=round_half_up(hours))
    return build_factor(RESPONSE_TIME, bucket.score, weight, reason,
                        ICONS.get(bucket.level, "warning")), None
