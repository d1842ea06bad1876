"""Capacity factor."""
from typing import Optional

from vendor_matching.score.factors.base import CAPACITY, FactorResult, build_factor, is_missing
from vendor_matching.score.reasons import format_reason
from vendor_matching.score.scoring_config import SCORING_CONFIG, ScoringConfig


def _capacity_reason(level: str, jobs: int):
    if level == "available":
        if jobs == 0:
            return format_reason("CAP_FREE"), "check"
        return format_reason("CAP_JOBS", jobs=jobs, noun="job" if jobs == 1 else "jobs"), "check"
    if level == "good":
        return format_reason("CAP_JOBS", jobs=jobs, noun="jobs"), "check"
    if level == "limited":
        return format_reason("CAP_LIMITED", jobs=jobs), "info"
    return format_reason("CAP_BUSY", jobs=jobs), "warning"


def calculate_capacity(
    pending_jobs_count: Optional[int],
    config: Optional[ScoringConfig] = None
) -> FactorResult:
    """Score the vendor's current workload from its pending job count."""
    config = config or SCORING_CONFIG
    rules = config.capacity
    weight = config.weights.capacity

    if is_missing(pending_jobs_count):
        return build_factor(CAPACITY, rules.no_data_score, weight,
                            format_reason("CAP_NO_DATA"), "info"), None

    jobs = max(0, int(pending_jobs_count))

    # First tier whose bound is not exceeded; the last tier is unbounded
    tier = next(t for t in rules.tiers if jobs <= t.max_jobs)

    reason, icon = _capacity_reason(tier.level, jobs)
    return build_factor(CAPACITY, tier.score, weight, reason, icon), None
