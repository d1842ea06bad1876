"""Price fit factor."""
from typing import Dict, Iterable, Optional, Tuple

from vendor_matching.score.factors.base import PRICE_FIT, FactorResult, build_factor, is_missing
from vendor_matching.score.reasons import format_reason
from vendor_matching.score.scoring_config import SCORING_CONFIG, PriceRange, ScoringConfig

NOT_SURE = "not_sure"

Range = Tuple[float, float]


def classify_range_overlap(first: Range, second: Range) -> str:
    """
    Classify how two (min, max) ranges overlap.

    Returns:
        "full" if either range contains the other, "partial" if they
        intersect otherwise, "none" if disjoint
    """
    first_min, first_max = first
    second_min, second_max = second

    if (first_min >= second_min and first_max <= second_max) or \
            (second_min >= first_min and second_max <= first_max):
        return "full"

    if first_min <= second_max and second_min <= first_max:
        return "partial"

    return "none"


def vendor_price_range(
    job_size_range: Optional[Iterable[str]],
    job_sizes: Dict[str, PriceRange]
) -> Optional[Range]:
    """Union of the vendor's declared job-size buckets; unknown buckets are ignored."""
    known = [job_sizes[key] for key in job_size_range or () if key in job_sizes]
    if not known:
        return None
    return min(r.min for r in known), max(r.max for r in known)


def calculate_price_fit(
    vendor_job_size_range: Optional[Iterable[str]],
    budget_range: Optional[str],
    budget_min: Optional[float] = None,
    budget_max: Optional[float] = None,
    config: Optional[ScoringConfig] = None
) -> FactorResult:
    """
    Score how well the vendor's typical job size matches the request budget.

    Args:
        vendor_job_size_range: Vendor job-size bucket keys
        budget_range: Request budget bucket key
        budget_min: Legacy numeric budget floor, used without budget_range
        budget_max: Legacy numeric budget ceiling, used without budget_range
        config: Scoring configuration

    Returns:
        Tuple of (factor, warning)
    """
    config = config or SCORING_CONFIG
    rules = config.price_fit
    weight = config.weights.price_fit

    has_legacy_budget = not (is_missing(budget_min) and is_missing(budget_max))
    if budget_range == NOT_SURE or (not budget_range and not has_legacy_budget):
        return build_factor(PRICE_FIT, rules.no_data_score, weight,
                            format_reason("PRICE_NO_BUDGET"), "info"), None

    vendor_range = vendor_price_range(vendor_job_size_range, rules.job_sizes)
    if vendor_range is None:
        return build_factor(PRICE_FIT, rules.no_data_score, weight,
                            format_reason("PRICE_VENDOR_UNKNOWN"), "info"), None

    if budget_range:
        budget = rules.budget_ranges.get(budget_range)
        if budget is None:
            return build_factor(PRICE_FIT, rules.no_data_score, weight,
                                format_reason("PRICE_INVALID_BUDGET"), "info"), None
        request_range = (budget.min, budget.max)
    else:
        request_range = (
            0.0 if is_missing(budget_min) else budget_min,
            float("inf") if is_missing(budget_max) else budget_max,
        )

    overlap = classify_range_overlap(request_range, vendor_range)

    if overlap == "full":
        factor = build_factor(PRICE_FIT, rules.good_fit_score, weight,
                              format_reason("PRICE_FULL"), "check")
    elif overlap == "partial":
        factor = build_factor(PRICE_FIT, rules.partial_fit_score, weight,
                              format_reason("PRICE_PARTIAL"), "info")
    else:
        factor = build_factor(PRICE_FIT, rules.poor_fit_score, weight,
                              format_reason("PRICE_NONE"), "warning")
    return factor, None
