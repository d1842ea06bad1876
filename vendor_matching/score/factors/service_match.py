"""Service match factor."""
from typing import Iterable, Optional

from vendor_matching.score.factors.base import SERVICE_MATCH, FactorResult, build_factor
from vendor_matching.score.models import MatchWarning
from vendor_matching.score.reasons import format_reason
from vendor_matching.score.scoring_config import SCORING_CONFIG, ScoringConfig
from vendor_matching.score.taxonomy import service_label


def calculate_service_match(
    vendor_services: Iterable[str],
    requested_service: str,
    config: Optional[ScoringConfig] = None
) -> FactorResult:
    """
    Score whether the vendor offers the requested service category.

    Binary: exact category membership or nothing.
    """
    config = config or SCORING_CONFIG
    rules = config.service
    weight = config.weights.service_match

    if requested_service in set(vendor_services or ()):
        factor = build_factor(
            SERVICE_MATCH,
            rules.exact_match_score,
            weight,
            format_reason("SERVICE_OFFERED", service=service_label(requested_service)),
            "check",
        )
        return factor, None

    factor = build_factor(
        SERVICE_MATCH,
        rules.no_match_score,
        weight,
        format_reason("SERVICE_NOT_OFFERED"),
        "warning",
    )
    warning = MatchWarning(
        severity="high",
        message=format_reason("WARN_NO_SERVICE"),
        factor=SERVICE_MATCH,
    )
    return factor, warning
