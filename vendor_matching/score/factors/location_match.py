"""Location match factor.

Picks the single best match type across all of a vendor's service areas,
with precedence exact > prefix4 > prefix3 > state > none.
"""
from typing import Iterable, Optional

from vendor_matching.score.factors.base import LOCATION, FactorResult, build_factor
from vendor_matching.score.models import MatchWarning
from vendor_matching.score.reasons import format_reason
from vendor_matching.score.scoring_config import SCORING_CONFIG, ScoringConfig
from vendor_matching.utils.addresses import (
    extract_zip_code,
    normalize_zip_code,
    parse_service_area,
    zip_in_state,
)

# Best first
MATCH_TYPE_PRECEDENCE = ("exact", "prefix4", "prefix3", "state")
NO_MATCH = "none"


def match_service_area(zip_code: str, area: str) -> str:
    """
    Classify how one service area entry covers a zip code.

    Returns:
        "exact", "prefix4", "prefix3", "state" or "none"
    """
    kind, value = parse_service_area(area)

    if kind == "zip":
        return "exact" if value == zip_code else NO_MATCH
    if kind == "prefix":
        if zip_code.startswith(value):
            return "prefix4" if len(value) == 4 else "prefix3"
        return NO_MATCH
    if kind == "state":
        return "state" if zip_in_state(zip_code, value) else NO_MATCH
    return NO_MATCH


def best_match_type(zip_code: str, service_areas: Iterable[str]) -> str:
    """Best match type across all areas; an exact hit stops the scan."""
    best_rank = len(MATCH_TYPE_PRECEDENCE)

    for area in service_areas:
        match_type = match_service_area(zip_code, area)
        if match_type == NO_MATCH:
            continue
        rank = MATCH_TYPE_PRECEDENCE.index(match_type)
        if rank < best_rank:
            best_rank = rank
        if best_rank == 0:
            break

    if best_rank == len(MATCH_TYPE_PRECEDENCE):
        return NO_MATCH
    return MATCH_TYPE_PRECEDENCE[best_rank]


def calculate_location_match(
    vendor_service_areas: Optional[Iterable[str]],
    zip_code: Optional[str],
    request_location: Optional[str] = None,
    config: Optional[ScoringConfig] = None
) -> FactorResult:
    """
    Score how well a vendor's service areas cover the request location.

    Args:
        vendor_service_areas: Vendor service area entries
        zip_code: Resolved request zip, if any
        request_location: Free-text location used when zip_code is missing
        config: Scoring configuration

    Returns:
        Tuple of (factor, warning)
    """
    config = config or SCORING_CONFIG
    rules = config.location
    weight = config.weights.location_match

    zip_code = normalize_zip_code(zip_code) or extract_zip_code(request_location)
    if not zip_code:
        return build_factor(LOCATION, rules.zip_unknown_score, weight,
                            format_reason("LOC_UNKNOWN"), "info"), None

    service_areas = list(vendor_service_areas or ())
    if not service_areas:
        return build_factor(LOCATION, rules.no_service_areas_score, weight,
                            format_reason("LOC_NO_AREAS"), "info"), None

    match_type = best_match_type(zip_code, service_areas)

    if match_type == "exact":
        factor = build_factor(LOCATION, rules.exact_zip_score, weight,
                              format_reason("LOC_EXACT", zip=zip_code), "check")
    elif match_type == "prefix4":
        factor = build_factor(LOCATION, rules.prefix4_score, weight,
                              format_reason("LOC_PREFIX4", prefix=zip_code[:4]), "check")
    elif match_type == "prefix3":
        factor = build_factor(LOCATION, rules.prefix3_score, weight,
                              format_reason("LOC_PREFIX3", prefix=zip_code[:3]), "check")
    elif match_type == "state":
        factor = build_factor(LOCATION, rules.state_match_score, weight,
                              format_reason("LOC_STATE", zip=zip_code), "check")
    else:
        factor = build_factor(LOCATION, rules.no_match_score, weight,
                              format_reason("LOC_NONE", zip=zip_code), "warning")
        warning = MatchWarning(
            severity="medium",
            message=format_reason("WARN_NO_LOCATION"),
            factor=LOCATION,
        )
        return factor, warning

    return factor, None
