"""Vendor-request match scoring."""
from vendor_matching.score.context import create_matching_context, is_weekend, resolve_request_zip
from vendor_matching.score.enrichment import attach_match_score, enrich_vendor_with_match_data
from vendor_matching.score.factors import (
    FACTOR_ORDER,
    calculate_availability,
    calculate_capacity,
    calculate_location_match,
    calculate_performance_score,
    calculate_price_fit,
    calculate_response_time,
    calculate_service_match,
    calculate_specialty_match,
)
from vendor_matching.score.models import (
    MatchFactor,
    MatchingContext,
    MatchScoreResult,
    MatchWarning,
    ScoringMeta,
    ServiceRequest,
    Suggestions,
    Vendor,
    VendorMatchData,
    VendorWithMatchScore,
)
from vendor_matching.score.rules import SCORING_VERSION
from vendor_matching.score.scorer import (
    build_suggestions,
    calculate_match_score,
    calculate_match_scores,
    determine_confidence,
    get_scoring_meta,
    results_to_frame,
)
from vendor_matching.score.scoring_config import SCORING_CONFIG, ScoringConfig, load_scoring_config
from vendor_matching.score.tiers import get_score_tier

__all__ = [
    "FACTOR_ORDER",
    "SCORING_CONFIG",
    "SCORING_VERSION",
    "MatchFactor",
    "MatchingContext",
    "MatchScoreResult",
    "MatchWarning",
    "ScoringConfig",
    "ScoringMeta",
    "ServiceRequest",
    "Suggestions",
    "Vendor",
    "VendorMatchData",
    "VendorWithMatchScore",
    "attach_match_score",
    "build_suggestions",
    "calculate_availability",
    "calculate_capacity",
    "calculate_location_match",
    "calculate_match_score",
    "calculate_match_scores",
    "calculate_performance_score",
    "calculate_price_fit",
    "calculate_response_time",
    "calculate_service_match",
    "calculate_specialty_match",
    "create_matching_context",
    "determine_confidence",
    "enrich_vendor_with_match_data",
    "get_score_tier",
    "get_scoring_meta",
    "is_weekend",
    "load_scoring_config",
    "resolve_request_zip",
    "results_to_frame",
]
