"""Vendor match scoring module."""
import logging
from typing import FrozenSet, Iterable, List, Optional, Sequence
import pandas as pd

from vendor_matching.score.context import resolve_request_zip
from vendor_matching.score.enrichment import attach_match_score
from vendor_matching.score.factors import (
    calculate_availability,
    calculate_capacity,
    calculate_location_match,
    calculate_performance_score,
    calculate_price_fit,
    calculate_response_time,
    calculate_service_match,
    calculate_specialty_match,
)
from vendor_matching.score.factors.base import FACTOR_ORDER
from vendor_matching.score.factors.performance_score import DEFAULT_PERFORMANCE_SCORE
from vendor_matching.score.models import (
    MatchFactor,
    MatchingContext,
    MatchScoreResult,
    MatchWarning,
    ScoringMeta,
    ServiceRequest,
    Suggestions,
    VendorMatchData,
    VendorWithMatchScore,
)
from vendor_matching.score.reasons import compose_reasons, round_half_up
from vendor_matching.score.rules import MAX_SCORE, MIN_SCORE
from vendor_matching.score.scoring_config import SCORING_CONFIG, ScoringConfig

logger = logging.getLogger(__name__)


def no_data_scores(config: ScoringConfig) -> FrozenSet[float]:
    """Neutral scores that mark an "info" factor as carrying no real data."""
    return frozenset({
        config.location.zip_unknown_score,
        config.response_time.no_data_score,
        DEFAULT_PERFORMANCE_SCORE,
    })


def determine_confidence(
    total_score: float,
    factors: Sequence[MatchFactor],
    warnings: Sequence[MatchWarning],
    config: Optional[ScoringConfig] = None
) -> str:
    """
    Determine confidence from total score and data coverage.

    Any high-severity warning caps confidence at "medium".

    Returns:
        "high", "medium" or "low"
    """
    config = config or SCORING_CONFIG
    thresholds = config.thresholds

    neutral = no_data_scores(config)
    factors_with_data = sum(1 for f in factors if f.icon != "info" or f.score not in neutral)
    data_ratio = factors_with_data / len(factors) if factors else 0.0

    if total_score >= thresholds.high_confidence and data_ratio >= thresholds.high_confidence_data_ratio:
        confidence = "high"
    elif total_score >= thresholds.medium_confidence and data_ratio >= thresholds.medium_confidence_data_ratio:
        confidence = "medium"
    else:
        confidence = "low"

    if confidence == "high" and any(w.severity == "high" for w in warnings):
        confidence = "medium"

    return confidence


def calculate_match_score(
    vendor: VendorMatchData,
    context: MatchingContext,
    config: Optional[ScoringConfig] = None
) -> MatchScoreResult:
    """
    Calculate match score for a single vendor against a request.

    Args:
        vendor: Vendor profile with historical statistics
        context: Matching context built from the request
        config: Scoring configuration

    Returns:
        MatchScoreResult with factors in FACTOR_ORDER and warnings in
        factor evaluation order
    """
    config = config or SCORING_CONFIG

    results = [
        calculate_service_match(vendor.services, context.service_type, config=config),
        calculate_location_match(
            vendor.service_areas,
            context.zip_code,
            context.request.property_location,
            config=config
        ),
        calculate_performance_score(vendor.performance_score, vendor.total_reviews, config=config),
        calculate_response_time(vendor.avg_response_time_hours, config=config),
        calculate_availability(
            emergency_services=vendor.emergency_services,
            weekdays=vendor.service_hours_weekdays,
            weekends=vendor.service_hours_weekends,
            is_24_7=vendor.service_hours_24_7,
            is_emergency=context.is_emergency,
            is_weekend=context.is_weekend,
            config=config
        ),
        calculate_specialty_match(
            vendor.service_specialties,
            context.service_type,
            context.service_details,
            config=config
        ),
        calculate_capacity(vendor.pending_jobs_count, config=config),
        calculate_price_fit(
            vendor.job_size_range,
            context.budget_range,
            context.budget_min,
            context.budget_max,
            config=config
        ),
    ]

    factors = tuple(factor for factor, _ in results)
    warnings = tuple(warning for _, warning in results if warning is not None)

    raw_total = sum(f.weighted for f in factors)
    total_score = round_half_up(max(MIN_SCORE, min(MAX_SCORE, raw_total)))

    confidence = determine_confidence(total_score, factors, warnings, config)

    logger.debug(f"Vendor {vendor.id}: total={total_score} confidence={confidence} warnings={len(warnings)}")

    return MatchScoreResult(
        vendor_id=vendor.id,
        total_score=total_score,
        confidence=confidence,
        factors=factors,
        warnings=warnings,
        recommended=total_score >= config.thresholds.recommended,
        scoring_version=config.version,
    )


def rank_key(scored: VendorWithMatchScore):
    """Sort key: total score desc, then performance score desc, then vendor id."""
    return (-scored.match_score.total_score, -scored.performance_score, scored.id)


def calculate_match_scores(
    vendors: Iterable[VendorMatchData],
    context: MatchingContext,
    config: Optional[ScoringConfig] = None
) -> List[VendorWithMatchScore]:
    """
    Score and rank vendors for one request.

    Vendors are expected to be pre-filtered to active, eligible ones.
    Ranks start at 1 and only the top max_recommendations recommended
    vendors keep their recommended flag.

    Args:
        vendors: Candidate vendors
        context: Matching context built from the request
        config: Scoring configuration

    Returns:
        Vendors with match scores attached, best first
    """
    config = config or SCORING_CONFIG

    scored = [attach_match_score(v, calculate_match_score(v, context, config)) for v in vendors]
    scored.sort(key=rank_key)

    ranked = []
    recommended_count = 0
    for index, vendor in enumerate(scored, start=1):
        recommended = vendor.match_score.recommended
        if recommended:
            recommended_count += 1
            if recommended_count > config.thresholds.max_recommendations:
                recommended = False

        match_score = vendor.match_score.model_copy(update={"rank": index, "recommended": recommended})
        ranked.append(vendor.model_copy(update={"match_score": match_score}))

    logger.info(
        f"Ranked {len(ranked)} vendors for request {context.request.id}: "
        f"{min(recommended_count, config.thresholds.max_recommendations)} recommended"
    )
    return ranked


def get_scoring_meta(
    scored_vendors: Sequence[VendorWithMatchScore],
    config: Optional[ScoringConfig] = None
) -> ScoringMeta:
    """Summary figures for a ranked vendor list."""
    config = config or SCORING_CONFIG

    total_eligible = len(scored_vendors)
    total_recommended = sum(1 for v in scored_vendors if v.match_score.recommended)
    average_score = (
        round_half_up(sum(v.match_score.total_score for v in scored_vendors) / total_eligible)
        if total_eligible > 0 else 0
    )

    return ScoringMeta(
        total_eligible=total_eligible,
        total_recommended=total_recommended,
        average_score=average_score,
        scoring_version=config.version,
    )


def build_suggestions(
    request: ServiceRequest,
    scored_vendors: Sequence[VendorWithMatchScore],
    config: Optional[ScoringConfig] = None
) -> Suggestions:
    """Split a ranked list into recommended suggestions and other vendors."""
    return Suggestions(
        request={
            "id": request.id,
            "service_type": request.service_type,
            "property_location": request.property_location,
            "zip_code": resolve_request_zip(request),
            "urgency": request.urgency,
        },
        suggestions=[v for v in scored_vendors if v.match_score.recommended],
        other_vendors=[v for v in scored_vendors if not v.match_score.recommended],
        meta=get_scoring_meta(scored_vendors, config),
    )


def results_to_frame(scored_vendors: Sequence[VendorWithMatchScore]) -> pd.DataFrame:
    """
    Flatten ranked vendors into a DataFrame.

    Returns:
        One row per vendor with rank, ids, total, confidence, recommended,
        one column per factor score and the joined warning text
    """
    columns = ["rank", "vendor_id", "business_name", "total_score", "confidence", "recommended"]
    columns += list(FACTOR_ORDER) + ["warnings"]

    rows = []
    for vendor in scored_vendors:
        result = vendor.match_score
        row = {
            "rank": result.rank,
            "vendor_id": vendor.id,
            "business_name": vendor.business_name,
            "total_score": result.total_score,
            "confidence": result.confidence,
            "recommended": result.recommended,
            "warnings": compose_reasons(w.message for w in result.warnings),
        }
        for factor in result.factors:
            row[factor.name] = factor.score
        rows.append(row)

    return pd.DataFrame(rows, columns=columns)
