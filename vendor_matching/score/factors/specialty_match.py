"""Specialty match factor."""
from typing import Dict, Iterable, List, Mapping, Optional

from vendor_matching.config import settings
from vendor_matching.score.factors.base import SPECIALTY, FactorResult, build_factor
from vendor_matching.score.reasons import format_reason
from vendor_matching.score.scoring_config import SCORING_CONFIG, ScoringConfig
from vendor_matching.utils.fuzzy import map_fields


def extract_requested_specialties(
    service_details: Optional[Mapping[str, object]],
    detail_fields: Iterable[str],
    threshold: Optional[float] = None
) -> List[str]:
    """
    Extract requested specialties from service details.

    Args:
        service_details: Free-form detail key/value pairs from the request
        detail_fields: Known field names that name a specialty, in order
        threshold: Minimum similarity for fuzzy field name resolution

    Returns:
        Lowercased specialty values, skipping empty and "Other" answers
    """
    if not service_details:
        return []

    if threshold is None:
        threshold = settings.detail_field_similarity_min

    detail_fields = list(detail_fields)
    field_map = map_fields(detail_fields, service_details.keys(), threshold)

    specialties = []
    for field in detail_fields:
        actual = field_map.get(field)
        if actual is None:
            continue
        value = service_details[actual]
        if not isinstance(value, str):
            continue
        value = value.strip()
        if value and value.lower() != "other":
            specialties.append(value.lower())

    return specialties


def find_matching_specialty(
    vendor_specialties: Optional[Dict[str, Optional[List[str]]]],
    service_type: str,
    requested_specialties: List[str]
) -> Optional[str]:
    """
    Find a vendor specialty matching any requested one.

    Matching is case-insensitive substring containment in either direction,
    so "gas furnace" matches "furnace".

    Returns:
        The matched vendor specialty (lowercased) or None
    """
    if not vendor_specialties:
        return None

    declared = [s.strip().lower() for s in vendor_specialties.get(service_type) or () if s and s.strip()]
    for requested in requested_specialties:
        for vendor_spec in declared:
            if vendor_spec in requested or requested in vendor_spec:
                return vendor_spec
    return None


def calculate_specialty_match(
    vendor_specialties: Optional[Dict[str, Optional[List[str]]]],
    requested_service: str,
    service_details: Optional[Mapping[str, object]],
    config: Optional[ScoringConfig] = None
) -> FactorResult:
    """Score vendor specialties against the specialties named in the request."""
    config = config or SCORING_CONFIG
    rules = config.specialty
    weight = config.weights.specialty_match

    requested = extract_requested_specialties(service_details, rules.detail_fields)

    if not requested:
        return build_factor(SPECIALTY, rules.no_specialty_required_score, weight,
                            format_reason("SPEC_NOT_REQUIRED"), "info"), None

    matched = find_matching_specialty(vendor_specialties, requested_service, requested)
    if matched:
        return build_factor(SPECIALTY, rules.has_specialty_score, weight,
                            format_reason("SPEC_MATCH", specialty=matched), "check"), None

    # Soft signal, not disqualifying
    return build_factor(SPECIALTY, rules.missing_specialty_score, weight,
                        format_reason("SPEC_MISSING", specialty=requested[0]), "info"), None
