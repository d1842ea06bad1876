"""Fuzzy field name matching utilities."""
from typing import Dict, Iterable, List, Optional
from rapidfuzz import fuzz


def _normalize_field(name: str) -> str:
    return " ".join(str(name).replace("_", " ").upper().split())


def find_field_match(
    target: str,
    candidate_fields: Iterable[str],
    threshold: float = 88.0
) -> Optional[str]:
    """
    Find the best matching field name using fuzzy string matching.

    Args:
        target: The field name to match
        candidate_fields: Candidate field names
        threshold: Minimum similarity score (0-100)

    Returns:
        Best matching field name or None if below threshold
    """
    best_match = None
    best_score = 0.0

    target_key = _normalize_field(target)
    for field in candidate_fields:
        score = fuzz.ratio(target_key, _normalize_field(field))
        if score > best_score:
            best_score = score
            best_match = field

    if best_score >= threshold:
        return best_match
    return None


def map_fields(
    expected_fields: List[str],
    actual_fields: Iterable[str],
    threshold: float = 88.0
) -> Dict[str, str]:
    """
    Map expected field names to actual field names.

    Exact matches (ignoring case, underscores and spacing) win first; the
    remaining expected fields are then matched fuzzily. Each actual field is
    used at most once.

    Args:
        expected_fields: Canonical field names, in priority order
        actual_fields: Field names present in the record
        threshold: Minimum similarity score for fuzzy matching

    Returns:
        Dict mapping canonical names to actual names (unmatched are omitted)
    """
    actual_fields = list(actual_fields)
    mapping: Dict[str, str] = {}
    used_fields = set()

    # First pass: exact matches
    for expected in expected_fields:
        expected_key = _normalize_field(expected)
        for actual in actual_fields:
            if actual not in used_fields and _normalize_field(actual) == expected_key:
                mapping[expected] = actual
                used_fields.add(actual)
                break

    # Second pass: fuzzy matches for unmapped fields
    for expected in expected_fields:
        if expected in mapping:
            continue
        remaining = [a for a in actual_fields if a not in used_fields]
        match = find_field_match(expected, remaining, threshold)
        if match is not None:
            mapping[expected] = match
            used_fields.add(match)

    return mapping
