"""Vendor performance tiers shared by the matching engine and vendor-facing views."""
from typing import Dict, List, Tuple

# Ordered by minimum score, first tier whose minimum is met wins
SCORE_TIERS: List[Tuple[str, float, str]] = [
    ("excellent", 85, "Excellent"),
    ("good", 70, "Good"),
    ("average", 50, "Average"),
    ("below_average", 30, "Below Average"),
    ("poor", 0, "Poor"),
]

NEW_VENDOR_TIER = "new"

TIER_LABELS: Dict[str, str] = {tier: label for tier, _, label in SCORE_TIERS}
TIER_LABELS[NEW_VENDOR_TIER] = "New Vendor"


def get_score_tier(score: float, has_reviews: bool) -> str:
    """
    Get performance tier for a 0-100 score.

    Args:
        score: Vendor performance score
        has_reviews: Whether the vendor has any reviews

    Returns:
        Tier key: "excellent", "good", "average", "below_average", "poor" or "new"
    """
    if not has_reviews:
        return NEW_VENDOR_TIER

    for tier, min_score, _ in SCORE_TIERS:
        if score >= min_score:
            return tier
    return "poor"
