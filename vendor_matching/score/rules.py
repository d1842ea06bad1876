"""Scoring rules and constants."""
from typing import Dict, List

# Version string for the scoring algorithm.
# Increment when making changes that affect scores.
SCORING_VERSION = "1.0.0"

# How much each factor contributes to the match score (must sum to 1.0)
MATCH_SCORING_WEIGHTS: Dict[str, float] = {
    "service_match": 0.25,      # Does vendor offer the service?
    "location_match": 0.20,     # Is vendor in the right area?
    "performance_score": 0.15,  # Vendor's overall quality rating
    "response_time": 0.10,      # How fast does vendor respond?
    "availability": 0.10,       # Can vendor handle urgency level?
    "specialty_match": 0.10,    # Does vendor have required specialties?
    "capacity": 0.05,           # Is vendor available (not overloaded)?
    "price_fit": 0.05,          # Does vendor's pricing match budget?
}

# Confidence bands: high >= 75, medium 50-74, low < 50
MATCH_SCORING_THRESHOLDS: Dict[str, float] = {
    "recommended": 65,
    "high_confidence": 75,
    "medium_confidence": 50,
    "max_recommendations": 3,
    # Share of factors backed by real data needed for each band
    "high_confidence_data_ratio": 0.6,
    "medium_confidence_data_ratio": 0.4,
}

SERVICE_MATCH_RULES: Dict[str, float] = {
    "exact_match_score": 100,
    "no_match_score": 0,
}

LOCATION_MATCH_RULES: Dict[str, float] = {
    "exact_zip_score": 100,     # 19103 in service_areas
    "prefix4_score": 85,        # 1910x
    "prefix3_score": 70,        # 191xx
    "state_match_score": 40,    # PA, NJ, ...
    "no_match_score": 0,
    "zip_unknown_score": 50,
    "no_service_areas_score": 40,
}

# Ordered buckets, first bucket whose bound is not exceeded wins
RESPONSE_TIME_BUCKETS: List[Dict] = [
    {"max_hours": 4, "score": 100, "level": "excellent"},
    {"max_hours": 12, "score": 75, "level": "good"},
    {"max_hours": 24, "score": 50, "level": "average"},
    {"max_hours": 48, "score": 25, "level": "poor"},
    {"max_hours": float("inf"), "score": 0, "level": "very_slow"},
]

RESPONSE_TIME_RULES: Dict = {
    "buckets": RESPONSE_TIME_BUCKETS,
    "no_data_score": 50,
}

AVAILABILITY_RULES: Dict[str, float] = {
    "emergency_match_score": 100,
    "emergency_no_match_score": 20,
    "standard_score": 60,
    "full_availability_bonus": 20,  # 24/7 coverage
    "weekend_bonus": 15,            # weekend coverage on a weekend request
}

# Service detail fields that name a specialty
SPECIALTY_DETAIL_FIELDS: List[str] = [
    "Equipment Type",
    "Appliance Type",
    "Roof Type",
    "Service Needed",
    "Pest Type",
    "Issue Type",
]

SPECIALTY_MATCH_RULES: Dict = {
    "has_specialty_score": 100,
    "no_specialty_required_score": 60,
    "missing_specialty_score": 30,
    "detail_fields": SPECIALTY_DETAIL_FIELDS,
}

# Ordered tiers by pending job count
CAPACITY_TIERS: List[Dict] = [
    {"max_jobs": 2, "score": 100, "level": "available"},
    {"max_jobs": 4, "score": 70, "level": "good"},
    {"max_jobs": 6, "score": 40, "level": "limited"},
    {"max_jobs": float("inf"), "score": 20, "level": "busy"},
]

CAPACITY_RULES: Dict = {
    "tiers": CAPACITY_TIERS,
    "no_data_score": 60,
}

# Request budget_range -> dollars
BUDGET_RANGE_VALUES: Dict[str, Dict[str, float]] = {
    "under_500": {"min": 0, "max": 500},
    "500_1000": {"min": 500, "max": 1000},
    "1000_2500": {"min": 1000, "max": 2500},
    "2500_5000": {"min": 2500, "max": 5000},
    "5000_10000": {"min": 5000, "max": 10000},
    "10000_25000": {"min": 10000, "max": 25000},
    "25000_50000": {"min": 25000, "max": 50000},
    "50000_100000": {"min": 50000, "max": 100000},
    "over_100000": {"min": 100000, "max": float("inf")},
    "not_sure": {"min": 0, "max": float("inf")},
}

# Vendor job_size_range -> dollars
JOB_SIZE_VALUES: Dict[str, Dict[str, float]] = {
    "under_500": {"min": 0, "max": 500},
    "500_1k": {"min": 500, "max": 1000},
    "1k_5k": {"min": 1000, "max": 5000},
    "5k_10k": {"min": 5000, "max": 10000},
    "10k_25k": {"min": 10000, "max": 25000},
    "25k_plus": {"min": 25000, "max": float("inf")},
}

PRICE_FIT_RULES: Dict = {
    "good_fit_score": 100,
    "partial_fit_score": 60,
    "no_data_score": 60,
    "poor_fit_score": 30,
    "budget_ranges": BUDGET_RANGE_VALUES,
    "job_sizes": JOB_SIZE_VALUES,
}

# Full default configuration, shape of ScoringConfig
DEFAULT_SCORING_CONFIG: Dict = {
    "version": SCORING_VERSION,
    "weights": MATCH_SCORING_WEIGHTS,
    "thresholds": MATCH_SCORING_THRESHOLDS,
    "service": SERVICE_MATCH_RULES,
    "location": LOCATION_MATCH_RULES,
    "response_time": RESPONSE_TIME_RULES,
    "availability": AVAILABILITY_RULES,
    "specialty": SPECIALTY_MATCH_RULES,
    "capacity": CAPACITY_RULES,
    "price_fit": PRICE_FIT_RULES,
}

# Maximum score cap
MAX_SCORE = 100
MIN_SCORE = 0
