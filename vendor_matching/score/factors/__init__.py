"""Factor calculations."""
from vendor_matching.score.factors.availability import calculate_availability
from vendor_matching.score.factors.base import FACTOR_ORDER, FactorResult
from vendor_matching.score.factors.capacity import calculate_capacity
from vendor_matching.score.factors.location_match import calculate_location_match
from vendor_matching.score.factors.performance_score import calculate_performance_score
from vendor_matching.score.factors.price_fit import calculate_price_fit
from vendor_matching.score.factors.response_time import calculate_response_time
from vendor_matching.score.factors.service_match import calculate_service_match
from vendor_matching.score.factors.specialty_match import calculate_specialty_match

__all__ = [
    "FACTOR_ORDER",
    "FactorResult",
    "calculate_availability",
    "calculate_capacity",
    "calculate_location_match",
    "calculate_performance_score",
    "calculate_price_fit",
    "calculate_response_time",
    "calculate_service_match",
    "calculate_specialty_match",
]
