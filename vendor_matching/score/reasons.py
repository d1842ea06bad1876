"""Human-readable reason generation."""
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

REASON_TEMPLATES = {
    # Service match
    "SERVICE_OFFERED": "Offers {service}",
    "SERVICE_NOT_OFFERED": "Does not offer this service",
    # Location
    "LOC_UNKNOWN": "Location not specified",
    "LOC_NO_AREAS": "Service areas not specified",
    "LOC_EXACT": "Serves zip {zip}",
    "LOC_PREFIX4": "Serves {prefix}x area",
    "LOC_PREFIX3": "Serves {prefix}xx area",
    "LOC_STATE": "Serves statewide (covers {zip})",
    "LOC_NONE": "Does not serve {zip}",
    # Performance
    "PERF_NEW": "New vendor (no reviews yet)",
    "PERF_RATING": "{label} rating ({score}/100)",
    # Response time
    "RESP_NO_DATA": "No response data yet",
    "RESP_EXCELLENT": "Fast responder (~{hours}h avg)",
    "RESP_GOOD": "Good response time (~{hours}h avg)",
    "RESP_AVERAGE": "Average response time (~{hours}h avg)",
    "RESP_POOR": "Slow response time (~{hours}h avg)",
    "RESP_VERY_SLOW": "Very slow response time (~{hours}h avg)",
    # Availability
    "AVAIL_EMERGENCY": "Emergency services available",
    "AVAIL_NO_EMERGENCY": "No emergency services",
    "AVAIL_STANDARD": "Standard availability",
    "AVAIL_24_7": "24/7 availability",
    "AVAIL_WEEKEND": "Weekend availability",
    "AVAIL_WEEKDAY": "Weekday availability",
    # Specialty
    "SPEC_NOT_REQUIRED": "No specific specialty required",
    "SPEC_MATCH": "Has {specialty} expertise",
    "SPEC_MISSING": "May not specialize in {specialty}",
    # Capacity
    "CAP_NO_DATA": "Availability unknown",
    "CAP_FREE": "Fully available",
    "CAP_JOBS": "{jobs} pending {noun}",
    "CAP_LIMITED": "{jobs} pending jobs (limited)",
    "CAP_BUSY": "{jobs} pending jobs (busy)",
    # Price fit
    "PRICE_NO_BUDGET": "Budget not specified",
    "PRICE_VENDOR_UNKNOWN": "Vendor pricing unknown",
    "PRICE_INVALID_BUDGET": "Invalid budget range",
    "PRICE_FULL": "Budget matches vendor range",
    "PRICE_PARTIAL": "Budget partially matches",
    "PRICE_NONE": "Budget may not match vendor range",
    # Warnings
    "WARN_NO_SERVICE": "Vendor does not offer this service type",
    "WARN_NO_LOCATION": "Vendor may not serve this location",
    "WARN_LOW_PERFORMANCE": "Vendor has low performance rating",
    "WARN_NO_EMERGENCY": "Vendor does not offer emergency services",
}


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves away from zero.

    Float noise below 1e-9 is discarded first so that e.g. 87.4999999999
    and 87.5 round the same way.
    """
    return int(Decimal(repr(round(value, 9))).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_reason(code: str, **values) -> str:
    """
    Format a reason code into human-readable text.

    Args:
        code: Reason code (e.g., "LOC_EXACT", "CAP_BUSY")
        **values: Values interpolated into the template

    Returns:
        Human-readable reason string, or the code itself if unknown
    """
    template = REASON_TEMPLATES.get(code)
    if template is None:
        return code
    return template.format(**values)


def compose_reasons(reasons: Iterable[str]) -> str:
    """Join reason or warning texts for single-line display."""
    return "; ".join(r for r in reasons if r)
