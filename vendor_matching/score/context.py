"""Matching context construction."""
from datetime import datetime
from typing import Optional

from vendor_matching.score.models import MatchingContext, ServiceRequest
from vendor_matching.utils.addresses import extract_zip_code, normalize_zip_code


def is_weekend(moment: datetime) -> bool:
    """Saturday or Sunday."""
    return moment.weekday() >= 5


def resolve_request_zip(request: ServiceRequest) -> Optional[str]:
    """
    Resolve the request zip code.

    Uses the explicit zip_code field when it holds a 5-digit zip, else
    extracts one from the free-text location, then the street address.
    """
    return (
        normalize_zip_code(request.zip_code)
        or extract_zip_code(request.property_location)
        or extract_zip_code(request.property_address)
    )


def create_matching_context(
    request: ServiceRequest,
    reference_time: Optional[datetime] = None
) -> MatchingContext:
    """
    Create matching context from a service request.

    Args:
        request: The service request to match
        reference_time: Moment used for weekend classification. Defaults to
            the request's created_at, then to the current local time.

    Returns:
        Read-only MatchingContext shared across all vendor scoring calls
    """
    moment = reference_time or request.created_at or datetime.now()

    return MatchingContext(
        request=request,
        zip_code=resolve_request_zip(request),
        service_type=request.service_type,
        urgency=request.urgency,
        is_emergency=request.urgency == "emergency",
        is_weekend=is_weekend(moment),
        budget_range=request.budget_range or None,
        budget_min=request.budget_min,
        budget_max=request.budget_max,
        service_details=request.service_details or None,
    )
