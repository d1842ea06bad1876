"""Vendor enrichment: attach statistics and match scores without mutating the vendor."""
from typing import Optional

from vendor_matching.score.models import (
    MatchScoreResult,
    Vendor,
    VendorMatchData,
    VendorWithMatchScore,
)


def enrich_vendor_with_match_data(
    vendor: Vendor,
    pending_jobs_count: Optional[int] = None,
    avg_response_time_hours: Optional[float] = None,
    acceptance_rate: Optional[float] = None,
    completion_rate: Optional[float] = None
) -> VendorMatchData:
    """
    Combine a vendor profile with externally computed statistics.

    Statistics that are not supplied stay unknown (None) so the matching
    factors score them neutrally.

    Args:
        vendor: Vendor profile
        pending_jobs_count: Current pending/in-progress job count
        avg_response_time_hours: Historical average response time
        acceptance_rate: Match acceptance rate (0-1)
        completion_rate: Job completion rate (0-1)

    Returns:
        New VendorMatchData; the input vendor is left untouched
    """
    data = vendor.model_dump(exclude={"match_score"})
    data.update(
        pending_jobs_count=pending_jobs_count,
        avg_response_time_hours=avg_response_time_hours,
        acceptance_rate=acceptance_rate,
        completion_rate=completion_rate,
    )
    return VendorMatchData.model_validate(data)


def attach_match_score(vendor: VendorMatchData, match_score: MatchScoreResult) -> VendorWithMatchScore:
    """Return a copy of the vendor carrying its match score, for display."""
    data = vendor.model_dump(exclude={"match_score"})
    return VendorWithMatchScore.model_validate({**data, "match_score": match_score})
