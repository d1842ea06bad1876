"""Shared fixtures for matching tests."""
from datetime import datetime

import pytest

from vendor_matching.score.models import ServiceRequest, VendorMatchData

# A Wednesday
CREATED_AT = datetime(2024, 6, 5, 10, 0)


@pytest.fixture
def make_request():
    """Factory for service requests with sensible defaults."""
    def _make(**overrides):
        data = {
            "id": "req-1",
            "service_type": "plumber_sewer",
            "urgency": "emergency",
            "zip_code": "19103",
            "property_location": "Philadelphia, PA 19103",
            "budget_range": "1000_2500",
            "created_at": CREATED_AT,
        }
        data.update(overrides)
        return ServiceRequest(**data)
    return _make


@pytest.fixture
def make_vendor():
    """Factory for vendors; defaults match the reference emergency plumber."""
    def _make(**overrides):
        data = {
            "id": "vendor-a",
            "business_name": "A Plumbing",
            "services": ["plumber_sewer"],
            "service_areas": ["19103"],
            "emergency_services": True,
            "job_size_range": ["1k_5k"],
            "performance_score": 90,
            "total_reviews": 20,
        }
        data.update(overrides)
        return VendorMatchData(**data)
    return _make
