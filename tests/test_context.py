"""Unit tests for matching context construction."""
from datetime import datetime

import pytest

from vendor_matching.score.context import create_matching_context, is_weekend, resolve_request_zip

WEEKDAY = datetime(2024, 6, 5, 10, 0)
SATURDAY = datetime(2024, 6, 8, 10, 0)


class TestWeekend:
    """Test weekend classification."""

    @pytest.mark.parametrize("moment,expected", [
        (datetime(2024, 6, 7, 23, 59), False),  # Friday
        (datetime(2024, 6, 8, 0, 0), True),     # Saturday
        (datetime(2024, 6, 9, 12, 0), True),    # Sunday
        (datetime(2024, 6, 10, 8, 0), False),   # Monday
    ])
    def test_is_weekend(self, moment, expected):
        """Test Saturday and Sunday are weekend days."""
        assert is_weekend(moment) is expected


class TestZipResolution:
    """Test request zip resolution order."""

    def test_explicit_zip(self, make_request):
        """Test explicit zip field wins."""
        request = make_request(zip_code="19104", property_location="Philadelphia, PA 19103")
        assert resolve_request_zip(request) == "19104"

    def test_zip_plus_four(self, make_request):
        """Test ZIP+4 is reduced to five digits."""
        assert resolve_request_zip(make_request(zip_code="19103-2001")) == "19103"

    def test_from_location(self, make_request):
        """Test zip extracted from free-text location."""
        request = make_request(zip_code=None, property_location="Philadelphia, PA 19147")
        assert resolve_request_zip(request) == "19147"

    def test_from_address(self, make_request):
        """Test zip extracted from the street address last."""
        request = make_request(
            zip_code=None,
            property_location="Philadelphia",
            property_address="1500 Market St, Philadelphia, PA 19102",
        )
        assert resolve_request_zip(request) == "19102"

    def test_unresolvable(self, make_request):
        """Test no zip anywhere resolves to None."""
        request = make_request(zip_code=None, property_location="Philadelphia")
        assert resolve_request_zip(request) is None


class TestCreateMatchingContext:
    """Test context construction."""

    def test_fields(self, make_request):
        """Test request data is carried into the context."""
        request = make_request(service_details={"Equipment Type": "Boiler"})
        context = create_matching_context(request)

        assert context.request is request
        assert context.zip_code == "19103"
        assert context.service_type == "plumber_sewer"
        assert context.urgency == "emergency"
        assert context.is_emergency is True
        assert context.is_weekend is False
        assert context.budget_range == "1000_2500"
        assert context.service_details == {"Equipment Type": "Boiler"}

    def test_non_emergency(self, make_request):
        """Test only "emergency" urgency is an emergency."""
        context = create_matching_context(make_request(urgency="high"))
        assert context.is_emergency is False

    def test_weekend_from_created_at(self, make_request):
        """Test weekend flag follows the request creation time."""
        assert create_matching_context(make_request(created_at=SATURDAY)).is_weekend is True

    def test_reference_time_wins(self, make_request):
        """Test an explicit reference time overrides created_at."""
        context = create_matching_context(make_request(created_at=SATURDAY), reference_time=WEEKDAY)
        assert context.is_weekend is False

    def test_context_is_frozen(self, make_request):
        """Test the context cannot be mutated."""
        context = create_matching_context(make_request())
        with pytest.raises(ValueError):
            context.zip_code = "00000"
