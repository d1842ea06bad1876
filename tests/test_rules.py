"""Unit tests for tiers, reasons and service labels."""
import pytest

from vendor_matching.score.reasons import compose_reasons, format_reason, round_half_up
from vendor_matching.score.taxonomy import SERVICE_TYPE_LABELS, service_label
from vendor_matching.score.tiers import get_score_tier


class TestScoreTiers:
    """Test performance tier boundaries."""

    @pytest.mark.parametrize("score,expected", [
        (100, "excellent"),
        (85, "excellent"),
        (84.9, "good"),
        (70, "good"),
        (50, "average"),
        (30, "below_average"),
        (29, "poor"),
        (0, "poor"),
    ])
    def test_tiers(self, score, expected):
        """Test each tier's lower bound."""
        assert get_score_tier(score, has_reviews=True) == expected

    def test_new_vendor(self):
        """Test vendors without reviews are "new" regardless of score."""
        assert get_score_tier(95, has_reviews=False) == "new"


class TestRoundHalfUp:
    """Test display rounding."""

    @pytest.mark.parametrize("value,expected", [
        (87.5, 88),
        (79.5, 80),
        (34.5, 35),
        (87.49, 87),
        (0.5, 1),
        (0, 0),
        (87.4999999999, 88),
        (87.4999, 87),
        (87.49999999999999, 88),
    ])
    def test_round_half_up(self, value, expected):
        """Test halves round up and float noise is ignored."""
        assert round_half_up(value) == expected


class TestReasons:
    """Test reason formatting."""

    def test_format_reason(self):
        """Test templates are filled."""
        assert format_reason("LOC_EXACT", zip="19103") == "Serves zip 19103"
        assert format_reason("CAP_BUSY", jobs=8) == "8 pending jobs (busy)"

    def test_unknown_code(self):
        """Test unknown codes pass through."""
        assert format_reason("NOT_A_CODE") == "NOT_A_CODE"

    def test_compose_reasons(self):
        """Test reasons join and skip empties."""
        assert compose_reasons(["Offers HVAC Specialist", "", "Fully available"]) == \
            "Offers HVAC Specialist; Fully available"
        assert compose_reasons([]) == ""


class TestServiceLabels:
    """Test service category labels."""

    def test_known_label(self):
        """Test known categories map to labels."""
        assert service_label("plumber_sewer") == "Plumber / Sewer"
        assert service_label("hvac") == "HVAC Specialist"

    def test_fallback(self):
        """Test unknown categories fall back to the key."""
        assert service_label("drone_inspection") == "drone_inspection"

    def test_labels_present(self):
        """Test every label is non-empty."""
        assert all(label.strip() for label in SERVICE_TYPE_LABELS.values())
