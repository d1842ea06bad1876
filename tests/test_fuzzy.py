"""Unit tests for fuzzy field name matching."""
from vendor_matching.utils.fuzzy import find_field_match, map_fields


class TestFindFieldMatch:
    """Test single field lookup."""

    def test_close_match(self):
        """Test a near-identical name matches."""
        assert find_field_match("Equipment Type", ["Equipment Typ", "Notes"]) == "Equipment Typ"

    def test_unrelated_names(self):
        """Test dissimilar names do not match."""
        assert find_field_match("Roof Type", ["Pest Type"]) is None

    def test_no_candidates(self):
        """Test empty candidates return None."""
        assert find_field_match("Roof Type", []) is None


class TestMapFields:
    """Test mapping canonical field names onto record keys."""

    def test_exact_ignoring_case_and_underscores(self):
        """Test exact matches ignore case, underscores and spacing."""
        mapping = map_fields(["Equipment Type", "Roof Type"], ["equipment_type", "ROOF  TYPE"])
        assert mapping == {"Equipment Type": "equipment_type", "Roof Type": "ROOF  TYPE"}

    def test_unmatched_omitted(self):
        """Test fields with no counterpart are left out."""
        assert map_fields(["Pest Type"], ["Description"]) == {}

    def test_each_actual_used_once(self):
        """Test an actual field is not mapped twice."""
        mapping = map_fields(["Issue Type", "Issue Types"], ["Issue Type"])
        assert mapping == {"Issue Type": "Issue Type"}
