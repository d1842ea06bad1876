"""Unit tests for score aggregation and ranking."""
import pytest

from vendor_matching.score.context import create_matching_context
from vendor_matching.score.factors.base import FACTOR_ORDER
from vendor_matching.score.models import MatchFactor, MatchWarning, VendorMatchData
from vendor_matching.score.rules import SCORING_VERSION
from vendor_matching.score.scoring_config import load_scoring_config
from vendor_matching.score.scorer import (
    build_suggestions,
    calculate_match_score,
    calculate_match_scores,
    determine_confidence,
    get_scoring_meta,
    results_to_frame,
)


@pytest.fixture
def context(make_request):
    return create_matching_context(make_request())


def _factors(with_data: int, total: int = 8, neutral: float = 50):
    """Factors where the first `with_data` carry real data."""
    factors = []
    for i in range(total):
        if i < with_data:
            factors.append(MatchFactor(name=f"f{i}", score=100, weight=0.125, weighted=12.5, reason="ok", icon="check"))
        else:
            factors.append(MatchFactor(name=f"f{i}", score=neutral, weight=0.125, weighted=neutral * 0.125, reason="n/a", icon="info"))
    return factors


class TestEndToEnd:
    """Test the reference emergency plumbing scenario."""

    def test_emergency_capable_vendor(self, context, make_vendor):
        """Test vendor A scores high with high confidence."""
        result = calculate_match_score(make_vendor(), context)

        assert result.total_score == 88
        assert result.confidence == "high"
        assert not result.has_high_severity_warning
        assert result.warnings == ()
        assert result.recommended is True
        assert result.scoring_version == SCORING_VERSION

    def test_vendor_without_emergency_services(self, context, make_vendor):
        """Test vendor B scores lower with a high-severity warning."""
        result_a = calculate_match_score(make_vendor(), context)
        result_b = calculate_match_score(make_vendor(id="vendor-b", emergency_services=False), context)

        assert result_b.total_score == 80
        assert result_b.total_score < result_a.total_score
        assert [w.factor for w in result_b.warnings] == ["Availability"]
        assert result_b.warnings[0].severity == "high"
        assert result_b.confidence in ("medium", "low")

    def test_factor_breakdown(self, context, make_vendor):
        """Test every factor is reported in fixed order."""
        result = calculate_match_score(make_vendor(), context)

        assert tuple(f.name for f in result.factors) == FACTOR_ORDER
        assert sum(f.weight for f in result.factors) == pytest.approx(1.0)
        assert result.factor("Location").score == 100
        assert result.factor("Response Time").reason == "No response data yet"
        assert result.factor("Price Fit").score == 100
        assert result.factor("Unknown") is None


class TestAggregation:
    """Test score aggregation."""

    def test_deterministic(self, context, make_vendor):
        """Test identical inputs yield identical results."""
        vendor = make_vendor(avg_response_time_hours=3.2, pending_jobs_count=4)
        assert calculate_match_score(vendor, context) == calculate_match_score(vendor, context)

    def test_sparse_vendor(self, context):
        """Test a vendor with almost no data still scores."""
        result = calculate_match_score(VendorMatchData(id="bare"), context)

        assert result.total_score == 35
        assert result.confidence == "low"
        assert result.recommended is False

    def test_warnings_in_factor_order(self, context, make_vendor):
        """Test warnings follow factor evaluation order."""
        vendor = make_vendor(
            services=["hvac"], service_areas=["NJ"], emergency_services=False,
            performance_score=20, total_reviews=5,
        )
        result = calculate_match_score(vendor, context)

        assert [w.factor for w in result.warnings] == ["Service Match", "Location", "Performance", "Availability"]
        assert [w.severity for w in result.warnings] == ["high", "medium", "medium", "high"]

    def test_total_in_range(self, make_request, make_vendor):
        """Test totals stay within [0, 100]."""
        best = make_vendor(avg_response_time_hours=1, pending_jobs_count=0, performance_score=100,
                           service_specialties={"plumber_sewer": ["Drain"]})
        request = make_request(service_details={"Service Needed": "Drain Cleaning"})
        result = calculate_match_score(best, create_matching_context(request))
        assert result.total_score == 100


class TestConfidence:
    """Test confidence tiers."""

    @pytest.mark.parametrize("total,with_data,expected", [
        (80, 8, "high"),
        (80, 5, "high"),
        (80, 4, "medium"),
        (80, 3, "low"),
        (74, 8, "medium"),
        (50, 8, "medium"),
        (49, 8, "low"),
    ])
    def test_score_and_data_coverage(self, total, with_data, expected):
        """Test thresholds and data coverage ratio."""
        assert determine_confidence(total, _factors(with_data), []) == expected

    def test_no_data_score_follows_config(self):
        """Test overridden neutral scores still count as missing data."""
        config = load_scoring_config(overrides={"response_time": {"no_data_score": 55}})
        factors = _factors(4, neutral=55)

        assert determine_confidence(80, factors, [], config) == "medium"
        assert determine_confidence(80, factors, []) == "high"

    def test_high_warning_caps_confidence(self):
        """Test a high-severity warning caps confidence at medium."""
        warning = MatchWarning(severity="high", message="x", factor="Availability")
        assert determine_confidence(95, _factors(8), [warning]) == "medium"

    def test_medium_warning_does_not_cap(self):
        """Test medium warnings leave confidence alone."""
        warning = MatchWarning(severity="medium", message="x", factor="Location")
        assert determine_confidence(95, _factors(8), [warning]) == "high"


class TestRanking:
    """Test batch ranking."""

    def test_sorted_and_ranked(self, context, make_vendor):
        """Test vendors come back best first with 1-based ranks."""
        vendors = [
            make_vendor(id="c", services=["hvac"]),
            make_vendor(id="b", emergency_services=False),
            make_vendor(id="a"),
        ]
        ranked = calculate_match_scores(vendors, context)

        assert [v.id for v in ranked] == ["a", "b", "c"]
        assert [v.match_score.rank for v in ranked] == [1, 2, 3]
        assert [v.match_score.total_score for v in ranked] == [88, 80, 63]

    def test_stable_across_runs(self, context, make_vendor):
        """Test repeated and reordered runs give the same order."""
        vendors = [make_vendor(id=f"v{i}", performance_score=80 + i) for i in range(6)]

        first = [v.id for v in calculate_match_scores(vendors, context)]
        second = [v.id for v in calculate_match_scores(vendors, context)]
        reversed_input = [v.id for v in calculate_match_scores(list(reversed(vendors)), context)]

        assert first == second == reversed_input

    def test_tie_broken_by_performance(self, context, make_vendor):
        """Test equal totals are ordered by performance score."""
        vendors = [make_vendor(id="aaa", performance_score=90), make_vendor(id="zzz", performance_score=91)]
        ranked = calculate_match_scores(vendors, context)

        assert ranked[0].match_score.total_score == ranked[1].match_score.total_score
        assert [v.id for v in ranked] == ["zzz", "aaa"]

    def test_tie_broken_by_id(self, context, make_vendor):
        """Test fully tied vendors are ordered by id."""
        ranked = calculate_match_scores([make_vendor(id="v2"), make_vendor(id="v1")], context)
        assert [v.id for v in ranked] == ["v1", "v2"]

    def test_recommendations_capped(self, context, make_vendor):
        """Test only the top recommended vendors keep the flag."""
        vendors = [make_vendor(id=f"v{i}") for i in range(5)]
        ranked = calculate_match_scores(vendors, context)

        assert [v.match_score.recommended for v in ranked] == [True, True, True, False, False]

    def test_inputs_not_mutated(self, context, make_vendor):
        """Test the input vendors are returned as copies."""
        vendor = make_vendor()
        ranked = calculate_match_scores([vendor], context)
        assert ranked[0] is not vendor
        assert not hasattr(vendor, "match_score")

    def test_empty(self, context):
        """Test an empty pool ranks to an empty list."""
        assert calculate_match_scores([], context) == []


class TestSummaries:
    """Test metadata, suggestions and tabular output."""

    def test_scoring_meta(self, context, make_vendor):
        """Test summary figures."""
        ranked = calculate_match_scores(
            [make_vendor(id="a"), make_vendor(id="b", emergency_services=False)], context
        )
        meta = get_scoring_meta(ranked)

        assert meta.total_eligible == 2
        assert meta.total_recommended == 2
        assert meta.average_score == 84
        assert meta.scoring_version == SCORING_VERSION

    def test_scoring_meta_empty(self):
        """Test metadata for an empty list."""
        meta = get_scoring_meta([])
        assert meta.total_eligible == 0
        assert meta.average_score == 0

    def test_build_suggestions(self, make_request, make_vendor):
        """Test recommended vendors are split from the rest."""
        request = make_request()
        vendors = [make_vendor(id=f"v{i}") for i in range(4)] + [make_vendor(id="x", services=["hvac"])]
        ranked = calculate_match_scores(vendors, create_matching_context(request))

        suggestions = build_suggestions(request, ranked)

        assert [v.id for v in suggestions.suggestions] == ["v0", "v1", "v2"]
        assert [v.id for v in suggestions.other_vendors] == ["v3", "x"]
        assert suggestions.request["zip_code"] == "19103"
        assert suggestions.meta.total_recommended == 3

    def test_results_to_frame(self, context, make_vendor):
        """Test one row per vendor with factor columns."""
        ranked = calculate_match_scores(
            [make_vendor(id="a"), make_vendor(id="b", emergency_services=False)], context
        )
        df = results_to_frame(ranked)

        assert list(df.columns) == [
            "rank", "vendor_id", "business_name", "total_score", "confidence", "recommended",
            *FACTOR_ORDER, "warnings",
        ]
        assert df["vendor_id"].tolist() == ["a", "b"]
        assert df["rank"].tolist() == [1, 2]
        assert df.loc[1, "Availability"] == 20
        assert df.loc[0, "warnings"] == ""
        assert df.loc[1, "warnings"] == "Vendor does not offer emergency services"

    def test_results_to_frame_empty(self):
        """Test an empty ranking gives an empty frame with columns."""
        df = results_to_frame([])
        assert df.empty
        assert "total_score" in df.columns
