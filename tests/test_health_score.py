"""
Unit tests for the composite health score.

Usage:
    pytest tests/test_health_score.py -v
"""
from datetime import date, timedelta

import pytest

from health_metrics.health_score import (
    NEUTRAL_SCORE,
    age_score,
    activity_score,
    calculate_health_score,
    score_status,
    tally_biomarkers,
)
from health_metrics.models import ActivitySample, PhenoAgeResult


def make_activity(hrv: float, rhr: float, sleep: float, days: int = 7):
    start = date(2025, 9, 1)
    return [
        ActivitySample(date=start + timedelta(days=i), hrv=hrv, rhr=rhr, sleep_hours=sleep)
        for i in range(days)
    ]


class TestSubScores:
    """Individual sub-scores."""

    def test_biomarker_tally(self):
        """Borderline counts with normal; unknown ids are ignored."""
        tally = tally_biomarkers({"ldl": 150, "hdl": 70, "glucose": 95, "galectin3": 14})

        assert (tally.optimal, tally.normal, tally.out_of_range) == (1, 1, 1)
        assert tally.score == pytest.approx(160 / 3)

    def test_empty_tally_is_neutral(self):
        """No classified markers scores neutral."""
        assert tally_biomarkers({}).score == NEUTRAL_SCORE

    @pytest.mark.parametrize("delta,expected", [
        (0, 50),
        (4, 30),
        (-10, 100),
        (-15, 100),
        (10, 0),
        (25, 0),
    ])
    def test_age_score(self, delta, expected):
        """Delta maps linearly onto 100..0 and clamps at ±10 years."""
        assert age_score(PhenoAgeResult(pheno_age=40 + delta, delta=delta)) == expected

    def test_age_score_missing(self):
        """No PhenoAge scores neutral."""
        assert age_score(None) == NEUTRAL_SCORE

    def test_activity_score_best(self):
        """High HRV, low RHR and 7-9h sleep score 100."""
        assert activity_score(make_activity(hrv=70, rhr=50, sleep=8)) == 100

    def test_activity_score_middle(self):
        """Middle bands score 70 each."""
        assert activity_score(make_activity(hrv=50, rhr=65, sleep=6.5)) == 70

    def test_activity_score_worst(self):
        """Low HRV, high RHR and short sleep score 40 each."""
        assert activity_score(make_activity(hrv=30, rhr=90, sleep=4)) == 40

    def test_activity_score_missing(self):
        """No samples scores neutral."""
        assert activity_score([]) == NEUTRAL_SCORE


class TestScoreStatus:
    """Score bands."""

    @pytest.mark.parametrize("score,status", [
        (100, "optimal"),
        (80, "optimal"),
        (79, "good"),
        (60, "good"),
        (59, "fair"),
        (40, "fair"),
        (39, "needs_work"),
        (0, "needs_work"),
    ])
    def test_bands(self, score, status):
        """Band lower bounds are inclusive."""
        assert score_status(score)[0] == status


class TestCalculateHealthScore:
    """calculate_health_score()."""

    def test_everything_missing_is_fair(self):
        """With no data every component is neutral."""
        result = calculate_health_score({}, None, [])

        assert result.score == 50
        assert result.status == "fair"
        assert result.label == "Fair"
        assert result.breakdown.total_biomarkers == 0

    def test_weighted_example(self):
        """Sub-scores 53.3, 30 and 70 weight to 50."""
        result = calculate_health_score(
            {"ldl": 150, "hdl": 70, "glucose": 95},
            PhenoAgeResult(pheno_age=44, delta=4),
            make_activity(hrv=50, rhr=65, sleep=6.5),
        )

        assert result.score == 50
        assert result.breakdown.biomarker_score == 53
        assert result.breakdown.age_score == 30
        assert result.breakdown.activity_score == 70
        assert result.breakdown.out_of_range_count == 1

    def test_best_case(self):
        """All components at their best give 100."""
        result = calculate_health_score(
            {"ldl": 65, "hdl": 70},
            PhenoAgeResult(pheno_age=28, delta=-12),
            make_activity(hrv=70, rhr=50, sleep=8),
        )

        assert result.score == 100
        assert result.status == "optimal"

    def test_worst_case(self):
        """All components at their worst still stay within bounds."""
        result = calculate_health_score(
            {"ldl": 150},
            PhenoAgeResult(pheno_age=55, delta=15),
            make_activity(hrv=30, rhr=90, sleep=4),
        )

        assert result.score == 8
        assert result.status == "needs_work"

    def test_age_field_ignored(self):
        """patientAge in the value map is not scored as a biomarker."""
        result = calculate_health_score({"ldl": 65, "patientAge": 40}, None, [])
        assert result.breakdown.total_biomarkers == 1

    def test_weights_in_breakdown(self):
        """Weights are reported and sum to one."""
        breakdown = calculate_health_score({}, None, []).breakdown
        total = breakdown.biomarker_weight + breakdown.age_weight + breakdown.activity_weight
        assert total == pytest.approx(1.0)

    def test_camel_case_serialisation(self):
        """Results serialise with camelCase keys."""
        payload = calculate_health_score({}, None, []).model_dump(by_alias=True)
        assert "biomarkerScore" in payload["breakdown"]
        assert "outOfRangeCount" in payload["breakdown"]
