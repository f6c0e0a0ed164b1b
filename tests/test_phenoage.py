"""
Unit tests for the PhenoAge biological age estimator.

Usage:
    pytest tests/test_phenoage.py -v
"""
import math

import pytest

from health_metrics.phenoage import (
    MAX_PHENOAGE,
    PHENOAGE_INPUTS,
    calculate_phenoage,
    missing_phenoage_inputs,
)


class TestPhenoAgeInputs:
    """Required input handling."""

    def test_nine_inputs(self):
        """PhenoAge needs exactly nine markers."""
        assert len(PHENOAGE_INPUTS) == 9

    @pytest.mark.parametrize("missing", PHENOAGE_INPUTS)
    def test_missing_input_returns_none(self, phenoage_inputs, missing):
        """Any single missing input yields no estimate."""
        raw = {key: value for key, value in phenoage_inputs.items() if key != missing}
        assert calculate_phenoage(raw, 40) is None
        assert missing_phenoage_inputs(raw) == [missing]

    def test_none_counts_as_missing(self, phenoage_inputs):
        """An explicit None is treated as missing."""
        raw = {**phenoage_inputs, "rdw": None}
        assert calculate_phenoage(raw, 40) is None

    @pytest.mark.parametrize("age", [float("nan"), float("inf"), None])
    def test_unusable_age_returns_none(self, phenoage_inputs, age):
        """A missing or non-finite age yields no estimate instead of raising."""
        assert calculate_phenoage(phenoage_inputs, age) is None

    def test_nothing_missing(self, phenoage_inputs):
        """A complete input set reports no missing markers."""
        assert missing_phenoage_inputs(phenoage_inputs) == []


class TestPhenoAgeValues:
    """Estimates from the published model."""

    def test_us_units_saturate(self, phenoage_inputs):
        """US-unit inputs push mortality to the cap."""
        result = calculate_phenoage(phenoage_inputs, 40)

        assert result.pheno_age == 108.5
        assert result.delta == 68.5

    def test_si_units(self, phenoage_inputs):
        """SI-unit inputs give a plausible, younger-than-chronological estimate."""
        raw = {
            **phenoage_inputs,
            "albumin": 45,
            "creatinine": 80,
            "glucose": 4.7,
            "crp": 0.05,
        }
        result = calculate_phenoage(raw, 40)

        assert 20 <= result.pheno_age <= 40
        assert result.delta < 0

    def test_delta_is_difference(self, phenoage_inputs):
        """delta is phenoAge minus chronological age, to one decimal."""
        raw = {**phenoage_inputs, "albumin": 45, "creatinine": 80, "glucose": 4.7}
        result = calculate_phenoage(raw, 52)
        assert result.delta == pytest.approx(result.pheno_age - 52, abs=0.051)

    def test_underflow_clamps_to_zero(self, phenoage_inputs):
        """A vanishing mortality score clamps to the youngest estimate."""
        result = calculate_phenoage({**phenoage_inputs, "albumin": 2000}, 40)
        assert result.pheno_age == 0.0
        assert result.delta == -40.0

    def test_always_bounded(self, phenoage_inputs):
        """Extreme inputs never escape [0, 150] or produce NaN."""
        for albumin in (-1e6, 0.001, 1e6):
            result = calculate_phenoage({**phenoage_inputs, "albumin": albumin}, 40)
            assert math.isfinite(result.pheno_age)
            assert 0 <= result.pheno_age <= MAX_PHENOAGE


class TestCrpHandling:
    """Non-positive CRP is floored before the log."""

    def test_non_positive_crp_floored(self, phenoage_inputs):
        """CRP of 0, 0.01 and -1 give the same finite result."""
        results = {
            crp: calculate_phenoage({**phenoage_inputs, "albumin": 45, "crp": crp}, 40)
            for crp in (0, 0.01, -1)
        }

        assert results[0] == results[0.01] == results[-1]
        assert math.isfinite(results[0].pheno_age)
