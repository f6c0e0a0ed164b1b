"""
Unit tests for derived biomarker calculations.

Usage:
    pytest tests/test_calculations.py -v
"""
import pytest

from health_metrics.calculations import (
    DERIVED_FORMULAS,
    FORMULAS_BY_ID,
    calculate_derived_biomarkers,
    combine_measured_and_calculated,
    deduplicate_entries,
    merge_with_calculated,
)
from health_metrics.models import BiomarkerRecord
from health_metrics.numeric import round_half_up
from health_metrics.reference import lookup
from health_metrics.reference_data import BIOMARKER_REFERENCES


def _by_id(calculated):
    return {calc.id: calc.value for calc in calculated}


class TestRoundHalfUp:
    """round_half_up() keeps the dashboard's historical rounding."""

    def test_ties_go_up(self):
        """Halves round toward positive infinity."""
        assert round_half_up(2.5) == 3
        assert round_half_up(-2.5) == -2

    def test_decimals(self):
        """Decimal places are honoured."""
        assert round_half_up(0.125, 2) == 0.13
        assert round_half_up(8.4118, 2) == 8.41


class TestFormulaTable:
    """DERIVED_FORMULAS integrity."""

    def test_ids_unique(self):
        """No two formulas share an id."""
        assert len(FORMULAS_BY_ID) == len(DERIVED_FORMULAS)

    def test_formulas_are_catalogued(self):
        """Every output and input id exists in the reference catalog."""
        for formula in DERIVED_FORMULAS:
            assert formula.id in BIOMARKER_REFERENCES, formula.id
            for key in formula.inputs:
                assert key in BIOMARKER_REFERENCES, f"{formula.id}: {key}"


class TestLipidRatios:
    """Lipid-derived markers."""

    def test_lipid_panel(self, lipid_panel):
        """A basic lipid panel yields the standard ratios."""
        values = _by_id(calculate_derived_biomarkers(lipid_panel))

        assert values["tcHdlRatio"] == 4.0
        assert values["ldlHdlRatio"] == 2.4
        assert values["tgHdlRatio"] == 2.0
        assert values["nonHdlC"] == 150
        assert values["remnantCholesterol"] == 30
        assert values["atherogenicCoeff"] == 3.0
        assert values["ldlTcRatio"] == 0.6
        assert values["nonHdlTcRatio"] == 0.75

    def test_atherogenic_index(self):
        """AIP converts TG and HDL to mmol/L before the log."""
        values = _by_id(calculate_derived_biomarkers({"triglycerides": 100, "hdl": 50}))
        assert values["atherogenicIndex"] == -0.059

    def test_apob_ratios_need_apob(self, lipid_panel):
        """ApoB ratios are skipped without ApoB."""
        values = _by_id(calculate_derived_biomarkers(lipid_panel))
        assert "ldlApoBRatio" not in values

        values = _by_id(calculate_derived_biomarkers({**lipid_panel, "apoB": 100}))
        assert values["ldlApoBRatio"] == 1.2


class TestMetabolicFormulas:
    """Insulin sensitivity and other metabolic markers."""

    def test_insulin_indices(self):
        """HOMA-IR, QUICKI and TyG from fasting labs."""
        values = _by_id(calculate_derived_biomarkers({
            "fastingInsulin": 10, "glucose": 90, "triglycerides": 100,
        }))

        assert values["homaIr"] == 2.22
        assert values["quicki"] == 0.338
        assert values["tygIndex"] == 8.41

    def test_corrected_calcium(self):
        """Calcium is corrected for albumin."""
        values = _by_id(calculate_derived_biomarkers({"calcium": 9.5, "albumin": 4.5}))
        assert values["correctedCalcium"] == pytest.approx(9.1)

    def test_de_ritis(self):
        """AST:ALT ratio."""
        values = _by_id(calculate_derived_biomarkers({"ast": 22, "alt": 19}))
        assert values["deRitisRatio"] == 1.16


class TestCbcRatios:
    """CBC inflammation ratios."""

    def test_absolute_counts(self):
        """Absolute counts feed the ratios directly."""
        values = _by_id(calculate_derived_biomarkers({
            "neutrophils": 3.0, "lymphocytes": 1.5, "monocytes": 0.5, "platelets": 240,
        }))

        assert values["nlr"] == 2.0
        assert values["plr"] == 160
        assert values["lmr"] == 3.0
        assert values["sii"] == 480

    def test_percentage_fallback(self):
        """Differential percentages × WBC stand in for missing absolute counts."""
        values = _by_id(calculate_derived_biomarkers({
            "neutrophilPercent": 60, "lymphocytePercent": 30, "wbc": 5,
        }))
        assert values["nlr"] == 2.0

    def test_absolute_count_preferred(self):
        """A reported absolute count is not replaced by the percentage estimate."""
        values = _by_id(calculate_derived_biomarkers({
            "neutrophils": 4.0, "neutrophilPercent": 60, "lymphocytePercent": 30, "wbc": 5,
        }))
        assert values["nlr"] == pytest.approx(2.67)


class TestMissingInputs:
    """Formulas with missing inputs are skipped, not failed."""

    def test_empty(self):
        """No inputs, no derived markers."""
        assert calculate_derived_biomarkers({}) == []

    def test_partial(self):
        """Only formulas with every input run."""
        values = _by_id(calculate_derived_biomarkers({"totalCholesterol": 200}))
        assert "tcHdlRatio" not in values

    def test_zero_divisor_skipped(self):
        """A zero input skips the formula instead of dividing by zero."""
        values = _by_id(calculate_derived_biomarkers({"totalCholesterol": 200, "hdl": 0}))
        assert values == {}

    def test_non_positive_log_argument(self):
        """Log-based formulas skip non-positive arguments."""
        values = _by_id(calculate_derived_biomarkers({"fastingInsulin": -5, "glucose": 90}))
        assert "quicki" not in values


class TestMerge:
    """merge_with_calculated() and combine_measured_and_calculated()."""

    def test_measured_wins(self, lipid_panel):
        """A lab-reported ratio is kept over the calculated one."""
        merged = merge_with_calculated({**lipid_panel, "tcHdlRatio": 3.9})
        assert merged["tcHdlRatio"] == 3.9
        assert merged["ldlHdlRatio"] == 2.4

    def test_input_not_mutated(self, lipid_panel):
        """The raw mapping is left untouched."""
        raw = dict(lipid_panel)
        merge_with_calculated(raw)
        assert raw == lipid_panel

    def test_combine_records(self):
        """Calculated records follow measured ones and carry catalog categories."""
        measured = [
            BiomarkerRecord(id="ldl", name="LDL", value=120, unit="mg/dL"),
            BiomarkerRecord(id="hdl", name="HDL", value=50, unit="mg/dL"),
            BiomarkerRecord(id="ldlHdlRatio", name="LDL/HDL", value=2.5, unit="ratio"),
        ]
        combined = combine_measured_and_calculated(measured)

        assert combined[:3] == measured
        calculated = [record for record in combined if record.source == "calculated"]
        assert [record.id for record in calculated] == []

        combined = combine_measured_and_calculated(measured[:2])
        ratio = next(record for record in combined if record.id == "ldlHdlRatio")
        assert ratio.source == "calculated"
        assert ratio.value == 2.4
        assert ratio.category == lookup("ldlHdlRatio").category.value


class TestDeduplicateEntries:
    """deduplicate_entries()."""

    def test_first_occurrence_wins(self):
        """Repeated markers keep the first value under the canonical id."""
        values = deduplicate_entries([("LDL-C", 118), ("LDL", 120), ("Galectin-3", 14.2)])
        assert values == {"ldl": 118, "galectin_3": 14.2}
