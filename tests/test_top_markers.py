"""
Unit tests for top-markers selection.

Usage:
    pytest tests/test_top_markers.py -v
"""
from health_metrics.status import BiomarkerStatus
from health_metrics.top_markers import marker_score, select_top_markers


class TestMarkerScore:
    """marker_score()."""

    def test_longevity_bonus(self):
        """Out-of-range CRP gets the top longevity bonus."""
        assert marker_score("crp", BiomarkerStatus.OUT_OF_RANGE) == 190

    def test_normal_with_bonus(self):
        """Normal vitamin D scores status plus rank bonus."""
        assert marker_score("vitaminD", BiomarkerStatus.NORMAL) == 90

    def test_deprioritized_penalty(self):
        """Hard-to-act-on markers are penalised."""
        assert marker_score("wbc", BiomarkerStatus.OPTIMAL) == -50

    def test_case_insensitive(self):
        """Matching ignores case."""
        assert marker_score("VITAMIND", BiomarkerStatus.NORMAL) == 90


class TestSelectTopMarkers:
    """select_top_markers()."""

    def test_anchors_then_score(self):
        """ApoB and HbA1c lead; the rest follow by score."""
        markers = select_top_markers({"crp": 5, "apoB": 80, "hba1c": 5.0, "ldl": 60, "wbc": 20})

        assert [marker.id for marker in markers] == ["apoB", "hba1c", "crp", "ldl", "wbc"]
        assert markers[0].status == BiomarkerStatus.BORDERLINE
        assert markers[2].status == BiomarkerStatus.OUT_OF_RANGE

    def test_limit(self):
        """No more than `limit` markers are returned."""
        markers = select_top_markers(
            {"crp": 5, "apoB": 80, "hba1c": 5.0, "ldl": 60, "wbc": 20}, limit=3
        )
        assert [marker.id for marker in markers] == ["apoB", "hba1c", "crp"]

    def test_without_anchors(self):
        """Without anchors the highest scores win."""
        markers = select_top_markers({"wbc": 6, "ldl": 150, "vitaminD": 25})
        assert [marker.id for marker in markers] == ["vitaminD", "ldl", "wbc"]

    def test_lab_names_and_unknowns(self):
        """Lab names resolve; unknown ids and the age field are skipped."""
        markers = select_top_markers({"LDL-C": 150, "Galectin-3": 14, "patientAge": 40})

        assert [marker.id for marker in markers] == ["ldl"]
        assert markers[0].unit == "mg/dL"

    def test_duplicates_collapse(self):
        """Two names for one marker produce a single entry."""
        markers = select_top_markers({"ldl": 150, "LDL-C": 120})

        assert len(markers) == 1
        assert markers[0].value == 150

    def test_empty(self):
        """Nothing in, nothing out."""
        assert select_top_markers({}) == []
