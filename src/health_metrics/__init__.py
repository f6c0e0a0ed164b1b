"""
Health Metrics Module.

Biomarker classification and derived health metrics: reference catalog
lookup, status classification, calculated biomarkers, PhenoAge, the
composite health score, goals and top markers.
"""

from .activity import recent_activity, summarize_activity
from .calculations import (
    DERIVED_FORMULAS,
    calculate_derived_biomarkers,
    combine_measured_and_calculated,
    deduplicate_entries,
    merge_with_calculated,
)
from .definitions import BiomarkerReference, Category, Direction, Range
from .goals import generate_goals
from .health_score import calculate_health_score
from .models import (
    ActivitySample,
    ActivitySummary,
    BiomarkerRecord,
    BodyComposition,
    CalculatedBiomarker,
    Goal,
    HealthScoreResult,
    PhenoAgeResult,
    TopMarker,
)
from .phenoage import PHENOAGE_INPUTS, calculate_phenoage, missing_phenoage_inputs
from .reference import lookup, normalize_biomarker_name, resolve_biomarker_id
from .snapshot import BiomarkerSnapshot
from .status import BiomarkerStatus, classify, classify_all
from .top_markers import select_top_markers

__all__ = [
    "ActivitySample",
    "ActivitySummary",
    "BiomarkerRecord",
    "BiomarkerReference",
    "BiomarkerSnapshot",
    "BiomarkerStatus",
    "BodyComposition",
    "CalculatedBiomarker",
    "Category",
    "DERIVED_FORMULAS",
    "Direction",
    "Goal",
    "HealthScoreResult",
    "PHENOAGE_INPUTS",
    "PhenoAgeResult",
    "Range",
    "TopMarker",
    "calculate_derived_biomarkers",
    "calculate_health_score",
    "calculate_phenoage",
    "classify",
    "classify_all",
    "combine_measured_and_calculated",
    "deduplicate_entries",
    "generate_goals",
    "lookup",
    "merge_with_calculated",
    "missing_phenoage_inputs",
    "normalize_biomarker_name",
    "recent_activity",
    "resolve_biomarker_id",
    "select_top_markers",
    "summarize_activity",
]
