"""Health summary aggregate model."""
from pydantic import Field
from typing import Optional

from health_metrics import ActivitySummary, HealthScoreResult, PhenoAgeResult, TopMarker
from health_metrics.models import CamelModel


class BiologicalAge(CamelModel):
    """PhenoAge estimate plus what was missing when none could be made."""

    chronological_age: Optional[float] = None
    result: Optional[PhenoAgeResult] = None
    missing_inputs: list[str] = Field(default_factory=list)


class HealthSummary(CamelModel):
    """Dashboard summary across lab results and wearable data."""

    score: HealthScoreResult
    biological_age: BiologicalAge
    top_markers: list[TopMarker]
    goal_count: int
    biomarker_count: int
    activity_days: int
    activity: Optional[ActivitySummary] = None
