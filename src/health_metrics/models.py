"""Pydantic data types exchanged with the metrics core."""
from datetime import date as Date
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .status import BiomarkerStatus


def to_camel(string: str) -> str:
    """Convert snake_case to camelCase."""
    components = string.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


class CamelModel(BaseModel):
    """Base model serialising to camelCase while accepting either spelling."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ActivitySample(CamelModel):
    """One day of wearable tracker data."""

    date: Date
    hrv: float
    rhr: float
    sleep_hours: float
    sleep_score: Optional[float] = None
    sleep_consistency: Optional[float] = None
    strain: Optional[float] = None
    recovery: Optional[float] = None
    steps: Optional[int] = None


class ActivitySummary(CamelModel):
    """
    Averages over a window of activity samples.

    Optional tracker metrics are averaged only over the samples that report
    them, and are None when no sample does.
    """

    days: int
    hrv: float
    rhr: float
    sleep_hours: float
    sleep_score: Optional[float] = None
    recovery: Optional[float] = None
    strain: Optional[float] = None
    steps: Optional[int] = None


class BodyComposition(CamelModel):
    """DEXA-style body composition scan."""

    body_fat_percent: Optional[float] = None
    lean_mass: Optional[float] = None
    fat_mass: Optional[float] = None
    bone_mineral_content: Optional[float] = None
    visceral_fat: Optional[float] = None
    bone_density_t_score: Optional[float] = None
    almi: Optional[float] = None


class CalculatedBiomarker(CamelModel):
    """A biomarker derived from a formula over measured values."""

    id: str
    name: str
    value: float
    unit: str
    formula: str
    inputs: List[str]


class BiomarkerRecord(CamelModel):
    """A measured or calculated value, as listed on the dashboard."""

    id: str
    name: str
    value: float
    unit: str
    category: Optional[str] = None
    source: Literal["measured", "calculated"] = "measured"


class PhenoAgeResult(CamelModel):
    """Biological age estimate; negative delta means biologically younger."""

    pheno_age: float
    delta: float


class HealthScoreBreakdown(CamelModel):
    biomarker_score: int
    biomarker_weight: float
    age_score: int
    age_weight: float
    activity_score: int
    activity_weight: float
    optimal_count: int
    normal_count: int
    out_of_range_count: int
    total_biomarkers: int


HealthScoreStatus = Literal["optimal", "good", "fair", "needs_work"]


class HealthScoreResult(CamelModel):
    """Composite 0-100 health score."""

    score: int = Field(ge=0, le=100)
    status: HealthScoreStatus
    label: str
    breakdown: HealthScoreBreakdown


GoalPriority = Literal["high", "medium", "low"]


class Goal(CamelModel):
    """An actionable health goal."""

    id: str
    title: str
    description: str
    priority: GoalPriority
    category: str
    action_items: List[str]
    biomarker_key: Optional[str] = None
    current_value: Optional[float] = None
    target_value: Optional[str] = None


class TopMarker(CamelModel):
    """A marker surfaced on the dashboard's top-markers card."""

    id: str
    name: str
    value: float
    unit: str
    status: BiomarkerStatus
