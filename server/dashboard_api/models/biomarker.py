"""Biomarker data models."""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, Literal

from health_metrics import BiomarkerReference, BiomarkerStatus, Range
from health_metrics.models import CamelModel


class RangeBounds(BaseModel):
    """Inclusive range; a missing bound is unbounded."""

    min: Optional[float] = None
    max: Optional[float] = None
    label: str = ""

    @classmethod
    def from_range(cls, rng: Optional[Range], unit: str) -> Optional["RangeBounds"]:
        if rng is None:
            return None
        return cls(min=rng.min, max=rng.max, label=rng.describe(unit))


class BiomarkerReading(CamelModel):
    """A measured or calculated biomarker with its classification."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    value: float
    unit: str
    category: Optional[str] = None
    source: Literal["measured", "calculated"] = "measured"
    status: BiomarkerStatus
    standard_range: Optional[RangeBounds] = None
    optimal_range: Optional[RangeBounds] = None


class BiomarkerClassification(CamelModel):
    """Classification of a single (biomarker, value) pair."""

    biomarker: str
    id: Optional[str] = Field(default=None, description="Canonical id, null when unknown")
    value: float
    status: BiomarkerStatus
    known: bool


class BiomarkerReferenceInfo(CamelModel):
    """Catalog entry for one biomarker."""

    id: str
    name: str
    category: str
    category_label: str
    unit: str
    direction: str
    standard_range: Optional[RangeBounds] = None
    optimal_range: Optional[RangeBounds] = None
    male_optimal: Optional[RangeBounds] = None
    female_optimal: Optional[RangeBounds] = None
    is_calculated: bool = False
    formula: Optional[str] = None

    @classmethod
    def from_reference(cls, ref: BiomarkerReference) -> "BiomarkerReferenceInfo":
        return cls(
            id=ref.id,
            name=ref.display_name,
            category=ref.category.value,
            category_label=ref.category_label,
            unit=ref.unit,
            direction=ref.direction.value,
            standard_range=RangeBounds.from_range(ref.standard_range, ref.unit),
            optimal_range=RangeBounds.from_range(ref.optimal_range, ref.unit),
            male_optimal=RangeBounds.from_range(ref.male_optimal, ref.unit),
            female_optimal=RangeBounds.from_range(ref.female_optimal, ref.unit),
            is_calculated=ref.is_calculated,
            formula=ref.formula,
        )
