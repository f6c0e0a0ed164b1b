"""Pydantic models for health data API responses."""
from .biomarker import (
    BiomarkerClassification,
    BiomarkerReading,
    BiomarkerReferenceInfo,
    RangeBounds,
)
from .summary import BiologicalAge, HealthSummary

__all__ = [
    "BiomarkerClassification",
    "BiomarkerReading",
    "BiomarkerReferenceInfo",
    "RangeBounds",
    "BiologicalAge",
    "HealthSummary",
]
