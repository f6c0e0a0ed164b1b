"""Biomarker API routes."""
from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Literal, Optional

from health_metrics import (
    BiomarkerRecord,
    CalculatedBiomarker,
    calculate_derived_biomarkers,
    classify,
    lookup,
)

from ..models.biomarker import (
    BiomarkerClassification,
    BiomarkerReading,
    BiomarkerReferenceInfo,
    RangeBounds,
)
from ..services.snapshot_loader import HealthData, get_health_data

router = APIRouter(prefix="/api/health", tags=["Biomarkers"])


def _record_to_reading(record: BiomarkerRecord, sex: Optional[str]) -> BiomarkerReading:
    """Attach status and reference ranges to a snapshot record."""
    ref = lookup(record.id)
    return BiomarkerReading(
        id=record.id,
        name=record.name,
        value=record.value,
        unit=record.unit,
        category=record.category,
        source=record.source,
        status=classify(record.id, record.value, sex),
        standard_range=RangeBounds.from_range(ref.standard_range, ref.unit) if ref else None,
        optimal_range=RangeBounds.from_range(ref.optimal_for(sex), ref.unit) if ref else None,
    )


@router.get("/biomarkers", response_model=list[BiomarkerReading])
async def get_biomarkers(
    category: Optional[str] = Query(default=None, description="Filter by category"),
    source: Optional[Literal["measured", "calculated"]] = Query(
        default=None, description="Filter by measured or calculated"
    ),
    data: HealthData = Depends(get_health_data),
):
    """
    Get the current biomarker snapshot, measured and calculated, classified.
    Optionally filter by category or source.
    """
    readings = [_record_to_reading(record, data.sex) for record in data.snapshot.records()]

    if category:
        readings = [r for r in readings if r.category == category]
    if source:
        readings = [r for r in readings if r.source == source]

    return readings


@router.get("/biomarkers/derived", response_model=list[CalculatedBiomarker])
async def get_derived_biomarkers(data: HealthData = Depends(get_health_data)):
    """Calculated biomarkers whose inputs are present in the snapshot."""
    return calculate_derived_biomarkers(data.snapshot.values)


@router.get("/biomarkers/classify", response_model=BiomarkerClassification)
async def classify_biomarker(
    biomarker: str = Query(..., min_length=1, description="Biomarker id, alias or lab name"),
    value: float = Query(..., allow_inf_nan=False, description="Value in the catalog unit"),
    sex: Optional[Literal["male", "female"]] = Query(default=None),
):
    """Classify a single value. Unknown biomarkers classify as normal."""
    ref = lookup(biomarker)
    return BiomarkerClassification(
        biomarker=biomarker,
        id=ref.id if ref else None,
        value=value,
        status=classify(biomarker, value, sex),
        known=ref is not None,
    )


@router.get("/biomarkers/reference/{biomarker}", response_model=BiomarkerReferenceInfo)
async def get_biomarker_reference(biomarker: str):
    """Catalog entry for an id, alias or lab-report name."""
    ref = lookup(biomarker)
    if ref is None:
        raise HTTPException(status_code=404, detail=f"Unknown biomarker: {biomarker}")
    return BiomarkerReferenceInfo.from_reference(ref)
