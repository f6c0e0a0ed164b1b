"""Health summary API routes."""
from fastapi import APIRouter, Depends
from typing import Optional

from health_metrics import (
    ActivitySummary,
    Goal,
    HealthScoreResult,
    PhenoAgeResult,
    TopMarker,
    calculate_health_score,
    calculate_phenoage,
    generate_goals,
    missing_phenoage_inputs,
    select_top_markers,
    summarize_activity,
)

from ..config import Settings, get_settings
from ..models.summary import BiologicalAge, HealthSummary
from ..services.snapshot_loader import HealthData, get_health_data

router = APIRouter(prefix="/api/health", tags=["Health Summary"])


def _phenoage(data: HealthData) -> Optional[PhenoAgeResult]:
    age = data.snapshot.patient_age
    if age is None:
        return None
    return calculate_phenoage(data.snapshot.values, age)


def _biological_age(data: HealthData) -> BiologicalAge:
    return BiologicalAge(
        chronological_age=data.snapshot.patient_age,
        result=_phenoage(data),
        missing_inputs=missing_phenoage_inputs(data.snapshot.values),
    )


def _health_score(data: HealthData) -> HealthScoreResult:
    biomarkers = data.snapshot.with_calculated().values
    return calculate_health_score(biomarkers, _phenoage(data), data.activity, sex=data.sex)


def _goals(data: HealthData, settings: Settings) -> list[Goal]:
    return generate_goals(
        data.snapshot.with_calculated().values,
        _phenoage(data),
        body_comp=data.body_comp,
        sex=data.sex,
        limit=settings.goal_limit,
    )


def _top_markers(data: HealthData, settings: Settings) -> list[TopMarker]:
    return select_top_markers(data.snapshot.values, sex=data.sex, limit=settings.top_marker_limit)


@router.get("/summary", response_model=HealthSummary, response_model_by_alias=True)
async def get_health_summary(
    data: HealthData = Depends(get_health_data),
    settings: Settings = Depends(get_settings),
):
    """
    Get the dashboard summary.
    Combines the health score, biological age, top markers, goal count
    and wearable averages.
    """
    return HealthSummary(
        score=_health_score(data),
        biological_age=_biological_age(data),
        top_markers=_top_markers(data, settings),
        goal_count=len(_goals(data, settings)),
        biomarker_count=len(data.snapshot.known_values()),
        activity_days=len(data.activity),
        activity=summarize_activity(data.activity),
    )


@router.get("/score", response_model=HealthScoreResult)
async def get_health_score(data: HealthData = Depends(get_health_data)):
    """Composite 0-100 health score with its breakdown."""
    return _health_score(data)


@router.get("/biological-age", response_model=BiologicalAge)
async def get_biological_age(data: HealthData = Depends(get_health_data)):
    """PhenoAge estimate; result is null when an input or the patient age is missing."""
    return _biological_age(data)


@router.get("/top-markers", response_model=list[TopMarker])
async def get_top_markers(
    data: HealthData = Depends(get_health_data),
    settings: Settings = Depends(get_settings),
):
    """Markers to feature on the dashboard, anchors first."""
    return _top_markers(data, settings)


@router.get("/goals", response_model=list[Goal])
async def get_goals(
    data: HealthData = Depends(get_health_data),
    settings: Settings = Depends(get_settings),
):
    """Prioritized goals from borderline and out-of-range markers."""
    return _goals(data, settings)


@router.get("/activity", response_model=Optional[ActivitySummary])
async def get_activity(data: HealthData = Depends(get_health_data)):
    """Wearable averages over the activity window; null when there is no data."""
    return summarize_activity(data.activity)
