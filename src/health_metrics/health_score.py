"""
Composite health score.

Three sub-scores on a 0-100 scale are combined with fixed weights:
biomarker statuses (0.5), PhenoAge delta (0.3) and wearable activity (0.2).
Any missing component scores a neutral 50 instead of failing the total.
"""
import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, Tuple

from .activity import summarize_activity
from .models import (
    ActivitySample,
    ActivitySummary,
    HealthScoreBreakdown,
    HealthScoreResult,
    HealthScoreStatus,
    PhenoAgeResult,
)
from .numeric import round_half_up
from .status import BiomarkerStatus, classify_all

logger = logging.getLogger(__name__)

BIOMARKER_WEIGHT = 0.5
AGE_WEIGHT = 0.3
ACTIVITY_WEIGHT = 0.2

NEUTRAL_SCORE = 50.0

OPTIMAL_POINTS = 100
NORMAL_POINTS = 60
OUT_OF_RANGE_POINTS = 0

AGE_DELTA_LIMIT = 10.0
AGE_POINTS_PER_YEAR = 5.0

# (minimum score, status, label), highest first
SCORE_BANDS: Tuple[Tuple[int, HealthScoreStatus, str], ...] = (
    (80, "optimal", "Optimal"),
    (60, "good", "Good"),
    (40, "fair", "Fair"),
)
FALLBACK_BAND: Tuple[HealthScoreStatus, str] = ("needs_work", "Needs Work")


@dataclass
class BiomarkerTally:
    """Status counts behind the biomarker sub-score."""

    optimal: int = 0
    normal: int = 0
    out_of_range: int = 0

    @property
    def total(self) -> int:
        return self.optimal + self.normal + self.out_of_range

    @property
    def score(self) -> float:
        if self.total == 0:
            return NEUTRAL_SCORE
        points = (
            self.optimal * OPTIMAL_POINTS
            + self.normal * NORMAL_POINTS
            + self.out_of_range * OUT_OF_RANGE_POINTS
        )
        return points / self.total


def tally_biomarkers(
    biomarkers: Mapping[str, float], sex: Optional[str] = None
) -> BiomarkerTally:
    """Count statuses; borderline is scored together with normal."""
    tally = BiomarkerTally()
    for status in classify_all(biomarkers, sex).values():
        if status == BiomarkerStatus.OPTIMAL:
            tally.optimal += 1
        elif status == BiomarkerStatus.OUT_OF_RANGE:
            tally.out_of_range += 1
        else:
            tally.normal += 1
    return tally


def age_score(phenoage: Optional[PhenoAgeResult]) -> float:
    """Map delta -10..+10 years linearly onto 100..0."""
    if phenoage is None:
        return NEUTRAL_SCORE
    delta = max(-AGE_DELTA_LIMIT, min(AGE_DELTA_LIMIT, phenoage.delta))
    return NEUTRAL_SCORE - delta * AGE_POINTS_PER_YEAR


def _hrv_points(hrv: float) -> int:
    if hrv >= 60:
        return 100
    if hrv >= 40:
        return 70
    return 40


def _rhr_points(rhr: float) -> int:
    if rhr < 60:
        return 100
    if rhr < 80:
        return 70
    return 40


def _sleep_points(hours: float) -> int:
    if 7 <= hours <= 9:
        return 100
    if 6 <= hours <= 10:
        return 70
    return 40


def activity_score_from_summary(summary: Optional[ActivitySummary]) -> float:
    if summary is None:
        return NEUTRAL_SCORE
    points = (
        _hrv_points(summary.hrv)
        + _rhr_points(summary.rhr)
        + _sleep_points(summary.sleep_hours)
    )
    return points / 3


def activity_score(activity: Sequence[ActivitySample]) -> float:
    """Score averaged HRV, RHR and sleep; each component is worth equal weight."""
    return activity_score_from_summary(summarize_activity(activity))


def score_status(score: int) -> Tuple[HealthScoreStatus, str]:
    for minimum, status, label in SCORE_BANDS:
        if score >= minimum:
            return status, label
    return FALLBACK_BAND


def calculate_health_score(
    biomarkers: Mapping[str, float],
    phenoage: Optional[PhenoAgeResult],
    activity: Sequence[ActivitySample],
    sex: Optional[str] = None,
) -> HealthScoreResult:
    """
    Calculate the weighted 0-100 health score.

    Args:
        biomarkers: Mapping of biomarker id to value (measured and calculated)
        phenoage: PhenoAge estimate, or None when it could not be computed
        activity: Wearable samples already restricted to the scoring window
        sex: Optional sex for sex-specific optimal ranges

    Returns:
        HealthScoreResult with the rounded score and its breakdown
    """
    tally = tally_biomarkers(biomarkers, sex)
    biomarker_points = tally.score
    age_points = age_score(phenoage)
    activity_points = activity_score(activity)

    weighted = (
        biomarker_points * BIOMARKER_WEIGHT
        + age_points * AGE_WEIGHT
        + activity_points * ACTIVITY_WEIGHT
    )
    score = int(max(0, min(100, round_half_up(weighted))))
    status, label = score_status(score)

    logger.debug(
        f"[SCORE] biomarkers={biomarker_points:.1f} age={age_points:.1f} "
        f"activity={activity_points:.1f} -> {score} ({label})"
    )

    return HealthScoreResult(
        score=score,
        status=status,
        label=label,
        breakdown=HealthScoreBreakdown(
            biomarker_score=int(round_half_up(biomarker_points)),
            biomarker_weight=BIOMARKER_WEIGHT,
            age_score=int(round_half_up(age_points)),
            age_weight=AGE_WEIGHT,
            activity_score=int(round_half_up(activity_points)),
            activity_weight=ACTIVITY_WEIGHT,
            optimal_count=tally.optimal,
            normal_count=tally.normal,
            out_of_range_count=tally.out_of_range,
            total_biomarkers=tally.total,
        ),
    )
