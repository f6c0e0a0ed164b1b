"""Top-markers selection for the dashboard summary card."""
import logging
from typing import List, Mapping, Optional

from .models import TopMarker
from .reference import lookup
from .status import AGE_FIELD, BiomarkerStatus, classify

logger = logging.getLogger(__name__)

DEFAULT_TOP_MARKER_LIMIT = 5

# Always shown first, in this order, when present
ANCHOR_MARKERS = ("apoB", "hba1c")

# Ranked by longevity relevance, most relevant first
LONGEVITY_PRIORITY = (
    "crp",
    "vitaminD",
    "ldl",
    "hdl",
    "triglycerides",
    "fastingInsulin",
    "homocysteine",
    "glucose",
    "albumin",
)

DEPRIORITIZED_MARKERS = (
    "alkalinePhosphatase",
    "mcv",
    "rdw",
    "wbc",
    "creatinine",
)

STATUS_POINTS = {
    BiomarkerStatus.OUT_OF_RANGE: 100,
    BiomarkerStatus.BORDERLINE: 50,
    BiomarkerStatus.NORMAL: 10,
    BiomarkerStatus.OPTIMAL: 0,
}
LONGEVITY_POINTS_PER_RANK = 10
DEPRIORITIZED_PENALTY = 50

_LONGEVITY_RANK = {key.lower(): index for index, key in enumerate(LONGEVITY_PRIORITY)}
_DEPRIORITIZED = {key.lower() for key in DEPRIORITIZED_MARKERS}


def marker_score(biomarker_id: str, status: BiomarkerStatus) -> int:
    """
    Priority score for a marker; higher is shown first.

    Status severity, plus a bonus for longevity-relevant markers, minus a
    penalty for markers that are hard to act on.
    """
    key = biomarker_id.lower()
    score = STATUS_POINTS[status]

    rank = _LONGEVITY_RANK.get(key)
    if rank is not None:
        score += (len(LONGEVITY_PRIORITY) - rank) * LONGEVITY_POINTS_PER_RANK

    if key in _DEPRIORITIZED:
        score -= DEPRIORITIZED_PENALTY

    return score


def select_top_markers(
    biomarkers: Mapping[str, float],
    sex: Optional[str] = None,
    limit: int = DEFAULT_TOP_MARKER_LIMIT,
) -> List[TopMarker]:
    """
    Pick the markers to feature on the dashboard.

    Anchors (ApoB, HbA1c) come first when present; remaining slots go to the
    highest-scoring markers, ties keeping input order. Unknown ids are
    ignored.
    """
    candidates = []
    seen = set()
    for key, value in biomarkers.items():
        if key == AGE_FIELD or value is None:
            continue
        ref = lookup(key)
        if ref is None or ref.id in seen:
            continue
        seen.add(ref.id)
        status = classify(ref.id, value, sex)
        marker = TopMarker(
            id=ref.id,
            name=ref.display_name,
            value=value,
            unit=ref.unit,
            status=status,
        )
        candidates.append((marker_score(ref.id, status), marker))

    by_id = {marker.id.lower(): marker for _, marker in candidates}
    selected: List[TopMarker] = []
    for anchor in ANCHOR_MARKERS:
        marker = by_id.get(anchor.lower())
        if marker is not None:
            selected.append(marker)

    chosen = {marker.id for marker in selected}
    remaining = [entry for entry in candidates if entry[1].id not in chosen]
    remaining.sort(key=lambda entry: entry[0], reverse=True)

    for score, marker in remaining:
        if len(selected) >= limit:
            break
        selected.append(marker)
        logger.debug(f"[TOP] {marker.id} score={score} status={marker.status.value}")

    return selected[:max(limit, 0)]
