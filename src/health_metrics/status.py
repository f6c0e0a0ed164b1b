"""Biomarker status classification against the reference catalog."""
import logging
import math
from enum import Enum
from typing import Dict, Mapping, Optional

from .definitions import Direction
from .reference import lookup, resolve_biomarker_id

logger = logging.getLogger(__name__)

# Key some extraction sources put inside the value map; never a biomarker.
AGE_FIELD = "patientAge"

# Direction-only fallback multipliers. Kept for compatibility with the
# dashboard's historical output; not clinically validated thresholds.
LOWER_OUT_OF_RANGE_FACTOR = 1.2
HIGHER_OUT_OF_RANGE_FACTOR = 0.8


class BiomarkerStatus(str, Enum):
    """Classification of a single biomarker value."""

    OPTIMAL = "optimal"
    NORMAL = "normal"
    BORDERLINE = "borderline"
    OUT_OF_RANGE = "out_of_range"

    @property
    def severity(self) -> int:
        """0 for optimal up to 3 for out of range."""
        return _SEVERITY[self]


_SEVERITY = {
    BiomarkerStatus.OPTIMAL: 0,
    BiomarkerStatus.NORMAL: 1,
    BiomarkerStatus.BORDERLINE: 2,
    BiomarkerStatus.OUT_OF_RANGE: 3,
}


def classify(biomarker_id: str, value: float, sex: Optional[str] = None) -> BiomarkerStatus:
    """
    Classify a value for a biomarker.

    Order matters: a value inside the optimal range is optimal even when the
    standard range says otherwise, and borderline is only inferred when both
    ranges are known. Unknown biomarkers are always NORMAL.

    Args:
        biomarker_id: Catalog id, alias or lab-report name
        value: Measured value in the catalog's unit
        sex: Optional 'male'/'female' to use sex-specific optimal ranges

    Returns:
        The BiomarkerStatus for the value
    """
    ref = lookup(biomarker_id)
    if ref is None:
        logger.debug(f"[STATUS] Unknown biomarker {biomarker_id!r}, defaulting to normal")
        return BiomarkerStatus.NORMAL

    # NaN compares false against every bound and would read as optimal
    if not math.isfinite(value):
        logger.debug(f"[STATUS] Non-finite value for {biomarker_id!r}, defaulting to normal")
        return BiomarkerStatus.NORMAL

    optimal = ref.optimal_for(sex)
    standard = ref.standard_range

    if optimal is not None and optimal.contains(value):
        return BiomarkerStatus.OPTIMAL

    if standard is not None and not standard.contains(value):
        return BiomarkerStatus.OUT_OF_RANGE

    if optimal is not None and standard is not None:
        return BiomarkerStatus.BORDERLINE

    if ref.direction == Direction.LOWER and optimal is not None and optimal.max:
        if value > optimal.max * LOWER_OUT_OF_RANGE_FACTOR:
            return BiomarkerStatus.OUT_OF_RANGE
        if value > optimal.max:
            return BiomarkerStatus.BORDERLINE
        return BiomarkerStatus.OPTIMAL

    if ref.direction == Direction.HIGHER and optimal is not None and optimal.min:
        if value < optimal.min * HIGHER_OUT_OF_RANGE_FACTOR:
            return BiomarkerStatus.OUT_OF_RANGE
        if value < optimal.min:
            return BiomarkerStatus.BORDERLINE
        return BiomarkerStatus.OPTIMAL

    return BiomarkerStatus.NORMAL


def classify_all(
    values: Mapping[str, float], sex: Optional[str] = None
) -> Dict[str, BiomarkerStatus]:
    """
    Classify every recognised biomarker in a value map.

    Keys are reported as canonical ids. Unknown ids and the age field are
    skipped rather than counted as normal.
    """
    statuses: Dict[str, BiomarkerStatus] = {}
    for key, value in values.items():
        if key == AGE_FIELD or value is None:
            continue
        canonical = resolve_biomarker_id(key)
        if canonical is None or canonical in statuses:
            continue
        statuses[canonical] = classify(canonical, value, sex)
    return statuses
