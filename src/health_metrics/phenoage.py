"""
Levine PhenoAge biological age estimator.

Levine et al. (2018), "An epigenetic biomarker of aging for lifespan and
healthspan", https://doi.org/10.18632/aging.101414

The coefficients below are the published ones and are not tunable.
Inputs are taken in the units the dashboard stores them in.
"""
import logging
import math
from typing import List, Mapping, Optional, Tuple

from .models import PhenoAgeResult
from .numeric import round_half_up

logger = logging.getLogger(__name__)

PHENOAGE_INPUTS: Tuple[str, ...] = (
    "albumin",
    "creatinine",
    "glucose",
    "crp",
    "lymphocytePercent",
    "mcv",
    "rdw",
    "alkalinePhosphatase",
    "wbc",
)

INTERCEPT = -19.9067
COEFFICIENTS = {
    "albumin": -0.0336,
    "creatinine": 0.0095,
    "glucose": 0.1953,
    "crp": 0.0954,  # applied to ln(crp)
    "lymphocytePercent": -0.0120,
    "mcv": 0.0268,
    "rdw": 0.3306,
    "alkalinePhosphatase": 0.00188,
    "wbc": 0.0554,
}
AGE_COEFFICIENT = 0.0804

GAMMA = 0.0077
MORTALITY_CAP = 0.9999
CRP_FLOOR = 0.01

MIN_PHENOAGE = 0.0
MAX_PHENOAGE = 150.0


def missing_phenoage_inputs(raw: Mapping[str, float]) -> List[str]:
    """Return the required inputs absent from `raw`, in canonical order."""
    return [key for key in PHENOAGE_INPUTS if raw.get(key) is None]


def _linear_predictor(raw: Mapping[str, float], chronological_age: float) -> float:
    xb = INTERCEPT + AGE_COEFFICIENT * chronological_age
    for key, coefficient in COEFFICIENTS.items():
        value = raw[key]
        if key == "crp":
            value = math.log(value if value > 0 else CRP_FLOOR)
        xb += coefficient * value
    return xb


def calculate_phenoage(
    raw: Mapping[str, float], chronological_age: float
) -> Optional[PhenoAgeResult]:
    """
    Estimate biological age from nine blood markers.

    Args:
        raw: Mapping of biomarker id to value; must contain every id in
            PHENOAGE_INPUTS
        chronological_age: Age in years

    Returns:
        PhenoAgeResult, or None if any required input is missing or the
        age is not a finite number
    """
    if chronological_age is None or not math.isfinite(chronological_age):
        logger.debug(f"[PHENOAGE] Unusable chronological age {chronological_age!r}, no estimate")
        return None

    missing = missing_phenoage_inputs(raw)
    if missing:
        logger.debug(f"[PHENOAGE] Missing inputs {missing}, no estimate")
        return None

    xb = _linear_predictor(raw, chronological_age)

    # Gompertz 10-year mortality; exp() overflow means certain mortality
    try:
        hazard = math.exp(xb) * (math.exp(120 * GAMMA) - 1) / GAMMA
        mortality = 1 - math.exp(-hazard)
    except OverflowError:
        mortality = 1.0
    mortality = min(mortality, MORTALITY_CAP)

    log_survival = math.log(1 - mortality)
    if log_survival == 0:
        # m underflowed to zero: youngest representable estimate
        pheno_age = MIN_PHENOAGE
    else:
        pheno_age = 141.50225 + math.log(-0.00553 * log_survival) / 0.090165

    pheno_age = round_half_up(max(MIN_PHENOAGE, min(MAX_PHENOAGE, pheno_age)), 1)
    delta = round_half_up(pheno_age - chronological_age, 1)

    logger.debug(f"[PHENOAGE] xb={xb:.4f} m={mortality:.6f} phenoAge={pheno_age} delta={delta}")
    return PhenoAgeResult(pheno_age=pheno_age, delta=delta)
