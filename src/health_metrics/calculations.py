"""
Derived biomarker calculations.

Each derived marker is a DerivedFormula: a typed callable over named raw
inputs plus display metadata. A formula only runs when every input is
present and non-zero; otherwise that one marker is skipped. Log-based
formulas also return None for non-positive arguments.
"""
import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from .models import BiomarkerRecord, CalculatedBiomarker
from .numeric import round_half_up
from .reference import lookup, normalize_biomarker_name

logger = logging.getLogger(__name__)

# mg/dL -> mmol/L divisors
TG_MMOL_DIVISOR = 88.57
HDL_MMOL_DIVISOR = 38.67
# ng/dL testosterone -> nmol/L
TESTOSTERONE_NMOL_FACTOR = 0.0347


@dataclass(frozen=True)
class DerivedFormula:
    """A calculated biomarker definition."""

    id: str
    name: str
    unit: str
    label: str  # display only
    inputs: Tuple[str, ...]
    precision: int
    compute: Callable[..., Optional[float]]

    def evaluate(self, values: Mapping[str, float]) -> Optional[float]:
        """Run the formula, or return None if an input is missing or the math is undefined."""
        args = [values.get(key) for key in self.inputs]
        if not all(args):
            return None
        result = self.compute(*args)
        if result is None or not math.isfinite(result):
            return None
        return round_half_up(result, self.precision)


def _ratio(a: float, b: float) -> float:
    return a / b


def _atherogenic_index(tg: float, hdl: float) -> Optional[float]:
    ratio = (tg / TG_MMOL_DIVISOR) / (hdl / HDL_MMOL_DIVISOR)
    return math.log10(ratio) if ratio > 0 else None


def _quicki(insulin: float, glucose: float) -> Optional[float]:
    if insulin <= 0 or glucose <= 0:
        return None
    denominator = math.log10(insulin) + math.log10(glucose)
    return 1 / denominator if denominator else None


def _tyg_index(tg: float, glucose: float) -> Optional[float]:
    product = (tg * glucose) / 2
    return math.log(product) if product > 0 else None


def _nlpr(neutrophils: float, lymphocytes: float, platelets: float) -> float:
    return (neutrophils / lymphocytes) / (platelets / 100)


def _free_androgen_index(testosterone: float, shbg: float) -> float:
    return (testosterone * TESTOSTERONE_NMOL_FACTOR * 100) / shbg


DERIVED_FORMULAS: Tuple[DerivedFormula, ...] = (
    # Lipid ratios
    DerivedFormula(
        "tcHdlRatio", "TC/HDL Ratio", "ratio", "Total Cholesterol ÷ HDL",
        ("totalCholesterol", "hdl"), 2, _ratio,
    ),
    DerivedFormula(
        "ldlHdlRatio", "LDL/HDL Ratio", "ratio", "LDL ÷ HDL",
        ("ldl", "hdl"), 2, _ratio,
    ),
    DerivedFormula(
        "tgHdlRatio", "TG/HDL Ratio", "ratio", "Triglycerides ÷ HDL",
        ("triglycerides", "hdl"), 2, _ratio,
    ),
    DerivedFormula(
        "atherogenicIndex", "Atherogenic Index of Plasma", "index", "log₁₀(TG/HDL) [mmol/L]",
        ("triglycerides", "hdl"), 3, _atherogenic_index,
    ),
    DerivedFormula(
        "nonHdlC", "Non-HDL-C", "mg/dL", "TC − HDL",
        ("totalCholesterol", "hdl"), 0, lambda tc, hdl: tc - hdl,
    ),
    DerivedFormula(
        "remnantCholesterol", "Remnant Cholesterol", "mg/dL", "TC − HDL − LDL",
        ("totalCholesterol", "hdl", "ldl"), 0, lambda tc, hdl, ldl: tc - hdl - ldl,
    ),
    DerivedFormula(
        "atherogenicCoeff", "Atherogenic Coefficient", "ratio", "(TC − HDL) ÷ HDL",
        ("totalCholesterol", "hdl"), 2, lambda tc, hdl: (tc - hdl) / hdl,
    ),
    DerivedFormula(
        "ldlApoBRatio", "LDL/ApoB Ratio", "ratio", "LDL ÷ ApoB",
        ("ldl", "apoB"), 2, _ratio,
    ),
    DerivedFormula(
        "nonHdlApoBRatio", "Non-HDL/ApoB Ratio", "ratio", "(TC − HDL) ÷ ApoB",
        ("totalCholesterol", "hdl", "apoB"), 2, lambda tc, hdl, apob: (tc - hdl) / apob,
    ),
    DerivedFormula(
        "tgApoBRatio", "TG/ApoB Ratio", "ratio", "TG ÷ ApoB",
        ("triglycerides", "apoB"), 2, _ratio,
    ),
    DerivedFormula(
        "ldlTcRatio", "LDL/TC Ratio", "ratio", "LDL ÷ TC",
        ("ldl", "totalCholesterol"), 2, _ratio,
    ),
    DerivedFormula(
        "nonHdlTcRatio", "Non-HDL/TC Ratio", "ratio", "(TC − HDL) ÷ TC",
        ("totalCholesterol", "hdl"), 2, lambda tc, hdl: (tc - hdl) / tc,
    ),
    # Insulin sensitivity
    DerivedFormula(
        "homaIr", "HOMA-IR", "index", "(Fasting Insulin × Glucose) ÷ 405",
        ("fastingInsulin", "glucose"), 2, lambda insulin, glucose: (insulin * glucose) / 405,
    ),
    DerivedFormula(
        "quicki", "QUICKI", "index", "1 ÷ (log₁₀(Insulin) + log₁₀(Glucose))",
        ("fastingInsulin", "glucose"), 3, _quicki,
    ),
    DerivedFormula(
        "tygIndex", "TyG Index", "index", "Ln[(TG × Glucose) ÷ 2]",
        ("triglycerides", "glucose"), 2, _tyg_index,
    ),
    # Liver
    DerivedFormula(
        "deRitisRatio", "AST:ALT (De Ritis)", "ratio", "AST ÷ ALT",
        ("ast", "alt"), 2, _ratio,
    ),
    DerivedFormula(
        "agRatio", "A/G Ratio", "ratio", "Albumin ÷ Globulin",
        ("albumin", "globulin"), 2, _ratio,
    ),
    DerivedFormula(
        "bilirubinAlbuminRatio", "Bilirubin/Albumin Ratio", "ratio", "Total Bilirubin ÷ Albumin",
        ("totalBilirubin", "albumin"), 2, _ratio,
    ),
    DerivedFormula(
        "indirectDirectBilirubin", "Indirect/Direct Bilirubin", "ratio",
        "Indirect Bilirubin ÷ Direct Bilirubin",
        ("indirectBilirubin", "directBilirubin"), 2, _ratio,
    ),
    DerivedFormula(
        "ggtHdlRatio", "GGT/HDL Ratio", "ratio", "GGT ÷ HDL",
        ("ggt", "hdl"), 2, _ratio,
    ),
    # Kidney and metabolic
    DerivedFormula(
        "bunCreatinineRatio", "BUN/Creatinine Ratio", "ratio", "BUN ÷ Creatinine",
        ("bun", "creatinine"), 1, _ratio,
    ),
    DerivedFormula(
        "uricAcidHdlRatio", "Uric Acid/HDL Ratio", "ratio", "Uric Acid ÷ HDL",
        ("uricAcid", "hdl"), 2, _ratio,
    ),
    DerivedFormula(
        "correctedCalcium", "Corrected Calcium", "mg/dL", "Ca + 0.8 × (4.0 − Albumin)",
        ("calcium", "albumin"), 2, lambda calcium, albumin: calcium + 0.8 * (4.0 - albumin),
    ),
    # CBC inflammation ratios; absolute counts in ×10⁹/L
    DerivedFormula(
        "nlr", "NLR (Neutrophil/Lymphocyte)", "ratio", "Neutrophils ÷ Lymphocytes",
        ("neutrophils", "lymphocytes"), 2, _ratio,
    ),
    DerivedFormula(
        "plr", "PLR (Platelet/Lymphocyte)", "ratio", "Platelets ÷ Lymphocytes",
        ("platelets", "lymphocytes"), 0, _ratio,
    ),
    DerivedFormula(
        "mlr", "MLR (Monocyte/Lymphocyte)", "ratio", "Monocytes ÷ Lymphocytes",
        ("monocytes", "lymphocytes"), 2, _ratio,
    ),
    DerivedFormula(
        "lmr", "LMR (Lymphocyte/Monocyte)", "ratio", "Lymphocytes ÷ Monocytes",
        ("lymphocytes", "monocytes"), 2, _ratio,
    ),
    DerivedFormula(
        "sii", "SII (Immune-Inflammation Index)", "index",
        "(Platelets × Neutrophils) ÷ Lymphocytes",
        ("platelets", "neutrophils", "lymphocytes"), 0,
        lambda platelets, neut, lymph: (platelets * neut) / lymph,
    ),
    DerivedFormula(
        "siri", "SIRI (Inflammation Response Index)", "index",
        "(Monocytes × Neutrophils) ÷ Lymphocytes",
        ("monocytes", "neutrophils", "lymphocytes"), 2,
        lambda mono, neut, lymph: (mono * neut) / lymph,
    ),
    DerivedFormula(
        "pwr", "Platelet/WBC Ratio", "ratio", "Platelets ÷ WBC",
        ("platelets", "wbc"), 1, _ratio,
    ),
    DerivedFormula(
        "mhr", "Monocyte/HDL Ratio", "ratio", "Monocytes ÷ HDL",
        ("monocytes", "hdl"), 3, _ratio,
    ),
    DerivedFormula(
        "nhr", "Neutrophil/HDL Ratio", "ratio", "Neutrophils ÷ HDL",
        ("neutrophils", "hdl"), 3, _ratio,
    ),
    DerivedFormula(
        "nlpr", "NLPR (NLR/Platelet Ratio)", "ratio", "NLR ÷ (Platelets ÷ 100)",
        ("neutrophils", "lymphocytes", "platelets"), 3, _nlpr,
    ),
    DerivedFormula(
        "car", "CRP/Albumin Ratio", "ratio", "CRP ÷ Albumin",
        ("crp", "albumin"), 2, _ratio,
    ),
    DerivedFormula(
        "ferritinAlbuminRatio", "Ferritin/Albumin Ratio", "ratio", "Ferritin ÷ Albumin",
        ("ferritin", "albumin"), 1, _ratio,
    ),
    DerivedFormula(
        "rdwMcvRatio", "RDW/MCV Ratio", "ratio", "RDW ÷ MCV",
        ("rdw", "mcv"), 3, _ratio,
    ),
    # Thyroid, minerals and hormones
    DerivedFormula(
        "ft3Rt3Ratio", "FT3/rT3 Ratio", "ratio", "Free T3 ÷ Reverse T3",
        ("freeT3", "reverseT3"), 2, _ratio,
    ),
    DerivedFormula(
        "copperZincRatio", "Copper/Zinc Ratio", "ratio", "Copper ÷ Zinc",
        ("copper", "zinc"), 2, _ratio,
    ),
    DerivedFormula(
        "testosteroneEstradiolRatio", "Testosterone/Estradiol Ratio", "ratio",
        "Total Testosterone ÷ Estradiol",
        ("totalTestosterone", "estradiol"), 1, _ratio,
    ),
    DerivedFormula(
        "freeAndrogenIndex", "Free Androgen Index", "index",
        "(Total Testosterone [nmol/L] × 100) ÷ SHBG",
        ("totalTestosterone", "shbg"), 1, _free_androgen_index,
    ),
)

FORMULAS_BY_ID = {formula.id: formula for formula in DERIVED_FORMULAS}

# Absolute count -> (percentage key) used when the lab only reports a differential
_DIFFERENTIAL_PERCENTAGES = {
    "neutrophils": "neutrophilPercent",
    "lymphocytes": "lymphocytePercent",
    "monocytes": "monocytePercent",
}


def _with_absolute_counts(raw: Mapping[str, float]) -> Dict[str, float]:
    """Fill missing absolute WBC differential counts from percentage × WBC."""
    values = dict(raw)
    wbc = raw.get("wbc")
    for absolute, percent_key in _DIFFERENTIAL_PERCENTAGES.items():
        if values.get(absolute) is not None:
            continue
        percent = raw.get(percent_key)
        if percent and wbc:
            values[absolute] = (percent / 100) * wbc
    return values


def calculate_derived_biomarkers(raw: Mapping[str, float]) -> List[CalculatedBiomarker]:
    """
    Calculate every derived biomarker whose inputs are present.

    Args:
        raw: Mapping of canonical biomarker id to measured value

    Returns:
        Calculated biomarkers in formula order; formulas with missing
        inputs are skipped.
    """
    values = _with_absolute_counts(raw)
    calculated: List[CalculatedBiomarker] = []

    for formula in DERIVED_FORMULAS:
        value = formula.evaluate(values)
        if value is None:
            logger.debug(f"[DERIVED] Skipping {formula.id}: inputs {formula.inputs} unavailable")
            continue
        calculated.append(
            CalculatedBiomarker(
                id=formula.id,
                name=formula.name,
                value=value,
                unit=formula.unit,
                formula=formula.label,
                inputs=list(formula.inputs),
            )
        )

    return calculated


def merge_with_calculated(raw: Mapping[str, float]) -> Dict[str, float]:
    """
    Merge calculated values into a copy of the raw values.

    A measured value always wins over a calculated one with the same id.
    """
    merged = dict(raw)
    for calc in calculate_derived_biomarkers(raw):
        if calc.id in merged:
            logger.debug(f"[DERIVED] Keeping measured {calc.id}={merged[calc.id]} over calculated {calc.value}")
            continue
        merged[calc.id] = calc.value
    return merged


def combine_measured_and_calculated(measured: Iterable[BiomarkerRecord]) -> List[BiomarkerRecord]:
    """
    Append calculated records to measured ones, dropping calculated
    duplicates of ids the lab already reported.
    """
    measured = list(measured)
    measured_ids = {record.id for record in measured}
    raw_values = {record.id: record.value for record in measured}

    combined = list(measured)
    for calc in calculate_derived_biomarkers(raw_values):
        if calc.id in measured_ids:
            continue
        ref = lookup(calc.id)
        combined.append(
            BiomarkerRecord(
                id=calc.id,
                name=calc.name,
                value=calc.value,
                unit=calc.unit,
                category=ref.category.value if ref else None,
                source="calculated",
            )
        )
    return combined


def deduplicate_entries(entries: Iterable[Tuple[str, float]]) -> Dict[str, float]:
    """
    Normalize extracted (name, value) pairs into a value map.

    The first occurrence of a normalized id wins; later duplicates are
    dropped (lab reports often repeat a marker in a summary table).
    """
    values: Dict[str, float] = {}
    for name, value in entries:
        key = normalize_biomarker_name(name)
        if key in values:
            logger.debug(f"[DERIVED] Dropping duplicate {name!r} -> {key}")
            continue
        values[key] = value
    return values
