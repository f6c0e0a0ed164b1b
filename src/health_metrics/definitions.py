"""Reference catalog types: ranges, directions, categories and biomarker definitions."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Range:
    """Inclusive numeric range. Either bound may be absent (unbounded on that side)."""

    min: Optional[float] = None
    max: Optional[float] = None

    def contains(self, value: float) -> bool:
        if self.min is not None and value < self.min:
            return False
        if self.max is not None and value > self.max:
            return False
        return True

    def describe(self, unit: str = "") -> str:
        """Human-readable label, e.g. '60-100 mg/dL' or '≤70 mg/dL'."""
        if self.min is not None and self.max is not None:
            text = f"{_fmt(self.min)}-{_fmt(self.max)}"
        elif self.max is not None:
            text = f"≤{_fmt(self.max)}"
        elif self.min is not None:
            text = f"≥{_fmt(self.min)}"
        else:
            return ""
        return f"{text} {unit}".strip()


def _fmt(bound: float) -> str:
    return f"{bound:g}"


class Direction(str, Enum):
    """Which side of a reference range is favorable."""

    LOWER = "lower"
    HIGHER = "higher"
    MID_RANGE = "mid-range"
    CONTEXT = "context"


class Category(str, Enum):
    """Biomarker panel grouping."""

    LIPIDS = "lipids"
    LIPID_RATIOS = "lipid-ratios"
    METABOLIC = "metabolic"
    INSULIN_CALCS = "insulin-calcs"
    LIVER = "liver"
    KIDNEY = "kidney"
    CBC = "cbc"
    IRON = "iron"
    CBC_RATIOS = "cbc-ratios"
    THYROID = "thyroid"
    INFLAMMATION = "inflammation"
    VITAMINS = "vitamins"
    MINERALS = "minerals"
    MALE_HORMONES = "male-hormones"
    FEMALE_HORMONES = "female-hormones"
    CARDIOVASCULAR = "cardiovascular"
    OXIDATIVE_STRESS = "oxidative-stress"
    GUT_HEALTH = "gut-health"
    HEAVY_METALS = "heavy-metals"
    AUTOIMMUNE = "autoimmune"
    CANCER_SCREENING = "cancer-screening"


CATEGORY_LABELS = {
    Category.LIPIDS: "Lipid Panel",
    Category.LIPID_RATIOS: "Lipid Ratios",
    Category.METABOLIC: "Metabolic Panel",
    Category.INSULIN_CALCS: "Insulin Calculations",
    Category.LIVER: "Liver Function",
    Category.KIDNEY: "Kidney Function",
    Category.CBC: "Complete Blood Count",
    Category.IRON: "Iron Panel",
    Category.CBC_RATIOS: "CBC Inflammation Ratios",
    Category.THYROID: "Thyroid Panel",
    Category.INFLAMMATION: "Inflammation Markers",
    Category.VITAMINS: "Vitamins",
    Category.MINERALS: "Minerals & Fatty Acids",
    Category.MALE_HORMONES: "Male Hormones",
    Category.FEMALE_HORMONES: "Female Hormones",
    Category.CARDIOVASCULAR: "Advanced Cardiovascular",
    Category.OXIDATIVE_STRESS: "Oxidative Stress",
    Category.GUT_HEALTH: "Gut Health",
    Category.HEAVY_METALS: "Heavy Metals",
    Category.AUTOIMMUNE: "Autoimmune Markers",
    Category.CANCER_SCREENING: "Cancer Screening",
}


@dataclass(frozen=True)
class BiomarkerReference:
    """
    Static reference definition for one biomarker.

    `formula` is display text for calculated markers; the executable
    version lives in `health_metrics.calculations`.
    """

    id: str
    name: str
    category: Category
    unit: str
    direction: Direction
    standard_range: Optional[Range] = None
    optimal_range: Optional[Range] = None
    is_calculated: bool = False
    formula: Optional[str] = None
    male_optimal: Optional[Range] = None
    female_optimal: Optional[Range] = None

    @property
    def display_name(self) -> str:
        return self.name

    @property
    def category_label(self) -> str:
        return CATEGORY_LABELS[self.category]

    def optimal_for(self, sex: Optional[str] = None) -> Optional[Range]:
        """Optimal range for the given sex ('male'/'female'), falling back to the general one."""
        if sex:
            sex = sex.strip().lower()
            if sex in ("male", "m") and self.male_optimal is not None:
                return self.male_optimal
            if sex in ("female", "f") and self.female_optimal is not None:
                return self.female_optimal
        return self.optimal_range
