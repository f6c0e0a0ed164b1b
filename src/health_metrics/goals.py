"""
Goal generation from classified biomarkers.

Walks a fixed list of biomarker goal templates; a template fires only when
its marker is borderline or out of range. Two synthetic goals cover an
elevated PhenoAge and high body fat.
"""
import logging
from dataclasses import dataclass
from typing import List, Mapping, Optional, Tuple

from .models import BodyComposition, Goal, GoalPriority, PhenoAgeResult
from .reference import lookup
from .status import BiomarkerStatus, classify

logger = logging.getLogger(__name__)

DEFAULT_GOAL_LIMIT = 7

PRIORITY_ORDER = {"high": 0, "medium": 1, "low": 2}

BIOAGE_DELTA_THRESHOLD = 2.0
BIOAGE_HIGH_PRIORITY_DELTA = 5.0
BODY_FAT_THRESHOLD = 25.0
BODY_FAT_HIGH_PRIORITY = 30.0


@dataclass(frozen=True)
class GoalTemplate:
    """Goal fired by a single out-of-range or borderline biomarker."""

    biomarker_key: str
    title: str
    description: str
    category: str
    action_items: Tuple[str, ...]
    priority_if_out_of_range: GoalPriority
    priority_if_borderline: GoalPriority

    def priority_for(self, status: BiomarkerStatus) -> Optional[GoalPriority]:
        """Priority for a status, or None if the status needs no goal."""
        if status == BiomarkerStatus.OUT_OF_RANGE:
            return self.priority_if_out_of_range
        if status == BiomarkerStatus.BORDERLINE:
            return self.priority_if_borderline
        return None


GOAL_TEMPLATES: Tuple[GoalTemplate, ...] = (
    GoalTemplate(
        biomarker_key="ldl",
        title="Lower artery-clogging cholesterol",
        description="High LDL cholesterol increases risk of heart disease. Focus on diet and lifestyle changes.",
        category="Cardiovascular",
        action_items=(
            "Reduce saturated fat intake (red meat, full-fat dairy)",
            "Increase soluble fiber (oats, beans, fruits)",
            "Add plant sterols to diet",
            "Exercise 150+ min/week of moderate cardio",
            "Consider fish oil supplements",
        ),
        priority_if_out_of_range="high",
        priority_if_borderline="medium",
    ),
    GoalTemplate(
        biomarker_key="glucose",
        title="Optimize blood sugar control",
        description="Elevated fasting glucose can indicate insulin resistance. Address through diet and exercise.",
        category="Metabolic",
        action_items=(
            "Reduce refined carbs and sugars",
            "Eat more protein and healthy fats",
            "Walk after meals to lower glucose spikes",
            "Strength training 2-3x/week",
            "Consider berberine or metformin (consult doctor)",
        ),
        priority_if_out_of_range="high",
        priority_if_borderline="medium",
    ),
    GoalTemplate(
        biomarker_key="crp",
        title="Reduce systemic inflammation",
        description="Elevated CRP indicates chronic inflammation, linked to many diseases.",
        category="Inflammation",
        action_items=(
            "Eliminate processed foods and seed oils",
            "Eat fatty fish 2-3x/week",
            "Add turmeric/curcumin to diet",
            "Prioritize quality sleep (7-8 hours)",
            "Manage stress with meditation or exercise",
        ),
        priority_if_out_of_range="high",
        priority_if_borderline="medium",
    ),
    GoalTemplate(
        biomarker_key="hdl",
        title="Boost protective HDL cholesterol",
        description="Low HDL reduces your body's ability to clear LDL from arteries.",
        category="Cardiovascular",
        action_items=(
            "Increase aerobic exercise intensity",
            "Add healthy fats (olive oil, avocado, nuts)",
            "Moderate alcohol may help (1 drink/day)",
            "Quit smoking if applicable",
            "Consider niacin supplements (consult doctor)",
        ),
        priority_if_out_of_range="high",
        priority_if_borderline="low",
    ),
    GoalTemplate(
        biomarker_key="triglycerides",
        title="Lower triglyceride levels",
        description="High triglycerides increase cardiovascular risk and often indicate metabolic issues.",
        category="Cardiovascular",
        action_items=(
            "Cut sugar and refined carbs drastically",
            "Limit alcohol consumption",
            "Eat fatty fish or take omega-3s",
            "Lose excess body fat",
            "Exercise regularly",
        ),
        priority_if_out_of_range="high",
        priority_if_borderline="medium",
    ),
    GoalTemplate(
        biomarker_key="vitaminD",
        title="Optimize vitamin D levels",
        description="Low vitamin D affects bone health, immune function, and mood.",
        category="Vitamins",
        action_items=(
            "Get 15-20 min of midday sun exposure",
            "Supplement with D3 (2000-5000 IU/day)",
            "Take with fat for better absorption",
            "Eat vitamin D rich foods (fatty fish, eggs)",
            "Retest in 3 months",
        ),
        priority_if_out_of_range="medium",
        priority_if_borderline="low",
    ),
    GoalTemplate(
        biomarker_key="hba1c",
        title="Improve long-term blood sugar",
        description="Elevated HbA1c shows average blood sugar over 3 months. Indicates diabetes risk.",
        category="Metabolic",
        action_items=(
            "Adopt low-carb or Mediterranean diet",
            "Time-restricted eating (16:8 fasting)",
            "Regular exercise, especially after meals",
            "Monitor blood glucose regularly",
            "Work with doctor on medication if needed",
        ),
        priority_if_out_of_range="high",
        priority_if_borderline="medium",
    ),
    GoalTemplate(
        biomarker_key="homocysteine",
        title="Lower homocysteine levels",
        description="High homocysteine is linked to cardiovascular disease and cognitive decline.",
        category="Cardiovascular",
        action_items=(
            "Supplement with B12, B6, and folate",
            "Eat leafy greens and legumes",
            "Reduce red meat consumption",
            "Consider methylated B vitamins",
            "Check for MTHFR gene variants",
        ),
        priority_if_out_of_range="medium",
        priority_if_borderline="low",
    ),
    GoalTemplate(
        biomarker_key="ferritin",
        title="Optimize iron stores",
        description="Ferritin out of range can indicate iron deficiency or overload.",
        category="Blood",
        action_items=(
            "If low: eat iron-rich foods with vitamin C",
            "If high: donate blood regularly",
            "Avoid excessive red meat and supplements",
            "Get full iron panel tested",
            "Rule out underlying conditions",
        ),
        priority_if_out_of_range="medium",
        priority_if_borderline="low",
    ),
    GoalTemplate(
        biomarker_key="tsh",
        title="Optimize thyroid function",
        description="TSH out of range indicates thyroid issues affecting metabolism and energy.",
        category="Hormones",
        action_items=(
            "Get full thyroid panel (T3, T4, antibodies)",
            "Check iodine and selenium intake",
            "Manage stress levels",
            "Consider thyroid medication if needed",
            "Monitor symptoms: fatigue, weight, temperature",
        ),
        priority_if_out_of_range="high",
        priority_if_borderline="medium",
    ),
)


def _target_range(biomarker_key: str, sex: Optional[str]) -> Optional[str]:
    ref = lookup(biomarker_key)
    if ref is None:
        return None
    optimal = ref.optimal_for(sex)
    if optimal is None:
        return None
    return optimal.describe(ref.unit) or None


def _biomarker_goals(biomarkers: Mapping[str, float], sex: Optional[str]) -> List[Goal]:
    goals = []
    for template in GOAL_TEMPLATES:
        value = biomarkers.get(template.biomarker_key)
        if value is None:
            continue

        status = classify(template.biomarker_key, value, sex)
        priority = template.priority_for(status)
        if priority is None:
            continue

        logger.debug(f"[GOALS] {template.biomarker_key}={value} is {status.value}, priority {priority}")
        goals.append(
            Goal(
                id=f"goal-{template.biomarker_key}",
                title=template.title,
                description=template.description,
                priority=priority,
                category=template.category,
                action_items=list(template.action_items),
                biomarker_key=template.biomarker_key,
                current_value=value,
                target_value=_target_range(template.biomarker_key, sex),
            )
        )
    return goals


def _bioage_goal(phenoage: PhenoAgeResult) -> Goal:
    return Goal(
        id="goal-bioage",
        title="Reverse biological aging",
        description=(
            f"Your biological age is {phenoage.delta:.1f} years older than your "
            "chronological age. Focus on the key biomarkers that drive PhenoAge."
        ),
        priority="high" if phenoage.delta > BIOAGE_HIGH_PRIORITY_DELTA else "medium",
        category="Longevity",
        action_items=[
            "Focus on reducing inflammation (CRP)",
            "Optimize metabolic markers (glucose, HbA1c)",
            "Improve kidney function (creatinine)",
            "Boost immune markers (lymphocytes, WBC)",
            "Consider rapamycin protocol (consult longevity physician)",
        ],
    )


def _body_fat_goal(body_fat: float) -> Goal:
    return Goal(
        id="goal-bodyfat",
        title="Optimize body composition",
        description=(
            f"Current body fat is {body_fat:g}%. Reducing to 15-20% improves "
            "metabolic health significantly."
        ),
        priority="high" if body_fat > BODY_FAT_HIGH_PRIORITY else "medium",
        category="Body Composition",
        action_items=[
            "Create modest caloric deficit (300-500 cal/day)",
            "Strength train 3x/week to preserve muscle",
            "High protein intake (1g/lb lean body mass)",
            "Walk 8,000-10,000 steps daily",
            "Track progress with DEXA scans quarterly",
        ],
    )


def generate_goals(
    biomarkers: Mapping[str, float],
    phenoage: Optional[PhenoAgeResult],
    body_comp: Optional[BodyComposition] = None,
    sex: Optional[str] = None,
    limit: int = DEFAULT_GOAL_LIMIT,
) -> List[Goal]:
    """
    Build the prioritized goal list.

    Args:
        biomarkers: Mapping of canonical biomarker id to value
        phenoage: PhenoAge estimate, if available
        body_comp: Latest body composition scan, if available
        sex: Optional sex for sex-specific optimal ranges
        limit: Maximum number of goals returned

    Returns:
        Goals ordered high, medium, low; template order is kept within a
        priority.
    """
    goals = _biomarker_goals(biomarkers, sex)

    if phenoage is not None and phenoage.delta > BIOAGE_DELTA_THRESHOLD:
        goals.append(_bioage_goal(phenoage))

    body_fat = body_comp.body_fat_percent if body_comp else None
    if body_fat is not None and body_fat > BODY_FAT_THRESHOLD:
        goals.append(_body_fat_goal(body_fat))

    goals.sort(key=lambda goal: PRIORITY_ORDER[goal.priority])
    return goals[:max(limit, 0)]
