"""Metabolic calculator: BMR, TDEE, calorie targets and health score."""

import math
from collections.abc import Iterable

from metabolikal.domain.calculator import (
    ACTIVITY_MULTIPLIERS,
    GOAL_ADJUSTMENTS,
    MAX_METABOLIC_IMPACT_PERCENT,
    MEDICAL_CONDITIONS,
    NO_CONDITION_SLUG,
    CalculatorInputs,
    CalculatorResults,
    Gender,
    Goal,
    MedicalCondition,
)

HEALTHY_CALORIE_RANGE = (1200, 3500)
CALORIE_RANGE_BONUS = 5
LIFESTYLE_WEIGHT = 0.6
METABOLIC_WEIGHT = 40
MAX_HEALTH_SCORE = 100


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounded towards +infinity."""
    return math.floor(value + 0.5)


def calculate_bmr_mifflin_st_jeor(
    gender: Gender, weight_kg: float, height_cm: float, age: int
) -> float:
    """Estimate BMR with the Mifflin-St Jeor equation.

    Men: 10w + 6.25h - 5a + 5. Women: 10w + 6.25h - 5a - 161.
    """
    base_bmr = 10 * weight_kg + 6.25 * height_cm - 5 * age
    if gender == Gender.MALE:
        return base_bmr + 5
    return base_bmr - 161


def calculate_bmr_katch_mcardle(weight_kg: float, body_fat_percent: float) -> float:
    """Estimate BMR from lean mass with the Katch-McArdle equation."""
    lean_mass = weight_kg * (1 - body_fat_percent / 100)
    return 370 + 21.6 * lean_mass


def calculate_metabolic_impact(
    conditions: Iterable[str],
    catalog: Iterable[MedicalCondition] = MEDICAL_CONDITIONS,
) -> float:
    """Sum the metabolic impact of the selected condition slugs.

    Selecting "none" cancels every other selection. Unknown slugs contribute
    nothing and the total is capped at 30%.
    """
    selected = list(conditions)
    if NO_CONDITION_SLUG in selected or not selected:
        return 0
    impacts = {condition.slug: condition.impact_percent for condition in catalog}
    total_impact = sum(impacts.get(slug, 0) for slug in selected)
    return min(total_impact, MAX_METABOLIC_IMPACT_PERCENT)


def calculate_protein_recommendation(weight_kg: float, goal: Goal) -> int:
    """Return daily protein grams for a body weight and goal."""
    return round_half_up(weight_kg * GOAL_ADJUSTMENTS[goal].protein_per_kg)


def conditions_for_gender(
    conditions: Iterable[MedicalCondition], gender: Gender | None
) -> list[MedicalCondition]:
    """Filter out conditions restricted to the other gender."""
    if gender is None:
        return list(conditions)
    return [
        condition
        for condition in conditions
        if condition.gender_restriction is None
        or condition.gender_restriction == gender
    ]


def calculate(
    inputs: CalculatorInputs | None,
    catalog: Iterable[MedicalCondition] = MEDICAL_CONDITIONS,
) -> CalculatorResults | None:
    """Compute calorie and protein targets, or None when nothing was submitted."""
    if inputs is None:
        return None
    return calculate_results(inputs, catalog)


def calculate_results(
    inputs: CalculatorInputs,
    catalog: Iterable[MedicalCondition] = MEDICAL_CONDITIONS,
) -> CalculatorResults:
    """Run the BMR, TDEE, impact and goal pipeline for submitted inputs."""
    if inputs.body_fat_percent is not None:
        bmr = calculate_bmr_katch_mcardle(inputs.weight_kg, inputs.body_fat_percent)
    else:
        bmr = calculate_bmr_mifflin_st_jeor(
            inputs.gender, inputs.weight_kg, inputs.height_cm, inputs.age
        )

    tdee = bmr * ACTIVITY_MULTIPLIERS[inputs.activity_level].multiplier
    impact = calculate_metabolic_impact(inputs.medical_conditions, catalog)
    adjusted_tdee = tdee * (1 - impact / 100)
    target_calories = round_half_up(
        adjusted_tdee + GOAL_ADJUSTMENTS[inputs.goal].adjustment
    )

    return CalculatorResults(
        bmr=round_half_up(bmr),
        tdee=round_half_up(tdee),
        adjusted_tdee=round_half_up(adjusted_tdee),
        target_calories=target_calories,
        protein_grams=calculate_protein_recommendation(inputs.weight_kg, inputs.goal),
        metabolic_impact_percent=impact,
    )


def calculate_health_score(
    lifestyle_score: float, metabolic_impact_percent: float, target_calories: int
) -> int:
    """Blend lifestyle (60%) and metabolic health (40%) into a 0-100 score.

    Targets inside 1200-3500 kcal earn a small bonus.
    """
    lifestyle_component = lifestyle_score * LIFESTYLE_WEIGHT
    metabolic_component = (
        (MAX_METABOLIC_IMPACT_PERCENT - metabolic_impact_percent)
        / MAX_METABOLIC_IMPACT_PERCENT
        * METABOLIC_WEIGHT
    )
    low, high = HEALTHY_CALORIE_RANGE
    calorie_bonus = CALORIE_RANGE_BONUS if low <= target_calories <= high else 0
    return min(
        MAX_HEALTH_SCORE,
        round_half_up(lifestyle_component + metabolic_component + calorie_bonus),
    )
