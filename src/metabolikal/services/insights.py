"""Lifestyle assessment scoring and results insights."""

from collections.abc import Mapping

from metabolikal.domain.assessment import (
    CATEGORY_LABELS,
    MAX_SLIDER_VALUE,
    MIN_SLIDER_VALUE,
    ActionPlanStrategy,
    AssessmentCategory,
    AssessmentScores,
    HealthScoreTier,
    PriorityRecommendation,
)
from metabolikal.domain.calculator import MAX_METABOLIC_IMPACT_PERCENT, Goal
from metabolikal.services.calculator import round_half_up

LOW_SCORE_THRESHOLD = 4
DEFAULT_RECOMMENDATION_COUNT = 3

HEALTH_SCORE_TIERS: tuple[HealthScoreTier, ...] = (
    HealthScoreTier(
        name="Elite Metabolic Health",
        description="Outstanding foundation with peak performance potential",
        min_score=86,
        max_score=100,
    ),
    HealthScoreTier(
        name="Good Metabolic Health",
        description="Solid foundation with room for optimization",
        min_score=71,
        max_score=85,
    ),
    HealthScoreTier(
        name="Moderate Metabolic Health",
        description="Functional baseline with clear improvement opportunities",
        min_score=51,
        max_score=70,
    ),
    HealthScoreTier(
        name="Needs Attention",
        description="Significant optimization potential to unlock your metabolism",
        min_score=0,
        max_score=50,
    ),
)

_STRATEGIES: dict[Goal, tuple[str, str, str, str]] = {
    Goal.FAT_LOSS: (
        "Fat Loss Strategy",
        "Metabolic optimization and body recomposition",
        "4-5x resistance training with strategic cardio",
        "Sustainable fat loss while preserving muscle mass",
    ),
    Goal.MAINTAIN: (
        "Maintenance Strategy",
        "Body recomposition and performance",
        "3-4x balanced training per week",
        "Maintain weight while improving composition",
    ),
    Goal.MUSCLE_GAIN: (
        "Muscle Building Strategy",
        "Progressive overload and recovery optimization",
        "4-5x hypertrophy-focused resistance training",
        "Maximize lean muscle growth with minimal fat gain",
    ),
}

# icon, low description, medium description, impact, timeline
_RECOMMENDATIONS: dict[AssessmentCategory, tuple[str, str, str, str, str]] = {
    AssessmentCategory.SLEEP: (
        "Moon",
        "Poor sleep is significantly impacting your metabolic function. "
        "Prioritize sleep hygiene for rapid improvements.",
        "Moderate rest patterns affect metabolic efficiency. "
        "Focus on gradual improvements.",
        "High",
        "2-4 weeks",
    ),
    AssessmentCategory.BODY: (
        "Heart",
        "Building body confidence is foundational. "
        "The METABOLIKAL system will help elevate your self-image.",
        "Good foundation in place. "
        "The METABOLIKAL system will help elevate your confidence.",
        "Medium",
        "8-16 weeks",
    ),
    AssessmentCategory.NUTRITION: (
        "Utensils",
        "Nutritional inconsistency is limiting your results. "
        "Strategic nutrition planning is critical.",
        "Good nutritional awareness. "
        "Focus on consistency and strategic refinement.",
        "High",
        "2-4 weeks",
    ),
    AssessmentCategory.MENTAL: (
        "Brain",
        "Mental fog is reducing your performance potential. "
        "Cognitive optimization can unlock major gains.",
        "Decent mental clarity. "
        "Fine-tuning focus strategies will enhance performance.",
        "High",
        "4-8 weeks",
    ),
    AssessmentCategory.STRESS: (
        "Shield",
        "Chronic stress is sabotaging your metabolism. "
        "Stress management is a top priority.",
        "Managing stress adequately. "
        "Advanced techniques will optimize your cortisol levels.",
        "High",
        "4-8 weeks",
    ),
    AssessmentCategory.SUPPORT: (
        "Users",
        "Lack of support system reduces accountability. "
        "Building your network is essential for long-term success.",
        "Some support in place. Strengthening your network will amplify results.",
        "Medium",
        "4-12 weeks",
    ),
    AssessmentCategory.HYDRATION: (
        "Droplet",
        "Dehydration is impacting metabolic function and energy. "
        "Prioritize hydration immediately.",
        "Hydration could be improved. "
        "Consistent intake will boost metabolic efficiency.",
        "Medium",
        "1-2 weeks",
    ),
}


def clamp_score(value: float) -> float:
    """Clamp a slider value to the 0-10 range."""
    return min(MAX_SLIDER_VALUE, max(MIN_SLIDER_VALUE, value))


def build_scores(values: Mapping[str, float]) -> AssessmentScores:
    """Build slider scores from raw values, clamped and defaulted."""
    return AssessmentScores(
        **{
            category.value: clamp_score(values[category.value])
            for category in AssessmentCategory
            if category.value in values
        }
    )


def calculate_lifestyle_score(scores: AssessmentScores) -> int:
    """Return the average slider value scaled to 0-100."""
    values = [scores.get(category) for category in AssessmentCategory]
    average = sum(values) / len(values)
    return round_half_up(average * 10)


def get_health_score_tier(score: float) -> HealthScoreTier:
    """Return the tier containing the score, defaulting to the lowest tier."""
    for tier in HEALTH_SCORE_TIERS:
        if tier.min_score <= score <= tier.max_score:
            return tier
    return HEALTH_SCORE_TIERS[-1]


def get_action_plan_strategy(goal: Goal, target_calories: int) -> ActionPlanStrategy:
    """Return the goal-specific action plan."""
    name, focus, training, summary = _STRATEGIES[goal]
    return ActionPlanStrategy(
        name=name,
        target=f"{target_calories:,} cal/day",
        focus=focus,
        training=training,
        goal=summary,
    )


def generate_priority_recommendations(
    scores: AssessmentScores, count: int = DEFAULT_RECOMMENDATION_COUNT
) -> list[PriorityRecommendation]:
    """Recommend improvements for the lowest scoring categories."""
    lowest = sorted(AssessmentCategory, key=scores.get)[:count]
    recommendations = []
    for index, category in enumerate(lowest):
        icon, low, medium, impact, timeline = _RECOMMENDATIONS[category]
        is_low = scores.get(category) <= LOW_SCORE_THRESHOLD
        recommendations.append(
            PriorityRecommendation(
                priority=index + 1,
                category=category,
                category_label=CATEGORY_LABELS[category],
                icon=icon,
                description=low if is_low else medium,
                impact=impact,
                timeline=timeline,
            )
        )
    return recommendations


def calculate_lifestyle_boost(bmr: int, tdee: int) -> tuple[int, int]:
    """Return the calories and percentage activity adds on top of BMR.

    The percentage is 0 when BMR is 0.
    """
    calories = tdee - bmr
    if bmr == 0:
        return calories, 0
    return calories, round_half_up(calories / bmr * 100)


def calculate_physical_metrics_score(metabolic_impact_percent: float) -> int:
    """Score metabolic health from 100 (no impact) down to 0 (30% impact)."""
    return round_half_up(
        (MAX_METABOLIC_IMPACT_PERCENT - metabolic_impact_percent)
        / MAX_METABOLIC_IMPACT_PERCENT
        * 100
    )
