"""Tests for lifestyle scoring and insights."""

from metabolikal.domain.assessment import AssessmentCategory, AssessmentScores
from metabolikal.domain.calculator import Goal
from metabolikal.services.insights import (
    HEALTH_SCORE_TIERS,
    build_scores,
    calculate_lifestyle_boost,
    calculate_lifestyle_score,
    calculate_physical_metrics_score,
    clamp_score,
    generate_priority_recommendations,
    get_action_plan_strategy,
    get_health_score_tier,
)


def test_clamp_score() -> None:
    assert clamp_score(-3) == 0
    assert clamp_score(4.5) == 4.5
    assert clamp_score(14) == 10


def test_build_scores_clamps_and_defaults() -> None:
    scores = build_scores({"sleep": 12, "stress": -1, "unknown": 3})

    assert scores.sleep == 10
    assert scores.stress == 0
    assert scores.body == 5
    assert scores.hydration == 5


def test_lifestyle_score_defaults_to_50() -> None:
    assert calculate_lifestyle_score(AssessmentScores()) == 50


def test_lifestyle_score_rounds_average() -> None:
    scores = AssessmentScores(sleep=8, body=7, nutrition=6, mental=9)

    # (8 + 7 + 6 + 9 + 5 + 5 + 5) / 7 * 10 = 64.28...
    assert calculate_lifestyle_score(scores) == 64
    assert calculate_lifestyle_score(AssessmentScores(*[10] * 7)) == 100
    assert calculate_lifestyle_score(AssessmentScores(*[0] * 7)) == 0


def test_health_score_tiers() -> None:
    assert get_health_score_tier(100).name == "Elite Metabolic Health"
    assert get_health_score_tier(86).name == "Elite Metabolic Health"
    assert get_health_score_tier(85).name == "Good Metabolic Health"
    assert get_health_score_tier(71).name == "Good Metabolic Health"
    assert get_health_score_tier(70).name == "Moderate Metabolic Health"
    assert get_health_score_tier(51).name == "Moderate Metabolic Health"
    assert get_health_score_tier(50).name == "Needs Attention"
    assert get_health_score_tier(0).name == "Needs Attention"


def test_health_score_tier_falls_back_to_lowest() -> None:
    assert get_health_score_tier(120) is HEALTH_SCORE_TIERS[-1]
    assert get_health_score_tier(-5) is HEALTH_SCORE_TIERS[-1]


def test_action_plan_strategy_formats_target() -> None:
    strategy = get_action_plan_strategy(Goal.FAT_LOSS, 2259)

    assert strategy.name == "Fat Loss Strategy"
    assert strategy.target == "2,259 cal/day"
    assert get_action_plan_strategy(Goal.MUSCLE_GAIN, 900).target == "900 cal/day"
    assert get_action_plan_strategy(Goal.MAINTAIN, 2000).name == (
        "Maintenance Strategy"
    )


def test_priority_recommendations_pick_lowest() -> None:
    scores = AssessmentScores(sleep=2, body=9, nutrition=6, stress=3, hydration=8)

    recommendations = generate_priority_recommendations(scores)

    assert [rec.category for rec in recommendations] == [
        AssessmentCategory.SLEEP,
        AssessmentCategory.STRESS,
        AssessmentCategory.MENTAL,
    ]
    assert [rec.priority for rec in recommendations] == [1, 2, 3]
    assert recommendations[0].category_label == "Sleep & Recovery"
    assert recommendations[0].description.startswith("Poor sleep")
    assert recommendations[2].description.startswith("Decent mental clarity")


def test_priority_recommendations_stable_on_ties() -> None:
    recommendations = generate_priority_recommendations(AssessmentScores(), count=7)

    assert [rec.category for rec in recommendations] == list(AssessmentCategory)


def test_priority_recommendation_low_threshold() -> None:
    scores = AssessmentScores(hydration=4)

    recommendation = generate_priority_recommendations(scores, count=1)[0]

    assert recommendation.category == AssessmentCategory.HYDRATION
    assert recommendation.description.startswith("Dehydration")
    assert recommendation.timeline == "1-2 weeks"


def test_lifestyle_boost() -> None:
    assert calculate_lifestyle_boost(1780, 2759) == (979, 55)


def test_physical_metrics_score() -> None:
    assert calculate_physical_metrics_score(0) == 100
    assert calculate_physical_metrics_score(15) == 50
    assert calculate_physical_metrics_score(30) == 0
    assert calculate_physical_metrics_score(8) == 73


def test_lifestyle_boost_with_zero_bmr() -> None:
    assert calculate_lifestyle_boost(0, 0) == (0, 0)
    assert calculate_lifestyle_boost(0, 12) == (12, 0)
