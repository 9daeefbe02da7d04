"""Domain models for the metabolic calculator."""

from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType

NO_CONDITION_SLUG = "none"
MAX_METABOLIC_IMPACT_PERCENT = 30


class Gender(StrEnum):
    """Biological sex used by the BMR formulas."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(StrEnum):
    """Self-reported activity level."""

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    EXTREMELY_ACTIVE = "extremely_active"


class Goal(StrEnum):
    """Body composition goal."""

    FAT_LOSS = "fat_loss"
    MAINTAIN = "maintain"
    MUSCLE_GAIN = "muscle_gain"


@dataclass(frozen=True)
class ActivityProfile:
    """Label and TDEE multiplier for an activity level."""

    label: str
    multiplier: float


@dataclass(frozen=True)
class GoalProfile:
    """Label, calorie adjustment and protein target for a goal."""

    label: str
    adjustment: int
    protein_per_kg: float


ACTIVITY_MULTIPLIERS: MappingProxyType[ActivityLevel, ActivityProfile] = (
    MappingProxyType(
        {
            ActivityLevel.SEDENTARY: ActivityProfile(
                "Sedentary (little or no exercise)", 1.2
            ),
            ActivityLevel.LIGHTLY_ACTIVE: ActivityProfile(
                "Lightly Active (light exercise 1-3 days/week)", 1.375
            ),
            ActivityLevel.MODERATELY_ACTIVE: ActivityProfile(
                "Moderately Active (moderate exercise 3-5 days/week)", 1.55
            ),
            ActivityLevel.VERY_ACTIVE: ActivityProfile(
                "Very Active (hard exercise 6-7 days/week)", 1.725
            ),
            ActivityLevel.EXTREMELY_ACTIVE: ActivityProfile(
                "Extremely Active (very hard exercise, physical job)", 1.9
            ),
        }
    )
)

GOAL_ADJUSTMENTS: MappingProxyType[Goal, GoalProfile] = MappingProxyType(
    {
        Goal.FAT_LOSS: GoalProfile("Fat Loss", -500, 2.0),
        Goal.MAINTAIN: GoalProfile("Maintain Weight", 0, 1.8),
        Goal.MUSCLE_GAIN: GoalProfile("Muscle Gain", 300, 2.2),
    }
)


@dataclass(frozen=True)
class MedicalCondition:
    """A medical condition with its estimated metabolic impact."""

    slug: str
    name: str
    impact_percent: float
    gender_restriction: Gender | None = None


MEDICAL_CONDITIONS: tuple[MedicalCondition, ...] = (
    MedicalCondition("hypothyroidism", "Hypothyroidism", 8),
    MedicalCondition("pcos", "PCOS", 10, Gender.FEMALE),
    MedicalCondition("type2-diabetes", "Type 2 Diabetes", 12),
    MedicalCondition("insulin-resistance", "Insulin Resistance", 10),
    MedicalCondition("sleep-apnea", "Sleep Apnea", 7),
    MedicalCondition("metabolic-syndrome", "Metabolic Syndrome", 15),
    MedicalCondition("thyroid-managed", "Thyroid Medication Managed", 3),
    MedicalCondition("chronic-fatigue", "Chronic Fatigue Syndrome", 8),
    MedicalCondition(NO_CONDITION_SLUG, "None of the above", 0),
)


@dataclass(frozen=True)
class CalculatorInputs:
    """Biometric and lifestyle profile submitted to the calculator."""

    gender: Gender
    age: int
    weight_kg: float
    height_cm: float
    activity_level: ActivityLevel
    goal: Goal
    medical_conditions: frozenset[str] = field(default_factory=frozenset)
    body_fat_percent: float | None = None


@dataclass(frozen=True)
class CalculatorResults:
    """Calorie and macro targets derived from calculator inputs."""

    bmr: int
    tdee: int
    adjusted_tdee: int
    target_calories: int
    protein_grams: int
    metabolic_impact_percent: float
