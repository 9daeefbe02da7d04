"""Domain models for the lifestyle assessment."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from uuid import UUID

from metabolikal.domain.calculator import CalculatorInputs, CalculatorResults

DEFAULT_SLIDER_VALUE = 5
MIN_SLIDER_VALUE = 0
MAX_SLIDER_VALUE = 10


class AssessmentCategory(StrEnum):
    """Lifestyle slider categories, in display order."""

    SLEEP = "sleep"
    BODY = "body"
    NUTRITION = "nutrition"
    MENTAL = "mental"
    STRESS = "stress"
    SUPPORT = "support"
    HYDRATION = "hydration"


CATEGORY_LABELS: dict[AssessmentCategory, str] = {
    AssessmentCategory.SLEEP: "Sleep & Recovery",
    AssessmentCategory.BODY: "Body Confidence",
    AssessmentCategory.NUTRITION: "Nutrition Strategy Mastery",
    AssessmentCategory.MENTAL: "Mental Clarity",
    AssessmentCategory.STRESS: "Stress Management",
    AssessmentCategory.SUPPORT: "Support System",
    AssessmentCategory.HYDRATION: "Hydration",
}


@dataclass(frozen=True)
class AssessmentScores:
    """Slider values (0-10) for each lifestyle category."""

    sleep: float = DEFAULT_SLIDER_VALUE
    body: float = DEFAULT_SLIDER_VALUE
    nutrition: float = DEFAULT_SLIDER_VALUE
    mental: float = DEFAULT_SLIDER_VALUE
    stress: float = DEFAULT_SLIDER_VALUE
    support: float = DEFAULT_SLIDER_VALUE
    hydration: float = DEFAULT_SLIDER_VALUE

    def get(self, category: AssessmentCategory) -> float:
        """Return the slider value for a category."""
        return getattr(self, category.value)


@dataclass(frozen=True)
class HealthScoreTier:
    """Named band of the 0-100 health score."""

    name: str
    description: str
    min_score: int
    max_score: int


@dataclass(frozen=True)
class ActionPlanStrategy:
    """Goal-specific plan summary shown with calculator results."""

    name: str
    target: str
    focus: str
    training: str
    goal: str


@dataclass(frozen=True)
class PriorityRecommendation:
    """Recommendation for one of the lowest scoring categories."""

    priority: int
    category: AssessmentCategory
    category_label: str
    icon: str
    description: str
    impact: str
    timeline: str


@dataclass(frozen=True)
class AssessmentEvaluation:
    """Calculator results combined with lifestyle insights."""

    results: CalculatorResults
    lifestyle_score: int
    health_score: int
    tier: HealthScoreTier
    strategy: ActionPlanStrategy
    recommendations: list[PriorityRecommendation]


@dataclass(frozen=True)
class AssessmentRecord:
    """Represents a stored assessment result."""

    id: UUID
    visitor_id: str
    user_id: UUID | None
    assessed_at: datetime
    scores: AssessmentScores
    inputs: CalculatorInputs
    results: CalculatorResults
    lifestyle_score: int
    health_score: int
