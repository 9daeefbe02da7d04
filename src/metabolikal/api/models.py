"""Pydantic request models for the HTTP API."""

from uuid import UUID

from pydantic import BaseModel, Field

from metabolikal.domain.assessment import DEFAULT_SLIDER_VALUE, AssessmentScores
from metabolikal.domain.calculator import (
    ActivityLevel,
    CalculatorInputs,
    Gender,
    Goal,
)
from metabolikal.services.insights import build_scores


class CalculatorRequest(BaseModel):
    """Calculator form submission."""

    gender: Gender
    age: int
    weight_kg: float
    height_cm: float
    activity_level: ActivityLevel
    goal: Goal
    medical_conditions: list[str] = Field(default_factory=list)
    body_fat_percent: float | None = None
    lifestyle_score: float | None = None

    def to_inputs(self) -> CalculatorInputs:
        """Convert the payload into calculator inputs."""
        return CalculatorInputs(
            gender=self.gender,
            age=self.age,
            weight_kg=self.weight_kg,
            height_cm=self.height_cm,
            activity_level=self.activity_level,
            goal=self.goal,
            medical_conditions=frozenset(self.medical_conditions),
            body_fat_percent=self.body_fat_percent,
        )


class AssessmentScoresPayload(BaseModel):
    """Lifestyle slider values."""

    sleep: float = DEFAULT_SLIDER_VALUE
    body: float = DEFAULT_SLIDER_VALUE
    nutrition: float = DEFAULT_SLIDER_VALUE
    mental: float = DEFAULT_SLIDER_VALUE
    stress: float = DEFAULT_SLIDER_VALUE
    support: float = DEFAULT_SLIDER_VALUE
    hydration: float = DEFAULT_SLIDER_VALUE

    def to_scores(self) -> AssessmentScores:
        """Convert the payload into clamped slider scores."""
        return build_scores(self.model_dump())


class AssessmentRequest(BaseModel):
    """Combined assessment and calculator submission."""

    visitor_id: str
    user_id: UUID | None = None
    calculator: CalculatorRequest
    scores: AssessmentScoresPayload = Field(default_factory=AssessmentScoresPayload)


class CSVContentRequest(BaseModel):
    """Text content of an uploaded food item CSV."""

    content: str
