"""Assessment evaluation and persistence."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from metabolikal.domain.assessment import (
    AssessmentEvaluation,
    AssessmentRecord,
    AssessmentScores,
)
from metabolikal.domain.calculator import CalculatorInputs
from metabolikal.services.calculator import calculate_health_score, calculate_results
from metabolikal.services.insights import (
    calculate_lifestyle_score,
    generate_priority_recommendations,
    get_action_plan_strategy,
    get_health_score_tier,
)
from metabolikal.services.medical_conditions import MedicalConditionService

_logger = logging.getLogger(__name__)


class AssessmentRepository(Protocol):
    """Persistence interface for assessment results."""

    def create_assessment(  # noqa: PLR0913
        self,
        visitor_id: str,
        user_id: UUID | None,
        scores: AssessmentScores,
        inputs: CalculatorInputs,
        evaluation: AssessmentEvaluation,
    ) -> AssessmentRecord:
        """Store an assessment result and return it."""


@dataclass
class AssessmentService:
    """Combines the calculator and lifestyle scoring for an assessment."""

    repository: AssessmentRepository
    condition_service: MedicalConditionService

    def evaluate(
        self, inputs: CalculatorInputs, scores: AssessmentScores
    ) -> AssessmentEvaluation:
        """Compute calculator results, health score and insights."""
        results = calculate_results(inputs, self.condition_service.catalog())
        lifestyle_score = calculate_lifestyle_score(scores)
        health_score = calculate_health_score(
            lifestyle_score, results.metabolic_impact_percent, results.target_calories
        )
        return AssessmentEvaluation(
            results=results,
            lifestyle_score=lifestyle_score,
            health_score=health_score,
            tier=get_health_score_tier(health_score),
            strategy=get_action_plan_strategy(inputs.goal, results.target_calories),
            recommendations=generate_priority_recommendations(scores),
        )

    def save(
        self,
        visitor_id: str,
        user_id: UUID | None,
        inputs: CalculatorInputs,
        scores: AssessmentScores,
    ) -> tuple[AssessmentRecord, AssessmentEvaluation]:
        """Evaluate and persist an assessment."""
        evaluation = self.evaluate(inputs, scores)
        record = self.repository.create_assessment(
            visitor_id=visitor_id,
            user_id=user_id,
            scores=scores,
            inputs=inputs,
            evaluation=evaluation,
        )
        _logger.info(
            "Saved assessment %s: health_score=%s", record.id, record.health_score
        )
        return record, evaluation
