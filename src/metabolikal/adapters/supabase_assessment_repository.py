"""Supabase repository for assessment results."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from metabolikal.domain.assessment import (
    AssessmentEvaluation,
    AssessmentRecord,
    AssessmentScores,
)
from metabolikal.domain.calculator import CalculatorInputs
from metabolikal.services.assessments import AssessmentRepository


@dataclass
class SupabaseAssessmentRepository(AssessmentRepository):
    """Supabase-backed repository for assessment results."""

    client: Client

    def create_assessment(  # noqa: PLR0913
        self,
        visitor_id: str,
        user_id: UUID | None,
        scores: AssessmentScores,
        inputs: CalculatorInputs,
        evaluation: AssessmentEvaluation,
    ) -> AssessmentRecord:
        """Store an assessment result and return it."""
        results = evaluation.results
        payload = {
            "visitor_id": visitor_id,
            "user_id": str(user_id) if user_id else None,
            "assessed_at": datetime.now(tz=UTC).isoformat(),
            "sleep_score": scores.sleep,
            "body_score": scores.body,
            "nutrition_score": scores.nutrition,
            "mental_score": scores.mental,
            "stress_score": scores.stress,
            "support_score": scores.support,
            "hydration_score": scores.hydration,
            "gender": inputs.gender.value,
            "age": inputs.age,
            "weight_kg": inputs.weight_kg,
            "height_cm": inputs.height_cm,
            "body_fat_percent": inputs.body_fat_percent,
            "activity_level": inputs.activity_level.value,
            "medical_conditions": sorted(inputs.medical_conditions),
            "metabolic_impact_percent": results.metabolic_impact_percent,
            "goal": inputs.goal.value,
            "bmr": results.bmr,
            "tdee": results.tdee,
            "target_calories": results.target_calories,
            "health_score": evaluation.health_score,
            "lifestyle_score": evaluation.lifestyle_score,
        }
        response = self.client.table("assessment_results").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create assessment result")
        row = response.data[0]
        assessed_raw = row.get("assessed_at")
        assessed_at = (
            datetime.fromisoformat(assessed_raw)
            if isinstance(assessed_raw, str) and assessed_raw
            else datetime.now(tz=UTC)
        )
        return AssessmentRecord(
            id=UUID(row["id"]),
            visitor_id=visitor_id,
            user_id=user_id,
            assessed_at=assessed_at,
            scores=scores,
            inputs=inputs,
            results=results,
            lifestyle_score=evaluation.lifestyle_score,
            health_score=evaluation.health_score,
        )
