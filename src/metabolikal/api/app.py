"""FastAPI application factory."""

from dataclasses import asdict

from fastapi import FastAPI, Request

from metabolikal.api.admin import router as admin_router
from metabolikal.api.models import AssessmentRequest, CalculatorRequest
from metabolikal.app_logging import configure_logging
from metabolikal.containers import AppContainer
from metabolikal.domain.assessment import AssessmentEvaluation
from metabolikal.domain.calculator import Gender
from metabolikal.services.calculator import calculate_health_score, calculate_results
from metabolikal.services.insights import (
    calculate_lifestyle_boost,
    calculate_physical_metrics_score,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.debug)

    app = FastAPI()
    app.state.container = container

    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/medical-conditions")
    async def list_medical_conditions(
        request: Request, gender: Gender | None = None
    ) -> dict[str, object]:
        """Return the active conditions selectable for a gender."""
        state_container: AppContainer = request.app.state.container
        conditions = state_container.condition_service.list_conditions(gender)
        return {"conditions": [asdict(condition) for condition in conditions]}

    @app.post("/calculator")
    async def run_calculator(
        payload: CalculatorRequest, request: Request
    ) -> dict[str, object]:
        """Compute calorie targets, with a health score when lifestyle is given."""
        state_container: AppContainer = request.app.state.container
        results = calculate_results(
            payload.to_inputs(), state_container.condition_service.catalog()
        )
        boost_calories, boost_percent = calculate_lifestyle_boost(
            results.bmr, results.tdee
        )
        response: dict[str, object] = {
            "results": asdict(results),
            "lifestyle_boost": {
                "calories": boost_calories,
                "percent": boost_percent,
            },
            "physical_metrics_score": calculate_physical_metrics_score(
                results.metabolic_impact_percent
            ),
        }
        if payload.lifestyle_score is not None:
            response["health_score"] = calculate_health_score(
                payload.lifestyle_score,
                results.metabolic_impact_percent,
                results.target_calories,
            )
        return response

    @app.post("/assessments")
    async def create_assessment(
        payload: AssessmentRequest, request: Request
    ) -> dict[str, object]:
        """Evaluate and store a lifestyle assessment."""
        state_container: AppContainer = request.app.state.container
        inputs = payload.calculator.to_inputs()
        scores = payload.scores.to_scores()
        record, evaluation = state_container.assessment_service.save(
            visitor_id=payload.visitor_id,
            user_id=payload.user_id,
            inputs=inputs,
            scores=scores,
        )
        return {"id": str(record.id), **_serialize_evaluation(evaluation)}

    return app


def _serialize_evaluation(evaluation: AssessmentEvaluation) -> dict[str, object]:
    return {
        "results": asdict(evaluation.results),
        "lifestyle_score": evaluation.lifestyle_score,
        "health_score": evaluation.health_score,
        "tier": asdict(evaluation.tier),
        "strategy": asdict(evaluation.strategy),
        "recommendations": [asdict(rec) for rec in evaluation.recommendations],
    }
