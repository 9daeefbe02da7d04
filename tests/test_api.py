"""Tests for the public HTTP endpoints."""

from fastapi.testclient import TestClient

from metabolikal.api.app import create_app
from tests.conftest import InMemoryAssessmentRepository

CALCULATOR_PAYLOAD = {
    "gender": "male",
    "age": 30,
    "weight_kg": 80,
    "height_cm": 180,
    "activity_level": "moderately_active",
    "goal": "fat_loss",
}


def test_health_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_medical_conditions_endpoint(container) -> None:
    client = TestClient(create_app(container))

    male = client.get("/medical-conditions", params={"gender": "male"}).json()
    everyone = client.get("/medical-conditions").json()

    male_slugs = [condition["slug"] for condition in male["conditions"]]
    assert "pcos" not in male_slugs
    assert len(everyone["conditions"]) == len(male_slugs) + 1
    assert everyone["conditions"][1] == {
        "slug": "pcos",
        "name": "PCOS",
        "impact_percent": 10,
        "gender_restriction": "female",
    }


def test_medical_conditions_rejects_unknown_gender(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/medical-conditions", params={"gender": "other"})

    assert response.status_code == 422


def test_calculator_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/calculator", json=CALCULATOR_PAYLOAD)

    assert response.status_code == 200
    data = response.json()
    assert data["results"] == {
        "bmr": 1780,
        "tdee": 2759,
        "adjusted_tdee": 2759,
        "target_calories": 2259,
        "protein_grams": 160,
        "metabolic_impact_percent": 0,
    }
    assert data["lifestyle_boost"] == {"calories": 979, "percent": 55}
    assert data["physical_metrics_score"] == 100
    assert "health_score" not in data


def test_calculator_endpoint_with_lifestyle_score(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/calculator",
        json={
            **CALCULATOR_PAYLOAD,
            "medical_conditions": ["hypothyroidism", "sleep-apnea"],
            "lifestyle_score": 70,
        },
    )

    data = response.json()
    assert data["results"]["metabolic_impact_percent"] == 15
    assert data["physical_metrics_score"] == 50
    # 70 * 0.6 + 15 / 30 * 40 + 5
    assert data["health_score"] == 67


def test_calculator_endpoint_validates_payload(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/calculator", json={**CALCULATOR_PAYLOAD, "goal": "bulk"}
    )

    assert response.status_code == 422


def test_assessment_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/assessments",
        json={
            "visitor_id": "visitor-1",
            "calculator": CALCULATOR_PAYLOAD,
            "scores": {"sleep": 2, "stress": 15},
        },
    )

    assert response.status_code == 200
    data = response.json()
    repository = container.assessment_service.repository
    assert isinstance(repository, InMemoryAssessmentRepository)
    assert data["id"] == str(repository.records[0].id)
    assert repository.records[0].scores.stress == 10
    assert data["results"]["target_calories"] == 2259
    assert data["lifestyle_score"] == 53
    assert data["tier"]["name"] == "Good Metabolic Health"
    assert data["strategy"]["target"] == "2,259 cal/day"
    assert [rec["category"] for rec in data["recommendations"]] == [
        "sleep",
        "body",
        "nutrition",
    ]


def test_calculator_endpoint_with_zero_bmr(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/calculator",
        json={
            "gender": "female",
            "age": 15,
            "weight_kg": 11.1,
            "height_cm": 20,
            "activity_level": "sedentary",
            "goal": "maintain",
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["results"]["bmr"] == 0
    assert data["lifestyle_boost"] == {"calories": 0, "percent": 0}
