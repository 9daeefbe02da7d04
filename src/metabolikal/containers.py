"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from metabolikal.adapters.supabase_assessment_repository import (
    SupabaseAssessmentRepository,
)
from metabolikal.adapters.supabase_food_item_repository import (
    SupabaseFoodItemRepository,
)
from metabolikal.adapters.supabase_medical_condition_repository import (
    SupabaseMedicalConditionRepository,
)
from metabolikal.config import Settings
from metabolikal.services.assessments import AssessmentService
from metabolikal.services.food_items import FoodImportService
from metabolikal.services.medical_conditions import MedicalConditionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    condition_service: MedicalConditionService
    assessment_service: AssessmentService
    food_import_service: FoodImportService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    condition_service = MedicalConditionService(
        SupabaseMedicalConditionRepository(supabase_client)
    )
    assessment_service = AssessmentService(
        repository=SupabaseAssessmentRepository(supabase_client),
        condition_service=condition_service,
    )
    food_import_service = FoodImportService(
        repository=SupabaseFoodItemRepository(supabase_client),
        batch_size=resolved_settings.import_batch_size,
    )
    return AppContainer(
        settings=resolved_settings,
        condition_service=condition_service,
        assessment_service=assessment_service,
        food_import_service=food_import_service,
    )
