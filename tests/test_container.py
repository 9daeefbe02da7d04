"""Tests for container wiring."""

from metabolikal.adapters.supabase_food_item_repository import (
    SupabaseFoodItemRepository,
)
from metabolikal.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.settings is settings
    assert container.assessment_service.condition_service is (
        container.condition_service
    )
    assert isinstance(
        container.food_import_service.repository, SupabaseFoodItemRepository
    )
    assert container.food_import_service.batch_size == 10
