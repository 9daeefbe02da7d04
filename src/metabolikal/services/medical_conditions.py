"""Service for the medical condition catalog."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from metabolikal.domain.calculator import Gender, MedicalCondition
from metabolikal.services.calculator import (
    calculate_metabolic_impact,
    conditions_for_gender,
)


class MedicalConditionRepository(Protocol):
    """Persistence interface for medical conditions."""

    def list_conditions(self, include_inactive: bool) -> list[MedicalCondition]:
        """Return conditions ordered for display."""


@dataclass
class MedicalConditionService:
    """Application service for condition lookups and impact totals."""

    repository: MedicalConditionRepository

    def list_conditions(
        self, gender: Gender | None = None, include_inactive: bool = False
    ) -> list[MedicalCondition]:
        """Return conditions selectable for the given gender."""
        conditions = self.repository.list_conditions(include_inactive)
        return conditions_for_gender(conditions, gender)

    def catalog(self) -> list[MedicalCondition]:
        """Return every stored condition, including inactive ones."""
        return self.repository.list_conditions(include_inactive=True)

    def metabolic_impact(self, slugs: Iterable[str]) -> float:
        """Return the capped impact of the selected slugs using stored impacts."""
        return calculate_metabolic_impact(slugs, self.catalog())
