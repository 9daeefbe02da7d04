"""Supabase repository for medical conditions."""

from dataclasses import dataclass

from supabase import Client

from metabolikal.domain.calculator import Gender, MedicalCondition
from metabolikal.services.medical_conditions import MedicalConditionRepository


@dataclass
class SupabaseMedicalConditionRepository(MedicalConditionRepository):
    """Supabase implementation for the medical condition catalog."""

    client: Client

    def list_conditions(self, include_inactive: bool) -> list[MedicalCondition]:
        """Return conditions ordered by display order."""
        query = self.client.table("medical_conditions").select(
            "slug, name, impact_percent, gender_restriction"
        )
        if not include_inactive:
            query = query.eq("is_active", True)
        response = query.order("display_order", desc=False).execute()
        return [_parse_condition(row) for row in response.data or []]


def _parse_condition(row: dict[str, object]) -> MedicalCondition:
    restriction = row.get("gender_restriction")
    return MedicalCondition(
        slug=str(row.get("slug", "")),
        name=str(row.get("name", "")),
        impact_percent=float(row.get("impact_percent") or 0.0),
        gender_restriction=Gender(restriction) if restriction else None,
    )
