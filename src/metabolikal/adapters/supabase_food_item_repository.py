"""Supabase repository for the food item database."""

from dataclasses import dataclass

from supabase import Client

from metabolikal.domain.food_items import FoodItemInsert
from metabolikal.services.food_items import FoodItemRepository


@dataclass
class SupabaseFoodItemRepository(FoodItemRepository):
    """Supabase-backed repository for food items."""

    client: Client

    def list_names(self) -> list[str]:
        """Return the names of all stored food items."""
        response = self.client.table("food_items").select("name").execute()
        return [str(row["name"]) for row in response.data or [] if row.get("name")]

    def insert_many(self, items: list[FoodItemInsert]) -> None:
        """Insert food items in a single request."""
        if not items:
            return
        response = (
            self.client.table("food_items")
            .insert([item.to_payload() for item in items])
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to insert food items")
