"""Domain models for food item CSV imports."""

from dataclasses import dataclass, field
from typing import TypedDict

CSV_HEADERS: tuple[str, ...] = (
    "name",
    "calories",
    "protein",
    "carbs",
    "fats",
    "serving_size",
    "is_vegetarian",
    "raw_quantity",
    "cooked_quantity",
    "meal_types",
)

TEMPLATE_FILENAME = "food_items_template.csv"
TEMPLATE_MEDIA_TYPE = "text/csv;charset=utf-8"


class RawCSVRow(TypedDict, total=False):
    """Untyped CSV row keyed by normalized header name."""

    name: str | None
    calories: str | None
    protein: str | None
    carbs: str | None
    fats: str | None
    serving_size: str | None
    is_vegetarian: str | None
    raw_quantity: str | None
    cooked_quantity: str | None
    meal_types: str | None


@dataclass(frozen=True)
class CSVValidationError:
    """A single field-level validation problem."""

    field: str
    message: str


@dataclass(frozen=True)
class FoodItemInsert:
    """Normalized food item ready for insertion."""

    name: str
    calories: float
    protein: float
    carbs: float | None
    fats: float | None
    serving_size: str
    is_vegetarian: bool
    raw_quantity: str | None
    cooked_quantity: str | None
    meal_types: list[str] | None

    def to_payload(self) -> dict[str, object]:
        """Return the row payload for the food_items table."""
        return {
            "name": self.name,
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fats": self.fats,
            "serving_size": self.serving_size,
            "is_vegetarian": self.is_vegetarian,
            "raw_quantity": self.raw_quantity,
            "cooked_quantity": self.cooked_quantity,
            "meal_types": self.meal_types,
        }


@dataclass(frozen=True)
class ValidatedCSVRow:
    """A CSV row paired with its validation outcome."""

    row_number: int
    data: RawCSVRow
    errors: list[CSVValidationError]
    is_valid: bool
    transformed_data: FoodItemInsert | None = None


@dataclass(frozen=True)
class CSVParseResult:
    """Validated rows with aggregate counts and tokenizer errors."""

    rows: list[ValidatedCSVRow]
    total_rows: int
    valid_rows: int
    invalid_rows: int
    parse_errors: list[str] = field(default_factory=list)


@dataclass
class ImportSummary:
    """Outcome of a batched food item import."""

    success_count: int = 0
    failed_count: int = 0
    errors: list[str] = field(default_factory=list)
