"""Food item bulk import service."""

import logging
from dataclasses import dataclass
from typing import Protocol

from metabolikal.domain.food_items import CSVParseResult, FoodItemInsert, ImportSummary
from metabolikal.services.csv_import import generate_csv_template, parse_csv

DEFAULT_BATCH_SIZE = 10

_logger = logging.getLogger(__name__)


class FoodItemRepository(Protocol):
    """Persistence interface for the food item database."""

    def list_names(self) -> list[str]:
        """Return the names of all stored food items."""

    def insert_many(self, items: list[FoodItemInsert]) -> None:
        """Insert food items in a single request."""


@dataclass
class FoodImportService:
    """Validates CSV uploads and inserts the valid rows in batches."""

    repository: FoodItemRepository
    batch_size: int = DEFAULT_BATCH_SIZE

    def template(self) -> str:
        """Return the downloadable CSV template."""
        return generate_csv_template()

    def preview(self, content: str) -> CSVParseResult:
        """Parse and validate CSV content against the stored names."""
        return parse_csv(content, self.repository.list_names())

    def import_items(self, items: list[FoodItemInsert]) -> ImportSummary:
        """Insert items batch by batch, recording failed batches."""
        summary = ImportSummary()
        for start in range(0, len(items), self.batch_size):
            batch = items[start : start + self.batch_size]
            batch_number = start // self.batch_size + 1
            try:
                self.repository.insert_many(batch)
            except Exception as exc:  # noqa: BLE001
                _logger.warning(
                    "Food item batch %s failed (%s items): %s",
                    batch_number,
                    len(batch),
                    exc,
                )
                summary.failed_count += len(batch)
                summary.errors.append(f"Batch {batch_number}: {exc}")
                continue
            summary.success_count += len(batch)
        _logger.info(
            "Food item import finished: imported=%s failed=%s",
            summary.success_count,
            summary.failed_count,
        )
        return summary
