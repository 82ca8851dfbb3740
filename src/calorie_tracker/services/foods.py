"""Bulk upsert of the food reference catalog."""

import logging
import math
from collections import Counter
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Protocol

from calorie_tracker.domain.foods import NutritionRecord, UpsertResult, UpsertStatus
from calorie_tracker.errors import StoreUnavailable, ValidationError

_logger = logging.getLogger(__name__)

_MACRO_FIELDS = ("kcal_per_100g", "protein_g", "carb_g", "fat_g")


class FoodRepository(Protocol):
    """Persistence interface for the food catalog."""

    def upsert_food(self, record: NutritionRecord) -> UpsertStatus:
        """Merge-write a record, setting its creation time only when absent.

        Returns CREATED or UPDATED. Raises StoreUnavailable on store errors.
        """


@dataclass
class BulkUpserter:
    """Applies batches of food records to the store one record at a time."""

    repository: FoodRepository

    def upsert_all(
        self, records: Sequence[NutritionRecord], concurrency: int = 1
    ) -> list[UpsertResult]:
        """Upsert every record and return outcomes in input order.

        Invalid records and failed writes are reported as FAILED results and
        never abort the rest of the batch.
        """
        if concurrency < 1:
            raise ValueError("concurrency must be at least 1")
        if concurrency == 1 or len(records) <= 1:
            return [self._upsert_one(record) for record in records]
        with ThreadPoolExecutor(max_workers=concurrency) as executor:
            return list(executor.map(self._upsert_one, records))

    def _upsert_one(self, record: NutritionRecord) -> UpsertResult:
        _logger.info("Seeding %s", record.id)
        try:
            validate_record(record)
            status = self.repository.upsert_food(record)
        except (ValidationError, StoreUnavailable) as exc:
            _logger.warning("Upsert failed: id=%r error=%s", record.id, exc)
            return UpsertResult(id=record.id, status=UpsertStatus.FAILED, error=exc)
        return UpsertResult(id=record.id, status=status)


def validate_record(record: NutritionRecord) -> None:
    """Raise ValidationError when a record cannot be stored."""
    if not isinstance(record.id, str) or not record.id.strip():
        raise ValidationError("Food id must be a non-empty string")
    if "/" in record.id:
        raise ValidationError(f"Food id {record.id!r} must not contain '/'")
    for name in _MACRO_FIELDS:
        value = getattr(record, name)
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise ValidationError(f"{name} of {record.id!r} must be a number")
        if not math.isfinite(value) or value < 0:
            raise ValidationError(f"{name} of {record.id!r} must be non-negative")


def summarize_results(results: Sequence[UpsertResult]) -> dict[str, int]:
    """Count results per status."""
    counts = Counter(result.status for result in results)
    return {status.value: counts.get(status, 0) for status in UpsertStatus}
