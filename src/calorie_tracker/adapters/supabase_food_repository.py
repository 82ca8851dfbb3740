"""Supabase implementation of the food catalog."""

from dataclasses import dataclass

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from calorie_tracker.domain.foods import NutritionRecord, UpsertStatus
from calorie_tracker.errors import StoreUnavailable
from calorie_tracker.services.foods import FoodRepository

_UNIQUE_VIOLATION = "23505"


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for food reference rows.

    Relies on the table's ``created_at default now()`` for the creation time,
    so the column is never sent and updates leave it untouched.
    """

    client: Client
    table: str = "foods"

    def upsert_food(self, record: NutritionRecord) -> UpsertStatus:
        """Insert the row, or update it in place when the id already exists."""
        payload = _to_row(record)
        try:
            try:
                self.client.table(self.table).insert(payload).execute()
            except APIError as exc:
                if exc.code != _UNIQUE_VIOLATION:
                    raise
                self.client.table(self.table).update(payload).eq(
                    "id", record.id
                ).execute()
                return UpsertStatus.UPDATED
        except (APIError, httpx.HTTPError) as exc:
            raise StoreUnavailable(record.id, exc) from exc
        return UpsertStatus.CREATED


def _to_row(record: NutritionRecord) -> dict[str, object]:
    return {
        "id": record.id,
        "name": record.name,
        "kcal_per_100g": record.kcal_per_100g,
        "protein_g": record.protein_g,
        "carb_g": record.carb_g,
        "fat_g": record.fat_g,
        "tags": sorted(record.tags),
        "image_url": record.image_url or "",
    }
