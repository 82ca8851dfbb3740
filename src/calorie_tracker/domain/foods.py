"""Domain models for the food reference catalog."""

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class NutritionRecord:
    """Nutrition facts for one food, keyed by a stable id."""

    id: str
    name: str
    kcal_per_100g: float
    protein_g: float
    carb_g: float
    fat_g: float
    tags: frozenset[str] = field(default_factory=frozenset)
    image_url: str | None = None


class UpsertStatus(str, Enum):
    """Outcome of a single upsert."""

    CREATED = "created"
    UPDATED = "updated"
    FAILED = "failed"


@dataclass(frozen=True)
class UpsertResult:
    """Per-record outcome of a bulk upsert."""

    id: str
    status: UpsertStatus
    error: Exception | None = None
