"""Shared test fixtures."""

import threading
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from calorie_tracker.adapters.firestore_food_repository import to_document
from calorie_tracker.config import Settings
from calorie_tracker.containers import AppContainer
from calorie_tracker.domain.foods import NutritionRecord, UpsertStatus
from calorie_tracker.errors import StoreUnavailable
from calorie_tracker.services.foods import BulkUpserter, FoodRepository
from calorie_tracker.services.notifications import (
    NotificationDispatcher,
    PushProvider,
)


_FAKE_SERVICE_KEY = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
    ".eyJyb2xlIjoic2VydmljZV9yb2xlIn0"
    ".c2lnbmF0dXJl"
)


class ProviderTimeout(Exception):
    """Provider error used to check failure propagation."""


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food store with server-assigned creation times."""

    documents: dict[str, dict[str, object]] = field(default_factory=dict)
    unavailable_ids: set[str] = field(default_factory=set)
    writes: list[str] = field(default_factory=list)
    _clock: datetime = field(default_factory=lambda: datetime(2024, 1, 1, tzinfo=UTC))
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def upsert_food(self, record: NutritionRecord) -> UpsertStatus:
        if record.id in self.unavailable_ids:
            raise StoreUnavailable(record.id, ConnectionError("store offline"))
        with self._lock:
            self.writes.append(record.id)
            existing = self.documents.get(record.id)
            if existing is not None:
                existing.update(to_document(record))
                return UpsertStatus.UPDATED
            self._clock += timedelta(seconds=1)
            self.documents[record.id] = {
                **to_document(record),
                "createdAt": self._clock,
            }
            return UpsertStatus.CREATED


@dataclass
class FakePushProvider(PushProvider):
    """Fake push provider that records sent notifications."""

    message_id: str = "abc123"
    error: Exception | None = None
    sent: list[tuple[str, str, str]] = field(default_factory=list)

    def send_to_topic(self, topic: str, title: str, body: str) -> str:
        self.sent.append((topic, title, body))
        if self.error is not None:
            raise self.error
        return self.message_id


def make_record(
    food_id: str, kcal: float = 100, **overrides: object
) -> NutritionRecord:
    values: dict[str, object] = {
        "id": food_id,
        "name": food_id.title(),
        "kcal_per_100g": kcal,
        "protein_g": 1,
        "carb_g": 2,
        "fat_g": 3,
        "tags": frozenset({"test"}),
    }
    values.update(overrides)
    return NutritionRecord(**values)  # type: ignore[arg-type]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        food_store="supabase",
        supabase_url="https://example.supabase.co",
        supabase_service_key=_FAKE_SERVICE_KEY,
        firebase_project_id="test-project",
        firebase_app_name="calorie-tracker-test",
    )


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository()


@pytest.fixture
def push_provider() -> FakePushProvider:
    return FakePushProvider()


@pytest.fixture
def container(
    settings: Settings,
    food_repository: InMemoryFoodRepository,
    push_provider: FakePushProvider,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        bulk_upserter=BulkUpserter(food_repository),
        notification_dispatcher=NotificationDispatcher(
            provider=push_provider, default_topic=settings.default_topic
        ),
        close_resources=close_resources,
    )
