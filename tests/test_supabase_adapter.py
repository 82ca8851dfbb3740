"""Tests for the Supabase food repository."""

from dataclasses import dataclass, field

import httpx
import pytest
from postgrest.exceptions import APIError

from calorie_tracker.adapters.supabase_food_repository import SupabaseFoodRepository
from calorie_tracker.domain.foods import UpsertStatus
from calorie_tracker.errors import StoreUnavailable
from tests.conftest import make_record


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    insert_error: Exception | None = None
    actions: list[tuple[str, object]] = field(default_factory=list)
    last_filters: list[tuple[str, object]] = field(default_factory=list)

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.actions.append(("insert", payload))
        return self

    def update(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "update"
        self.actions.append(("update", payload))
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def execute(self) -> FakeResponse:
        if self._action == "insert" and self.insert_error is not None:
            raise self.insert_error
        return FakeResponse(data=[])


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_supabase_insert_reports_created() -> None:
    client = FakeSupabaseClient()
    repository = SupabaseFoodRepository(client)

    status = repository.upsert_food(make_record("pho", kcal=120))

    assert status is UpsertStatus.CREATED
    action, payload = client.tables["foods"].actions[0]
    assert action == "insert"
    assert payload["kcal_per_100g"] == 120
    assert "created_at" not in payload


def test_supabase_duplicate_id_falls_back_to_update() -> None:
    client = FakeSupabaseClient()
    client.table("foods").insert_error = APIError(
        {"message": "duplicate key", "code": "23505", "hint": None, "details": None}
    )
    repository = SupabaseFoodRepository(client)

    status = repository.upsert_food(make_record("pho", kcal=130))

    assert status is UpsertStatus.UPDATED
    table = client.tables["foods"]
    assert [action for action, _ in table.actions] == ["insert", "update"]
    assert "created_at" not in table.actions[1][1]
    assert table.last_filters == [("id", "pho")]


@pytest.mark.parametrize(
    "error",
    [
        APIError({"message": "boom", "code": "XX000", "hint": None, "details": None}),
        httpx.ConnectError("connection refused"),
    ],
)
def test_supabase_errors_become_store_unavailable(error: Exception) -> None:
    client = FakeSupabaseClient()
    client.table("foods").insert_error = error
    repository = SupabaseFoodRepository(client)

    with pytest.raises(StoreUnavailable) as exc_info:
        repository.upsert_food(make_record("pho"))

    assert exc_info.value.cause is error
