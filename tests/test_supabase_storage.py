"""Tests for the Supabase storage adapter."""

from dataclasses import dataclass, field
from datetime import date

import pytest

from pantry_tracker.adapters.supabase_storage import SupabaseStorage
from pantry_tracker.containers import build_container
from pantry_tracker.domain.inventory import (
    ConsumptionReason,
    QuantityUnit,
    ShelfLifeUnit,
)
from tests.conftest import FixedClock


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    """Fluent table stub holding rows in memory."""

    name: str
    rows: dict[str, object] = field(default_factory=dict)
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    last_on_conflict: str | None = None
    fail_writes: bool = False

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        self._payload = None
        return self

    def upsert(self, payload, on_conflict: str = "") -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "upsert"
        self._payload = payload
        self.last_on_conflict = on_conflict
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        if self._action == "upsert":
            if self.fail_writes:
                return FakeResponse(data=[])
            self.rows[self._payload["key"]] = self._payload["value"]
            return FakeResponse(data=[self._payload])
        key = self.last_filters[-1][1]
        if key not in self.rows:
            return FakeResponse(data=[])
        return FakeResponse(data=[{"key": key, "value": self.rows[key]}])


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_get_returns_default_for_missing_key() -> None:
    storage = SupabaseStorage(FakeSupabaseClient())

    assert storage.get("ingredients_user_1", []) == []


def test_set_then_get_roundtrip() -> None:
    client = FakeSupabaseClient()
    storage = SupabaseStorage(client, table="pantry_kv")

    storage.set("user_profile", {"id": "user_1", "name": "A", "avatar": "B"})

    assert storage.get("user_profile", None) == {
        "id": "user_1",
        "name": "A",
        "avatar": "B",
    }
    assert client.tables["pantry_kv"].last_on_conflict == "key"


def test_set_raises_when_nothing_written() -> None:
    client = FakeSupabaseClient()
    client.table("kv_store").fail_writes = True
    storage = SupabaseStorage(client)

    with pytest.raises(RuntimeError):
        storage.set("ingredients_user_1", [])


def test_inventory_flow_over_supabase(settings) -> None:
    storage = SupabaseStorage(FakeSupabaseClient())
    container = build_container(settings, storage=storage, clock=FixedClock())

    item = container.inventory_service.create(
        user_id="user_1",
        name="三文鱼",
        category=None,
        production_date=date(2024, 6, 4),
        shelf_life_value=2,
        shelf_life_unit=ShelfLifeUnit.DAY,
        initial_quantity=300,
        quantity_unit=QuantityUnit.G,
    )
    container.inventory_service.consume(
        "user_1", item.id, 120, ConsumptionReason.COOKING
    )

    stored = container.inventory_service.get("user_1", item.id)
    assert stored.current_quantity == 180
    assert stored.created_at == item.created_at
    assert container.ledger.list_records("user_1")[0].consumed_quantity == 120
    assert container.stats_service.summarize("user_1").expiring_soon == 1
