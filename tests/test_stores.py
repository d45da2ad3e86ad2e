"""Tests for persistence store adapters."""

import base64
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from nutriai.adapters.file_store import FileStore
from nutriai.adapters.memory_store import InMemoryStore
from nutriai.adapters.supabase_kv_store import SupabaseKeyValueStore
from nutriai.domain.errors import StorageError


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    rows: dict[str, dict[str, object]] = field(default_factory=dict)
    fail: bool = False
    last_payload: object | None = None
    last_on_conflict: str | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def upsert(self, payload, on_conflict: str = "") -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "upsert"
        self.last_payload = payload
        self.last_on_conflict = on_conflict
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        if self.fail:
            raise RuntimeError("connection refused")
        if self._action == "upsert":
            row = dict(self.last_payload)  # type: ignore[call-overload]
            self.rows[str(row["key"])] = row
            return FakeResponse(data=[row])
        key = self.last_filters[-1][1]
        row = self.rows.get(str(key))
        return FakeResponse(data=[{"value": row["value"]}] if row else [])


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_in_memory_store_roundtrip() -> None:
    store = InMemoryStore()

    assert store.get("nutriai") is None
    store.set("nutriai", b"data")
    assert store.get("nutriai") == b"data"


def test_file_store_roundtrip(tmp_path: Path) -> None:
    store = FileStore(tmp_path / "nested")

    assert store.get("nutriai") is None
    store.set("nutriai", b"first")
    store.set("nutriai", b"second")

    assert store.get("nutriai") == b"second"
    assert store.path_for("nutriai").exists()
    assert not store.path_for("nutriai").with_suffix(".json.tmp").exists()


def test_file_store_write_error_raises_storage_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    store = FileStore(blocker)

    with pytest.raises(StorageError):
        store.set("nutriai", b"data")


def test_supabase_store_roundtrip() -> None:
    client = FakeSupabaseClient()
    store = SupabaseKeyValueStore(client)

    assert store.get("nutriai") is None
    store.set("nutriai", b"\x00payload")

    table = client.tables["kv_store"]
    assert table.last_on_conflict == "key"
    assert table.rows["nutriai"]["value"] == base64.b64encode(b"\x00payload").decode()
    assert store.get("nutriai") == b"\x00payload"


def test_supabase_store_uses_configured_table() -> None:
    client = FakeSupabaseClient()
    store = SupabaseKeyValueStore(client, table="app_state")

    store.set("nutriai", b"x")

    assert "app_state" in client.tables


def test_supabase_store_wraps_client_errors() -> None:
    client = FakeSupabaseClient()
    client.table("kv_store").fail = True
    store = SupabaseKeyValueStore(client)

    with pytest.raises(StorageError):
        store.get("nutriai")
    with pytest.raises(StorageError):
        store.set("nutriai", b"x")


def test_supabase_store_rejects_corrupt_value() -> None:
    client = FakeSupabaseClient()
    client.table("kv_store").rows["nutriai"] = {"key": "nutriai", "value": "%%%"}
    store = SupabaseKeyValueStore(client)

    with pytest.raises(StorageError):
        store.get("nutriai")
