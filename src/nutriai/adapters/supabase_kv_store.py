"""Supabase-backed key-value store."""

import base64
import binascii
from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from nutriai.domain.errors import StorageError
from nutriai.services.storage import PersistenceStore


@dataclass
class SupabaseKeyValueStore(PersistenceStore):
    """Supabase implementation storing base64 values keyed by name."""

    client: Client
    table: str = "kv_store"

    def get(self, key: str) -> bytes | None:
        """Return the stored value for a key."""
        try:
            response = (
                self.client.table(self.table)
                .select("value")
                .eq("key", key)
                .limit(1)
                .execute()
            )
        except Exception as exc:
            raise StorageError(f"Failed to read key {key}: {exc}") from exc
        if not response.data:
            return None
        raw = response.data[0].get("value")
        if raw is None:
            return None
        try:
            return base64.b64decode(raw, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise StorageError(f"Corrupt value for key {key}") from exc

    def set(self, key: str, value: bytes) -> None:
        """Insert or replace the value for a key."""
        try:
            self.client.table(self.table).upsert(
                {
                    "key": key,
                    "value": base64.b64encode(value).decode("ascii"),
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="key",
            ).execute()
        except Exception as exc:
            raise StorageError(f"Failed to write key {key}: {exc}") from exc
