"""In-memory key-value store."""

from dataclasses import dataclass, field

from nutriai.services.storage import PersistenceStore


@dataclass
class InMemoryStore(PersistenceStore):
    """Dict-backed store, used for tests and ephemeral sessions."""

    values: dict[str, bytes] = field(default_factory=dict)

    def get(self, key: str) -> bytes | None:
        return self.values.get(key)

    def set(self, key: str, value: bytes) -> None:
        self.values[key] = bytes(value)
