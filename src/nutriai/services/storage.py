"""Key-value persistence interface."""

from typing import Protocol

DEFAULT_LOG_KEY = "nutriai"


class PersistenceStore(Protocol):
    """Opaque key-value byte store."""

    def get(self, key: str) -> bytes | None:
        """Return the stored bytes for a key, or None when absent."""

    def set(self, key: str, value: bytes) -> None:
        """Store bytes under a key, raising StorageError on failure."""
