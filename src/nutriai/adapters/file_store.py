"""Local file-backed key-value store."""

from dataclasses import dataclass
from pathlib import Path

from nutriai.domain.errors import StorageError
from nutriai.services.storage import PersistenceStore


@dataclass
class FileStore(PersistenceStore):
    """Stores each key as a file inside a directory.

    Writes go to a temporary sibling first and are then moved over the target,
    so a crash mid-write leaves the previous value intact.
    """

    directory: Path

    def path_for(self, key: str) -> Path:
        """Return the file path that holds a key."""
        return self.directory / f"{key}.json"

    def get(self, key: str) -> bytes | None:
        """Return the file contents for a key, or None when missing."""
        path = self.path_for(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise StorageError(f"Cannot read {path}: {exc}") from exc

    def set(self, key: str, value: bytes) -> None:
        """Atomically replace the file for a key."""
        path = self.path_for(key)
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_bytes(value)
            tmp_path.replace(path)
        except OSError as exc:
            raise StorageError(f"Cannot write {path}: {exc}") from exc
