"""Error types raised by the log core and its adapters."""


class NutriAIError(Exception):
    """Base class for application errors."""


class StorageError(NutriAIError):
    """Raised when the persistence store cannot read or write a value."""


class SnapshotDecodeError(NutriAIError):
    """Raised when persisted bytes are not a valid log snapshot."""


class InvalidEntryError(NutriAIError, ValueError):
    """Raised when a quick-add form field cannot be parsed."""

    def __init__(self, field_name: str, raw: str) -> None:
        super().__init__(f"Invalid value for {field_name}: {raw!r}")
        self.field_name = field_name
        self.raw = raw


class SnapshotEncodeError(NutriAIError):
    """Raised when in-memory log state cannot be serialised."""
