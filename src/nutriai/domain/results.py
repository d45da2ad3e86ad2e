"""Outcome type for operations that degrade instead of raising."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Outcome:
    """Success or failure-with-reason of a load or persist call."""

    ok: bool
    reason: str | None = None

    @classmethod
    def success(cls) -> "Outcome":
        return cls(ok=True)

    @classmethod
    def failure(cls, reason: str) -> "Outcome":
        return cls(ok=False, reason=reason)

    def __bool__(self) -> bool:
        return self.ok
