"""Calendar-day clock."""

from dataclasses import dataclass, field
from datetime import date, datetime, tzinfo
from typing import Protocol
from zoneinfo import ZoneInfo


class Clock(Protocol):
    """Source of the current calendar day."""

    def today(self) -> date:
        """Return the current local calendar day."""


@dataclass
class SystemClock(Clock):
    """Wall-clock time truncated to the day in a fixed or local timezone.

    The zone is resolved on construction, so an unknown name raises
    ``ZoneInfoNotFoundError`` before the clock is ever used.
    """

    timezone_name: str | None = None
    _zone: tzinfo | None = field(init=False, default=None, repr=False)

    def __post_init__(self) -> None:
        if self.timezone_name:
            self._zone = ZoneInfo(self.timezone_name)

    def today(self) -> date:
        """Return today's date in the configured timezone."""
        if self._zone is not None:
            return datetime.now(tz=self._zone).date()
        return datetime.now().astimezone().date()
