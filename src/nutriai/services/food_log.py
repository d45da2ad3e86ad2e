"""Food log aggregate: today's entries plus archived per-day history."""

import logging
from dataclasses import dataclass, field
from datetime import date

from nutriai.domain.errors import (
    SnapshotDecodeError,
    SnapshotEncodeError,
    StorageError,
)
from nutriai.domain.foods import DailyTotals, FoodEntry, sum_entries
from nutriai.domain.results import Outcome
from nutriai.services.codec import History, decode_log, encode_log
from nutriai.services.storage import DEFAULT_LOG_KEY, PersistenceStore

_logger = logging.getLogger(__name__)


@dataclass
class FoodLog:
    """In-memory log persisted as a single value in a key-value store."""

    store: PersistenceStore
    key: str = DEFAULT_LOG_KEY
    daily: list[FoodEntry] = field(default_factory=list)
    history: History = field(default_factory=dict)

    def add(self, entry: FoodEntry) -> None:
        """Append an entry to the open day. Does not persist."""
        self.daily.append(entry)

    def total(self) -> DailyTotals:
        """Return summed calories and macros for the open day."""
        return sum_entries(self.daily)

    def archive_day(self, day: date) -> Outcome:
        """Close the open day into history, replacing any earlier snapshot."""
        self.history[day] = self.daily
        self.daily = []
        _logger.info(
            "Archived day: day=%s entries=%s", day.isoformat(), len(self.history[day])
        )
        return self.persist()

    def snapshot(self) -> bytes:
        """Return the encoded state of the whole log."""
        return encode_log(self.daily, self.history)

    def restore(self, data: bytes | None) -> Outcome:
        """Replace state from encoded bytes; leaves state untouched on failure."""
        try:
            daily, history = decode_log(data)
        except SnapshotDecodeError as exc:
            _logger.warning("Ignoring unreadable food log: %s", exc)
            return Outcome.failure(str(exc))
        self.daily = daily
        self.history = history
        return Outcome.success()

    def load(self) -> Outcome:
        """Restore state from the store."""
        try:
            data = self.store.get(self.key)
        except StorageError as exc:
            _logger.warning("Failed to read food log: key=%s error=%s", self.key, exc)
            return Outcome.failure(str(exc))
        if data is None:
            return Outcome.failure("no saved log")
        return self.restore(data)

    def persist(self) -> Outcome:
        """Write the current state to the store. Failures skip the write."""
        try:
            data = self.snapshot()
        except SnapshotEncodeError as exc:
            _logger.warning("Skipping food log write: %s", exc)
            return Outcome.failure(str(exc))
        try:
            self.store.set(self.key, data)
        except StorageError as exc:
            _logger.warning("Failed to write food log: key=%s error=%s", self.key, exc)
            return Outcome.failure(str(exc))
        return Outcome.success()
