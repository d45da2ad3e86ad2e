"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date

import pytest

from nutriai.adapters.memory_store import InMemoryStore
from nutriai.config import Settings
from nutriai.domain.errors import StorageError
from nutriai.domain.foods import FoodEntry
from nutriai.services.clock import Clock
from nutriai.services.food_log import FoodLog
from nutriai.services.storage import PersistenceStore
from nutriai.services.tracker import NutritionTracker


@dataclass
class FailingStore(PersistenceStore):
    """Store whose reads and/or writes always fail."""

    fail_get: bool = True
    fail_set: bool = True
    writes: list[tuple[str, bytes]] = field(default_factory=list)

    def get(self, key: str) -> bytes | None:
        if self.fail_get:
            raise StorageError("read failed")
        return None

    def set(self, key: str, value: bytes) -> None:
        if self.fail_set:
            raise StorageError("disk full")
        self.writes.append((key, value))


@dataclass
class FixedClock(Clock):
    """Clock pinned to a single day."""

    day: date = date(2024, 1, 1)

    def today(self) -> date:
        return self.day


def egg() -> FoodEntry:
    return FoodEntry(name="Egg", grams=50, calories=70, protein=6, fat=5, carb=1)


def rice() -> FoodEntry:
    return FoodEntry(name="Rice", grams=150, calories=200, protein=4, fat=0, carb=45)


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="memory")


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def food_log(store: InMemoryStore) -> FoodLog:
    return FoodLog(store=store)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def tracker(food_log: FoodLog, clock: FixedClock) -> NutritionTracker:
    return NutritionTracker(food_log=food_log, clock=clock)
