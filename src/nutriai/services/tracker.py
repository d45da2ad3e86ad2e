"""Tracker facade used by the single-screen UI."""

import logging
from dataclasses import dataclass, field

from nutriai.domain.foods import DailyTargets, DailyTotals, FoodEntry
from nutriai.domain.results import Outcome
from nutriai.services import report
from nutriai.services.clock import Clock
from nutriai.services.food_log import FoodLog
from nutriai.services.forms import DEFAULT_GRAMS, parse_quick_add

_logger = logging.getLogger(__name__)


@dataclass
class NutritionTracker:
    """Drives the food log on behalf of the UI.

    Every mutation is persisted immediately so an app restart never loses
    logged foods.
    """

    food_log: FoodLog
    clock: Clock
    targets: DailyTargets = field(default_factory=DailyTargets)

    def start(self) -> Outcome:
        """Load the saved log when the screen appears."""
        outcome = self.food_log.load()
        _logger.info(
            "Tracker started: restored=%s entries=%s days=%s",
            outcome.ok,
            len(self.food_log.daily),
            len(self.food_log.history),
        )
        return outcome

    def log_food(self, entry: FoodEntry) -> Outcome:
        """Add an entry to today and persist."""
        self.food_log.add(entry)
        return self.food_log.persist()

    def quick_add(  # noqa: PLR0913
        self,
        name: str,
        calories: str,
        protein: str,
        fat: str,
        carb: str,
        grams: str = DEFAULT_GRAMS,
    ) -> tuple[FoodEntry, Outcome]:
        """Parse raw form fields, log the entry and return it with the write result."""
        entry = parse_quick_add(name, calories, protein, fat, carb, grams)
        return entry, self.log_food(entry)

    def save_day(self) -> Outcome:
        """Archive the open day under today's date."""
        return self.food_log.archive_day(self.clock.today())

    def totals(self) -> DailyTotals:
        return self.food_log.total()

    def rows(self) -> list[tuple[str, str, str]]:
        return [report.entry_row(entry) for entry in self.food_log.daily]

    def targets_line(self) -> str:
        return report.targets_line(self.targets)

    def export(self) -> str:
        """Return the plain-text report for the clipboard."""
        return report.export_text(self.food_log.daily, self.targets)
