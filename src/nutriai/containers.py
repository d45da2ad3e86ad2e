"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from nutriai.adapters.file_store import FileStore
from nutriai.adapters.memory_store import InMemoryStore
from nutriai.adapters.supabase_kv_store import SupabaseKeyValueStore
from nutriai.app_logging import configure_logging
from nutriai.config import Settings
from nutriai.services.clock import Clock, SystemClock
from nutriai.services.food_log import FoodLog
from nutriai.services.storage import PersistenceStore
from nutriai.services.tracker import NutritionTracker


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: PersistenceStore
    clock: Clock
    food_log: FoodLog
    tracker: NutritionTracker


def build_store(settings: Settings) -> PersistenceStore:
    """Create the persistence store selected by settings."""
    if settings.storage_backend == "memory":
        return InMemoryStore()
    if settings.storage_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError("Supabase storage requires URL and service key")
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseKeyValueStore(client, table=settings.supabase_table)
    return FileStore(settings.storage_dir)


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(level=resolved_settings.log_level)
    store = build_store(resolved_settings)
    clock = SystemClock(resolved_settings.timezone)
    food_log = FoodLog(store=store, key=resolved_settings.storage_key)
    tracker = NutritionTracker(
        food_log=food_log,
        clock=clock,
        targets=resolved_settings.daily_targets(),
    )
    return AppContainer(
        settings=resolved_settings,
        store=store,
        clock=clock,
        food_log=food_log,
        tracker=tracker,
    )
