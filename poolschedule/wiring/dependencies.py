import logging

from poolschedule.core.config import settings
from poolschedule.domain.entities.schedule_config import ScheduleConfig
from poolschedule.infrastructure.store.json_store import JsonScheduleStore
from poolschedule.infrastructure.store.memory_store import MemoryScheduleStore
from poolschedule.infrastructure.store.seed_data import DEFAULT_RESOURCES
from poolschedule.application.use_cases.reservations import ReservationUseCase
from poolschedule.application.use_cases.resources import ResourceUseCase
from poolschedule.application.use_cases.schedule import ScheduleUseCase


_store: MemoryScheduleStore | JsonScheduleStore | None = None


def get_schedule_config() -> ScheduleConfig:
    return ScheduleConfig(
        travel_buffer_minutes=settings.TRAVEL_BUFFER_MINUTES,
        default_slot_duration_minutes=settings.DEFAULT_SLOT_DURATION_MINUTES,
        default_window_start=settings.DEFAULT_WINDOW_START,
        default_window_end=settings.DEFAULT_WINDOW_END,
    )


def get_store() -> MemoryScheduleStore | JsonScheduleStore:
    global _store
    if _store is None:
        logger = logging.getLogger(__name__)
        if settings.STORE_PROVIDER.lower() == "json":
            logger.info("Using JsonScheduleStore at %s", settings.DATA_FILE)
            _store = JsonScheduleStore(data_file=settings.DATA_FILE, config=get_schedule_config())
        else:
            seed = DEFAULT_RESOURCES if settings.SEED_DEFAULT_RESOURCES else ()
            logger.info("Using MemoryScheduleStore (seeded resources=%d)", len(seed))
            _store = MemoryScheduleStore(resources=seed)
    return _store


def get_schedule_use_case() -> ScheduleUseCase:
    store = get_store()
    return ScheduleUseCase(resources=store, reservations=store, config=get_schedule_config())


def get_reservation_use_case() -> ReservationUseCase:
    store = get_store()
    return ReservationUseCase(resources=store, reservations=store, schedule=get_schedule_use_case())


def get_resource_use_case() -> ResourceUseCase:
    return ResourceUseCase(store=get_store())
