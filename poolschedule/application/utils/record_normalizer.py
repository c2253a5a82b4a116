from __future__ import annotations

import logging
from typing import Any

from poolschedule.application.utils.time_utils import normalize_date, normalize_time
from poolschedule.domain.entities.reservation import ADMIN_OWNER, Reservation, ReservationStatus
from poolschedule.domain.entities.resource import Resource
from poolschedule.domain.entities.schedule_config import ScheduleConfig

logger = logging.getLogger(__name__)


def _first(record: dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first non-empty value among alternate field names."""
    for key in keys:
        value = record.get(key)
        if value not in (None, ""):
            return value
    return default


def resource_record_id(record: dict[str, Any]) -> str | None:
    """Id of a stored resource record under any of its accepted field names."""
    value = _first(record, "id", "resource_id", "apartmentId")
    return str(value) if value is not None else None


def reservation_record_id(record: dict[str, Any]) -> str | None:
    value = _first(record, "id", "reservation_id")
    return str(value) if value is not None else None


def normalize_resource(record: dict[str, Any], config: ScheduleConfig | None = None) -> Resource | None:
    """
    Map a stored resource record onto the canonical Resource shape.

    Accepts both the legacy apartment layout (`defaultSlotDuration`,
    `operatingHours: {start, end}` or flat `start`/`end`) and the native one.
    Returns None when the record cannot describe a resource.
    """
    config = config or ScheduleConfig()
    resource_id = resource_record_id(record)
    if not resource_id:
        logger.warning("Rejecting resource record without id", extra={"reason": "missing id"})
        return None

    hours = record.get("operatingHours") or record.get("operating_hours") or {}
    if not isinstance(hours, dict):
        hours = {}

    raw_duration = _first(
        record,
        "slot_duration_minutes",
        "slotDurationMinutes",
        "defaultSlotDuration",
        default=config.default_slot_duration_minutes,
    )
    try:
        duration = int(raw_duration)
        window_start = normalize_time(
            _first(hours, "start", default=None)
            or _first(record, "window_start", "windowStart", "start", default=config.default_window_start)
        )
        window_end = normalize_time(
            _first(hours, "end", default=None)
            or _first(record, "window_end", "windowEnd", "end", default=config.default_window_end)
        )
    except (TypeError, ValueError) as e:
        logger.warning(
            "Rejecting resource record with malformed fields",
            extra={"resource_id": resource_id, "reason": str(e)},
        )
        return None

    return Resource(
        id=str(resource_id),
        name=str(_first(record, "name", default=resource_id)),
        slot_duration_minutes=duration,
        window_start=window_start,
        window_end=window_end,
    )


def normalize_reservation(record: dict[str, Any]) -> Reservation | None:
    """Map a stored reservation record onto the canonical Reservation shape, or None if unusable."""
    reservation_id = reservation_record_id(record)
    resource_id = _first(record, "resource_id", "resourceId", "apartmentId")
    if not reservation_id or not resource_id:
        logger.warning(
            "Rejecting reservation record without id or resource",
            extra={"reservation_id": reservation_id, "resource_id": resource_id, "reason": "missing key"},
        )
        return None

    try:
        reservation_date = normalize_date(_first(record, "date"))
        start_time = normalize_time(_first(record, "start_time", "startTime"))
        end_time = normalize_time(_first(record, "end_time", "endTime"))
        status = ReservationStatus(_first(record, "status", default=ReservationStatus.booked.value))
    except (TypeError, ValueError) as e:
        logger.warning(
            "Rejecting reservation record with malformed fields",
            extra={"reservation_id": reservation_id, "reason": str(e)},
        )
        return None

    if end_time <= start_time:
        logger.warning(
            "Rejecting reservation that ends before it starts",
            extra={"reservation_id": reservation_id, "reason": f"{start_time}-{end_time}"},
        )
        return None

    return Reservation(
        id=str(reservation_id),
        resource_id=str(resource_id),
        date=reservation_date,
        start_time=start_time,
        end_time=end_time,
        status=status,
        owner_id=str(_first(record, "owner_id", "ownerId", "bookedBy", default=ADMIN_OWNER)),
    )


def resource_to_record(resource: Resource) -> dict[str, Any]:
    return {
        "id": resource.id,
        "name": resource.name,
        "slot_duration_minutes": resource.slot_duration_minutes,
        "window_start": resource.window_start,
        "window_end": resource.window_end,
    }


def reservation_to_record(reservation: Reservation) -> dict[str, Any]:
    return {
        "id": reservation.id,
        "resource_id": reservation.resource_id,
        "date": reservation.date,
        "start_time": reservation.start_time,
        "end_time": reservation.end_time,
        "status": reservation.status.value,
        "owner_id": reservation.owner_id,
    }
