from __future__ import annotations

import json
import logging
import threading
from dataclasses import replace
from pathlib import Path
from typing import Any
from uuid import uuid4

from poolschedule.application.ports.reservation_store import ReservationStorePort
from poolschedule.application.ports.resource_store import ResourceStorePort
from poolschedule.application.utils.record_normalizer import (
    normalize_reservation,
    normalize_resource,
    reservation_record_id,
    reservation_to_record,
    resource_record_id,
    resource_to_record,
)
from poolschedule.domain.entities.reservation import Reservation
from poolschedule.domain.entities.resource import Resource
from poolschedule.domain.entities.schedule_config import ScheduleConfig


class JsonScheduleStore(ResourceStorePort, ReservationStorePort):
    """
    Single-file JSON store: `{"resources": [...], "reservations": [...], "version": 1}`.

    Records are normalized on read, so files written by older tools (apartment
    field names, missing defaults) still load. Unusable records are skipped.
    """

    def __init__(self, data_file: str = "./data/schedule.json", config: ScheduleConfig | None = None) -> None:
        self._path = Path(data_file)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._config = config or ScheduleConfig()
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def _load(self) -> dict[str, Any]:
        """Load the data file, return an empty document if missing or corrupt."""
        if not self._path.exists():
            return {"resources": [], "reservations": [], "version": 1}

        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            self._logger.error("Schedule data file unreadable, treating as empty", extra={"reason": str(e)})
            return {"resources": [], "reservations": [], "version": 1}

        if not isinstance(data, dict):
            return {"resources": [], "reservations": [], "version": 1}
        data.setdefault("resources", [])
        data.setdefault("reservations", [])
        data.setdefault("version", 1)
        return data

    def _save(self, data: dict[str, Any]) -> None:
        """Write the data file atomically."""
        temp_path = self._path.with_suffix(".json.tmp")
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            temp_path.replace(self._path)
        except Exception:
            if temp_path.exists():
                temp_path.unlink()
            raise

    def _resources(self, data: dict[str, Any]) -> list[Resource]:
        """Normalized resources, one per id; a later record for the same id wins."""
        resources: dict[str, Resource] = {}
        for record in data["resources"]:
            if not isinstance(record, dict):
                continue
            resource = normalize_resource(record, self._config)
            if resource is not None:
                resources[resource.id] = resource
        return list(resources.values())

    def _reservations(self, data: dict[str, Any]) -> list[Reservation]:
        reservations = []
        for record in data["reservations"]:
            if not isinstance(record, dict):
                continue
            reservation = normalize_reservation(record)
            if reservation is not None:
                reservations.append(reservation)
        return reservations

    def list_resources(self) -> list[Resource]:
        with self._lock:
            return self._resources(self._load())

    def get_resource(self, resource_id: str) -> Resource | None:
        for resource in self.list_resources():
            if resource.id == resource_id:
                return resource
        return None

    def save_resource(self, resource: Resource) -> Resource:
        with self._lock:
            data = self._load()
            records = [
                r for r in data["resources"] if not (isinstance(r, dict) and resource_record_id(r) == resource.id)
            ]
            records.append(resource_to_record(resource))
            data["resources"] = records
            self._save(data)
        return resource

    def list_reservations(self, date: str) -> list[Reservation]:
        with self._lock:
            reservations = self._reservations(self._load())
        return sorted((r for r in reservations if r.date == date), key=lambda r: r.start_time)

    def get_reservation(self, reservation_id: str) -> Reservation | None:
        with self._lock:
            reservations = self._reservations(self._load())
        for reservation in reservations:
            if reservation.id == reservation_id:
                return reservation
        return None

    def add_reservation(self, reservation: Reservation) -> Reservation:
        if not reservation.id:
            reservation = replace(reservation, id=uuid4().hex)
        with self._lock:
            data = self._load()
            data["reservations"].append(reservation_to_record(reservation))
            self._save(data)
        self._logger.info(
            "Reservation stored",
            extra={"reservation_id": reservation.id, "resource_id": reservation.resource_id, "date": reservation.date},
        )
        return reservation

    def update_reservation(self, reservation: Reservation) -> Reservation:
        with self._lock:
            data = self._load()
            records = data["reservations"]
            for index, record in enumerate(records):
                if isinstance(record, dict) and reservation_record_id(record) == reservation.id:
                    records[index] = reservation_to_record(reservation)
                    break
            else:
                raise KeyError(reservation.id)
            self._save(data)
        return reservation

    def delete_reservation(self, reservation_id: str) -> bool:
        with self._lock:
            data = self._load()
            before = len(data["reservations"])
            data["reservations"] = [
                r
                for r in data["reservations"]
                if not (isinstance(r, dict) and reservation_record_id(r) == reservation_id)
            ]
            if len(data["reservations"]) == before:
                return False
            self._save(data)
        self._logger.info("Reservation deleted", extra={"reservation_id": reservation_id})
        return True
