#!/usr/bin/env python3
"""
Print the resolved pool schedule for one date (no HTTP).

Usage:
  python3 scripts/show_schedule.py --date 2024-06-01 --home quayside
  python3 scripts/show_schedule.py --date 2024-06-01 --home quayside --book tamarind 15:00 16:00

Uses the store configured by STORE_PROVIDER / DATA_FILE, so with the default
memory store only the seeded pools and any --book reservations are shown.
"""

from __future__ import annotations

import argparse
import sys
from datetime import date
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from poolschedule.domain.entities.slot import SlotStatus
from poolschedule.wiring.dependencies import get_reservation_use_case, get_schedule_use_case

STATUS_MARKS = {
    SlotStatus.available: ".",
    SlotStatus.booked: "B",
    SlotStatus.unavailable: "X",
    SlotStatus.travel_restricted: "T",
}


def main() -> None:
    parser = argparse.ArgumentParser(description="Show the resolved pool schedule for a date")
    parser.add_argument("--date", default=date.today().isoformat())
    parser.add_argument("--home", default=None, help="Requester's home resource id")
    parser.add_argument(
        "--book",
        nargs=3,
        action="append",
        metavar=("RESOURCE", "START", "END"),
        help="Create an admin reservation before resolving (repeatable)",
    )
    args = parser.parse_args()

    for resource_id, start, end in args.book or []:
        get_reservation_use_case().create(resource_id, args.date, start, end)

    day = get_schedule_use_case().execute(args.date, args.home)

    print(f"\nSchedule for {day.date} (home: {day.home_resource_id or '-'})")
    print("-" * 60)
    for entry in day.resources:
        label = f"{entry.resource.name}{' *' if entry.resource.id == day.home_resource_id else ''}"
        print(f"{label:<16}")
        for slot in entry.slots:
            print(f"  {slot.start_time}-{slot.end_time}  {STATUS_MARKS[slot.status]}  {slot.status.value}")
    print("-" * 60)
    counts = day.status_counts()
    print(" ".join(f"{k}={v}" for k, v in counts.items()))


if __name__ == "__main__":
    main()
