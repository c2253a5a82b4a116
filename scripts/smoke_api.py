#!/usr/bin/env python3
"""Smoke test against a running server: uvicorn poolschedule.main:app --port 8001"""

import sys

import httpx


BASE_URL = "http://127.0.0.1:8001"
DATE = "2024-06-01"


def create_reservation() -> str | None:
    print("=" * 60)
    print("Testing POST /api/v1/reservations")
    print("=" * 60)

    payload = {
        "resource_id": "tamarind",
        "date": DATE,
        "start_time": "15:00",
        "end_time": "16:00",
        "status": "booked",
        "owner_id": "admin",
    }
    try:
        response = httpx.post(f"{BASE_URL}/api/v1/reservations", json=payload, timeout=10.0)
        response.raise_for_status()
        data = response.json()
        print(f"Created reservation {data['id']} at {data['resource_id']} {data['start_time']}-{data['end_time']}")
        return data["id"]
    except httpx.HTTPStatusError as e:
        print(f"HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        return None


def show_schedule(home: str) -> bool:
    print("\n" + "=" * 60)
    print(f"Testing GET /api/v1/schedule (home={home})")
    print("=" * 60)
    try:
        response = httpx.get(
            f"{BASE_URL}/api/v1/schedule",
            params={"date": DATE, "home_resource_id": home},
            timeout=10.0,
        )
        response.raise_for_status()
        data = response.json()
        for entry in data["resources"]:
            print(f"\n  {entry['resource']['name']}{' (home)' if entry['is_home'] else ''}")
            for slot in entry["slots"]:
                if slot["status"] != "available":
                    print(f"    {slot['start_time']}-{slot['end_time']}: {slot['status']}")
        print(f"\nCounts: {data['status_counts']}")
        return True
    except httpx.HTTPStatusError as e:
        print(f"HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        return False


def delete_reservation(reservation_id: str) -> None:
    response = httpx.delete(f"{BASE_URL}/api/v1/reservations/{reservation_id}", timeout=10.0)
    print(f"\nDELETE reservation {reservation_id}: {response.status_code}")


def main():
    try:
        httpx.get(f"{BASE_URL}/health", timeout=5.0)
    except httpx.HTTPError:
        print("Server is not running!")
        print("   Please start it with: uvicorn poolschedule.main:app --reload --port 8001")
        sys.exit(1)

    reservation_id = create_reservation()
    show_schedule("quayside")
    show_schedule("tamarind")
    if reservation_id:
        delete_reservation(reservation_id)


if __name__ == "__main__":
    main()
