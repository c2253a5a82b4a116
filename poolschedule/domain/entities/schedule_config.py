from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TRAVEL_BUFFER_MINUTES = 30


@dataclass(frozen=True)
class ScheduleConfig:
    """Per-pass settings for slot generation and resolution.

    The fallback values are only applied when a stored resource record omits
    them; a resource that carries its own duration or window always wins.
    """

    travel_buffer_minutes: int = DEFAULT_TRAVEL_BUFFER_MINUTES
    default_slot_duration_minutes: int = 60
    default_window_start: str = "08:00"
    default_window_end: str = "20:00"

    def __post_init__(self) -> None:
        if self.travel_buffer_minutes < 0:
            raise ValueError("travel_buffer_minutes must be >= 0")
        if self.default_slot_duration_minutes <= 0:
            raise ValueError("default_slot_duration_minutes must be positive")
