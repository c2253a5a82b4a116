from enum import Enum
from pydantic import BaseModel, Field


class SlotStatusSchema(str, Enum):
    available = "available"
    booked = "booked"
    unavailable = "unavailable"
    travel_restricted = "travel-restricted"


class ReservationStatusSchema(str, Enum):
    booked = "booked"
    unavailable = "unavailable"


class ResourceSchema(BaseModel):
    id: str
    name: str
    slot_duration_minutes: int
    window_start: str
    window_end: str


class ResourceCreateSchema(BaseModel):
    name: str = Field(min_length=1)
    slot_duration_minutes: int = Field(default=60, gt=0)
    window_start: str = "08:00"
    window_end: str = "20:00"
    id: str | None = None


class ResourceUpdateSchema(BaseModel):
    name: str | None = None
    slot_duration_minutes: int | None = Field(default=None, gt=0)
    window_start: str | None = None
    window_end: str | None = None


class ReservationSchema(BaseModel):
    id: str
    resource_id: str
    date: str
    start_time: str
    end_time: str
    status: ReservationStatusSchema
    owner_id: str


class ReservationCreateSchema(BaseModel):
    resource_id: str
    date: str
    start_time: str
    end_time: str
    status: ReservationStatusSchema = ReservationStatusSchema.booked
    owner_id: str = "admin"


class ReservationUpdateSchema(BaseModel):
    resource_id: str | None = None
    date: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    status: ReservationStatusSchema | None = None
    owner_id: str | None = None


class BookSlotRequestSchema(BaseModel):
    resource_id: str
    date: str
    start_time: str
    end_time: str
    owner_id: str
    home_resource_id: str | None = None


class SlotSchema(BaseModel):
    resource_id: str
    date: str
    start_time: str
    end_time: str
    status: SlotStatusSchema
    reservation_id: str | None = None


class ResourceScheduleSchema(BaseModel):
    resource: ResourceSchema
    is_home: bool = False
    slots: list[SlotSchema] = Field(default_factory=list)


class ScheduleResponseSchema(BaseModel):
    date: str
    home_resource_id: str | None = None
    reservation_count: int = 0
    status_counts: dict[str, int] = Field(default_factory=dict)
    resources: list[ResourceScheduleSchema] = Field(default_factory=list)
