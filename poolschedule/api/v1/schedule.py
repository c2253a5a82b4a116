from fastapi import APIRouter, Depends, HTTPException, Query, Response

from poolschedule.api.v1.schemas import (
    BookSlotRequestSchema,
    ReservationCreateSchema,
    ReservationSchema,
    ReservationUpdateSchema,
    ResourceCreateSchema,
    ResourceScheduleSchema,
    ResourceSchema,
    ResourceUpdateSchema,
    ScheduleResponseSchema,
    SlotSchema,
)
from poolschedule.application.exceptions import (
    ReservationNotFoundError,
    ReservationValidationError,
    ResourceNotFoundError,
    ResourceValidationError,
    SlotUnavailableError,
)
from poolschedule.application.use_cases.reservations import ReservationUseCase
from poolschedule.application.use_cases.resources import ResourceUseCase
from poolschedule.application.use_cases.schedule import ScheduleUseCase
from poolschedule.domain.entities.reservation import Reservation
from poolschedule.domain.entities.resource import Resource
from poolschedule.wiring.dependencies import (
    get_reservation_use_case,
    get_resource_use_case,
    get_schedule_use_case,
)

router = APIRouter()


def _resource_schema(resource: Resource) -> ResourceSchema:
    return ResourceSchema(
        id=resource.id,
        name=resource.name,
        slot_duration_minutes=resource.slot_duration_minutes,
        window_start=resource.window_start,
        window_end=resource.window_end,
    )


def _reservation_schema(reservation: Reservation) -> ReservationSchema:
    return ReservationSchema(
        id=reservation.id,
        resource_id=reservation.resource_id,
        date=reservation.date,
        start_time=reservation.start_time,
        end_time=reservation.end_time,
        status=reservation.status.value,
        owner_id=reservation.owner_id,
    )


@router.get("/schedule", response_model=ScheduleResponseSchema)
def get_schedule(
    date: str = Query(..., description="YYYY-MM-DD"),
    home_resource_id: str | None = Query(None),
    uc: ScheduleUseCase = Depends(get_schedule_use_case),
):
    try:
        day = uc.execute(date, home_resource_id)
    except ReservationValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ScheduleResponseSchema(
        date=day.date,
        home_resource_id=day.home_resource_id,
        reservation_count=day.reservation_count,
        status_counts=day.status_counts(),
        resources=[
            ResourceScheduleSchema(
                resource=_resource_schema(entry.resource),
                is_home=entry.resource.id == day.home_resource_id,
                slots=[
                    SlotSchema(
                        resource_id=s.resource_id,
                        date=s.date,
                        start_time=s.start_time,
                        end_time=s.end_time,
                        status=s.status.value,
                        reservation_id=s.reservation.id if s.reservation else None,
                    )
                    for s in entry.slots
                ],
            )
            for entry in day.resources
        ],
    )


@router.get("/resources", response_model=list[ResourceSchema])
def list_resources(uc: ResourceUseCase = Depends(get_resource_use_case)):
    return [_resource_schema(r) for r in uc.list_all()]


@router.post("/resources", response_model=ResourceSchema, status_code=201)
def create_resource(req: ResourceCreateSchema, uc: ResourceUseCase = Depends(get_resource_use_case)):
    try:
        resource = uc.create(
            name=req.name,
            slot_duration_minutes=req.slot_duration_minutes,
            window_start=req.window_start,
            window_end=req.window_end,
            resource_id=req.id,
        )
    except ResourceValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _resource_schema(resource)


@router.put("/resources/{resource_id}", response_model=ResourceSchema)
def update_resource(
    resource_id: str,
    req: ResourceUpdateSchema,
    uc: ResourceUseCase = Depends(get_resource_use_case),
):
    try:
        resource = uc.update(resource_id, **req.model_dump(exclude_none=True))
    except ResourceNotFoundError:
        raise HTTPException(status_code=404, detail=f"Resource {resource_id} not found")
    except ResourceValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _resource_schema(resource)


@router.get("/reservations", response_model=list[ReservationSchema])
def list_reservations(
    date: str = Query(..., description="YYYY-MM-DD"),
    uc: ReservationUseCase = Depends(get_reservation_use_case),
):
    try:
        reservations = uc.list_for_date(date)
    except ReservationValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return [_reservation_schema(r) for r in reservations]


@router.post("/reservations", response_model=ReservationSchema, status_code=201)
def create_reservation(
    req: ReservationCreateSchema,
    uc: ReservationUseCase = Depends(get_reservation_use_case),
):
    try:
        reservation = uc.create(
            resource_id=req.resource_id,
            date=req.date,
            start_time=req.start_time,
            end_time=req.end_time,
            status=req.status.value,
            owner_id=req.owner_id,
        )
    except ResourceNotFoundError:
        raise HTTPException(status_code=404, detail=f"Resource {req.resource_id} not found")
    except ReservationValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _reservation_schema(reservation)


@router.post("/reservations/book", response_model=ReservationSchema, status_code=201)
def book_slot(
    req: BookSlotRequestSchema,
    uc: ReservationUseCase = Depends(get_reservation_use_case),
):
    try:
        reservation = uc.book_slot(
            resource_id=req.resource_id,
            date=req.date,
            start_time=req.start_time,
            end_time=req.end_time,
            owner_id=req.owner_id,
            home_resource_id=req.home_resource_id,
        )
    except ResourceNotFoundError:
        raise HTTPException(status_code=404, detail=f"Resource {req.resource_id} not found")
    except ReservationValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SlotUnavailableError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _reservation_schema(reservation)


@router.put("/reservations/{reservation_id}", response_model=ReservationSchema)
def update_reservation(
    reservation_id: str,
    req: ReservationUpdateSchema,
    uc: ReservationUseCase = Depends(get_reservation_use_case),
):
    try:
        reservation = uc.update(reservation_id, **req.model_dump(mode="json", exclude_none=True))
    except ReservationNotFoundError:
        raise HTTPException(status_code=404, detail=f"Reservation {reservation_id} not found")
    except ResourceNotFoundError as e:
        raise HTTPException(status_code=404, detail=f"Resource {e} not found")
    except ReservationValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _reservation_schema(reservation)


@router.delete("/reservations/{reservation_id}", status_code=204)
def delete_reservation(
    reservation_id: str,
    uc: ReservationUseCase = Depends(get_reservation_use_case),
) -> Response:
    try:
        uc.delete(reservation_id)
    except ReservationNotFoundError:
        raise HTTPException(status_code=404, detail=f"Reservation {reservation_id} not found")
    return Response(status_code=204)
