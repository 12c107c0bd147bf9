# Standard library imports
from datetime import datetime
from typing import Optional

# External package imports
from fastapi import APIRouter, Query, status

# Local application imports
from ...application.dto.common_dto import ApiResponse, UserActionRequest
from ...application.dto.event_dto import (
    AttendanceResponse,
    EventAttendeesResponse,
    EventCreateRequest,
    EventListResponse,
    EventResponse,
    EventUpdateRequest,
)
from ...application.use_cases.event import (
    AttendEventUseCase,
    CreateEventUseCase,
    DeleteEventUseCase,
    GetEventUseCase,
    LeaveEventUseCase,
    ListEventAttendeesUseCase,
    ListEventsUseCase,
    UpdateEventUseCase,
)
from ...di.container import get_container


router = APIRouter(tags=["events"])


@router.get("", response_model=ApiResponse[EventListResponse])
async def list_events(
    page: int = Query(1),
    limit: int = Query(10),
    search: Optional[str] = Query(None),
    upcoming: bool = Query(False),
    start_after: Optional[datetime] = Query(None, alias="startAfter"),
    start_before: Optional[datetime] = Query(None, alias="startBefore"),
    host_id: Optional[str] = Query(None, alias="hostId"),
    attendee_id: Optional[str] = Query(None, alias="attendeeId"),
) -> ApiResponse[EventListResponse]:
    """
    List events ordered by start time

    Args:
        page: 1-based page number
        limit: Page size (1-100)
        search: Search term over title, description and location
        upcoming: Only events that have not started
        start_after: Lower bound on start time
        start_before: Upper bound on start time
        host_id: Only events hosted by this user
        attendee_id: Only events this user attends

    Returns:
        Events and pagination
    """
    container = get_container()
    list_events_use_case = container.get(ListEventsUseCase)

    events = await list_events_use_case.execute(
        page=page,
        limit=limit,
        search=search,
        upcoming=upcoming,
        start_after=start_after,
        start_before=start_before,
        host_id=host_id,
        attendee_id=attendee_id,
    )
    return ApiResponse(data=events)


@router.get("/upcoming", response_model=ApiResponse[EventListResponse])
async def list_upcoming_events(
    page: int = Query(1),
    limit: int = Query(10),
) -> ApiResponse[EventListResponse]:
    container = get_container()
    list_events_use_case = container.get(ListEventsUseCase)

    events = await list_events_use_case.execute(page=page, limit=limit, upcoming=True)
    return ApiResponse(data=events)


@router.post("", response_model=ApiResponse[EventResponse], status_code=status.HTTP_201_CREATED)
async def create_event(request: EventCreateRequest) -> ApiResponse[EventResponse]:
    """
    Create a new event

    Args:
        request: Event creation request; startTime must be in the future and
            endTime after startTime

    Returns:
        The created event with its host expanded
    """
    container = get_container()
    create_event_use_case = container.get(CreateEventUseCase)

    event = await create_event_use_case.execute(request)
    return ApiResponse(message="Event created successfully", data=event)


@router.get("/{event_id}", response_model=ApiResponse[EventResponse])
async def get_event(event_id: str) -> ApiResponse[EventResponse]:
    container = get_container()
    get_event_use_case = container.get(GetEventUseCase)

    event = await get_event_use_case.execute(event_id)
    return ApiResponse(data=event)


@router.put("/{event_id}", response_model=ApiResponse[EventResponse])
async def update_event(event_id: str, request: EventUpdateRequest) -> ApiResponse[EventResponse]:
    container = get_container()
    update_event_use_case = container.get(UpdateEventUseCase)

    event = await update_event_use_case.execute(event_id, request)
    return ApiResponse(message="Event updated successfully", data=event)


@router.delete("/{event_id}", response_model=ApiResponse)
async def delete_event(event_id: str) -> ApiResponse:
    container = get_container()
    delete_event_use_case = container.get(DeleteEventUseCase)

    await delete_event_use_case.execute(event_id)
    return ApiResponse(message="Event deleted successfully")


@router.get("/{event_id}/attendees", response_model=ApiResponse[EventAttendeesResponse])
async def list_event_attendees(event_id: str) -> ApiResponse[EventAttendeesResponse]:
    container = get_container()
    list_attendees_use_case = container.get(ListEventAttendeesUseCase)

    attendees = await list_attendees_use_case.execute(event_id)
    return ApiResponse(data=attendees)


@router.post("/{event_id}/attend", response_model=ApiResponse[AttendanceResponse])
async def attend_event(event_id: str, request: UserActionRequest) -> ApiResponse[AttendanceResponse]:
    """
    Attend an event

    Args:
        event_id: ID of the event
        request: Body naming the attending user

    Returns:
        Resulting attendee count; 409 if already attending
    """
    container = get_container()
    attend_event_use_case = container.get(AttendEventUseCase)

    attendance = await attend_event_use_case.execute(event_id, request.user_id)
    return ApiResponse(message="Successfully joined event", data=attendance)


@router.delete("/{event_id}/attend", response_model=ApiResponse[AttendanceResponse])
async def leave_event(event_id: str, request: UserActionRequest) -> ApiResponse[AttendanceResponse]:
    container = get_container()
    leave_event_use_case = container.get(LeaveEventUseCase)

    attendance = await leave_event_use_case.execute(event_id, request.user_id)
    return ApiResponse(message="Successfully left event", data=attendance)
