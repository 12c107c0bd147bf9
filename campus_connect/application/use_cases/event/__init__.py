from .create_event import CreateEventUseCase
from .get_event import GetEventUseCase, ListEventAttendeesUseCase
from .list_events import ListEventsUseCase
from .update_event import UpdateEventUseCase
from .delete_event import DeleteEventUseCase
from .attendance import AttendEventUseCase, LeaveEventUseCase

__all__ = [
    "CreateEventUseCase",
    "GetEventUseCase",
    "ListEventAttendeesUseCase",
    "ListEventsUseCase",
    "UpdateEventUseCase",
    "DeleteEventUseCase",
    "AttendEventUseCase",
    "LeaveEventUseCase",
]
