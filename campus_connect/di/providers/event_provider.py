from typing import TYPE_CHECKING
from ...domain.repositories.event_repository import EventRepository
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.event import (
    CreateEventUseCase,
    GetEventUseCase,
    ListEventAttendeesUseCase,
    ListEventsUseCase,
    UpdateEventUseCase,
    DeleteEventUseCase,
    AttendEventUseCase,
    LeaveEventUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class EventProvider:
    """Event use case provider - registers all event-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all event use cases.
        Use cases are created on-demand via factories.
        """
        for use_case in (
            CreateEventUseCase,
            GetEventUseCase,
            ListEventAttendeesUseCase,
            ListEventsUseCase,
            UpdateEventUseCase,
            AttendEventUseCase,
            LeaveEventUseCase,
        ):
            container.register_factory(
                use_case,
                lambda use_case=use_case: use_case(
                    event_repository=container.get(EventRepository),
                    user_repository=container.get(UserRepository),
                )
            )

        container.register_factory(
            DeleteEventUseCase,
            lambda: DeleteEventUseCase(event_repository=container.get(EventRepository))
        )
