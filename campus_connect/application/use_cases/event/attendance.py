# Standard library imports
import logging

# Local application imports
from ....domain.repositories.event_repository import EventRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.mutators import attend_event, leave_event
from ....utils.datetime_utils import utc_now
from ...dto.event_dto import AttendanceResponse
from ...services.user_references import require_actor
from .get_event import load_event

logger = logging.getLogger(__name__)


class AttendEventUseCase:
    """Use case for a user joining an event's attendees"""

    def __init__(self, event_repository: EventRepository, user_repository: UserRepository) -> None:
        self.event_repository = event_repository
        self.user_repository = user_repository

    async def execute(self, event_id: str, user_id: str) -> AttendanceResponse:
        """
        Attend an event

        Args:
            event_id: ID of the event
            user_id: ID of the acting user

        Returns:
            AttendanceResponse with the resulting attendee count

        Raises:
            NotFoundError: If the event or the user does not exist
            ValidationError: If the event already started or the user hosts it
            ConflictError: If the user is already attending
        """
        event = await load_event(self.event_repository, event_id)
        await require_actor(self.user_repository, user_id)

        mutation = attend_event(event, user_id, utc_now())
        saved_event = await self.event_repository.apply(event_id, mutation)
        logger.info(f"User {user_id} is attending event {event_id}")

        return AttendanceResponse(
            attendee_count=saved_event.attendee_count,
            is_attending=saved_event.is_attending(user_id),
        )


class LeaveEventUseCase:
    """Use case for a user leaving an event; leaving twice is a no-op"""

    def __init__(self, event_repository: EventRepository, user_repository: UserRepository) -> None:
        self.event_repository = event_repository
        self.user_repository = user_repository

    async def execute(self, event_id: str, user_id: str) -> AttendanceResponse:
        event = await load_event(self.event_repository, event_id)
        await require_actor(self.user_repository, user_id)

        mutation = leave_event(event, user_id)
        saved_event = await self.event_repository.apply(event_id, mutation)
        if mutation.changed:
            logger.info(f"User {user_id} left event {event_id}")

        return AttendanceResponse(
            attendee_count=saved_event.attendee_count,
            is_attending=saved_event.is_attending(user_id),
        )
