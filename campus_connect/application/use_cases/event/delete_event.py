# Standard library imports
import logging

# Local application imports
from ....domain.repositories.event_repository import EventRepository
from ....domain.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class DeleteEventUseCase:
    """Use case for hard-deleting an event (attendees are not notified)"""

    def __init__(self, event_repository: EventRepository) -> None:
        self.event_repository = event_repository

    async def execute(self, event_id: str) -> None:
        deleted = await self.event_repository.delete(event_id)
        if not deleted:
            raise NotFoundError("Event not found")
        logger.info(f"Deleted event {event_id}")
