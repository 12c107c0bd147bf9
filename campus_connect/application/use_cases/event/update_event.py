# Standard library imports
import logging

# Local application imports
from ....domain.repositories.event_repository import EventRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import EventFields
from ....domain.mutators import update_event
from ....utils.datetime_utils import utc_now
from ...dto.event_dto import EventResponse, EventUpdateRequest
from ...services.presenters import present_event
from ...services.reference_expander import UserReferenceExpander
from .create_event import to_geo_point
from .get_event import load_event

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = {
    "title": EventFields.TITLE,
    "description": EventFields.DESCRIPTION,
    "location_name": EventFields.LOCATION_NAME,
    "location": EventFields.LOCATION_COORDS,
    "start_time": EventFields.START_TIME,
    "end_time": EventFields.END_TIME,
}


class UpdateEventUseCase:
    """
    Use case for updating an event.

    End-after-start is checked against the merged old and new times. The
    start-in-future rule applies only at creation, so past events stay editable.
    """

    def __init__(self, event_repository: EventRepository, user_repository: UserRepository) -> None:
        self.event_repository = event_repository
        self.expander = UserReferenceExpander(user_repository)

    async def execute(self, event_id: str, request: EventUpdateRequest) -> EventResponse:
        event = await load_event(self.event_repository, event_id)

        changes = request.model_dump(exclude_unset=True)
        if "location_coords" in changes:
            changes.pop("location_coords")
            changes["location"] = to_geo_point(request.location_coords)

        mutation = update_event(event, changes, UPDATABLE_FIELDS)
        saved_event = await self.event_repository.apply(event_id, mutation)
        logger.info(f"Updated event {event_id}: {sorted(changes)}")

        users = await self.expander.load([saved_event.host_id], saved_event.attendee_ids)
        return present_event(saved_event, users, utc_now())
