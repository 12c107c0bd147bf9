# Local application imports
from ....domain.repositories.event_repository import EventRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.event import Event
from ....domain.exceptions import NotFoundError
from ....utils.datetime_utils import utc_now
from ...dto.event_dto import EventAttendeesResponse, EventResponse
from ...services.presenters import present_event, present_user_summaries, present_user_summary
from ...services.reference_expander import UserReferenceExpander


async def load_event(event_repository: EventRepository, event_id: str) -> Event:
    """Find an event or raise NotFoundError (malformed IDs included)"""
    event = await event_repository.find_by_id(event_id)
    if not event:
        raise NotFoundError("Event not found")
    return event


class GetEventUseCase:
    """Use case for getting an event with host and attendees expanded"""

    def __init__(self, event_repository: EventRepository, user_repository: UserRepository) -> None:
        self.event_repository = event_repository
        self.expander = UserReferenceExpander(user_repository)

    async def execute(self, event_id: str) -> EventResponse:
        event = await load_event(self.event_repository, event_id)
        users = await self.expander.load([event.host_id], event.attendee_ids)
        return present_event(event, users, utc_now())


class ListEventAttendeesUseCase:
    """Use case for listing the host and attendees of an event"""

    def __init__(self, event_repository: EventRepository, user_repository: UserRepository) -> None:
        self.event_repository = event_repository
        self.expander = UserReferenceExpander(user_repository)

    async def execute(self, event_id: str) -> EventAttendeesResponse:
        event = await load_event(self.event_repository, event_id)
        users = await self.expander.load([event.host_id], event.attendee_ids)
        return EventAttendeesResponse(
            host=present_user_summary(users.get(event.host_id)),
            attendees=present_user_summaries(users.existing(event.attendee_ids)),
            attendee_count=event.attendee_count,
        )
