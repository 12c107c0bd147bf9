# Standard library imports
from datetime import datetime
from typing import Optional

# Local application imports
from ....domain.repositories.event_repository import EventRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.filters import EventFilter
from ....domain.models.pagination import PageInfo, PageRequest
from ....utils.datetime_utils import ensure_utc, utc_now
from ...dto.event_dto import EventListResponse
from ...services.presenters import present_event, present_pagination
from ...services.reference_expander import UserReferenceExpander


class ListEventsUseCase:
    """Use case for listing events ordered by start time"""

    def __init__(self, event_repository: EventRepository, user_repository: UserRepository) -> None:
        self.event_repository = event_repository
        self.expander = UserReferenceExpander(user_repository)

    async def execute(
        self,
        page: int = 1,
        limit: int = 10,
        search: Optional[str] = None,
        upcoming: bool = False,
        start_after: Optional[datetime] = None,
        start_before: Optional[datetime] = None,
        host_id: Optional[str] = None,
        attendee_id: Optional[str] = None,
    ) -> EventListResponse:
        """
        List events

        Args:
            page: 1-based page number
            limit: Page size (1-100)
            search: Case-insensitive substring over title, description and location
            upcoming: Only events that have not started yet
            start_after: Only events starting after this instant
            start_before: Only events starting before this instant
            host_id: Only events hosted by this user
            attendee_id: Only events this user attends

        Returns:
            EventListResponse with events and pagination
        """
        now = utc_now()
        page_request = PageRequest(page=page, limit=limit)

        start_after = ensure_utc(start_after)
        if upcoming and (start_after is None or start_after < now):
            start_after = now

        event_filter = EventFilter(
            search=search,
            start_after=start_after,
            start_before=ensure_utc(start_before),
            host_id=host_id,
            attendee_id=attendee_id,
        )
        events, total = await self.event_repository.list(event_filter, page_request)

        users = await self.expander.load(
            [event.host_id for event in events],
            [attendee for event in events for attendee in event.attendee_ids],
        )
        return EventListResponse(
            events=[present_event(event, users, now) for event in events],
            pagination=present_pagination(PageInfo.from_total(page_request, total)),
        )
