# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.event_repository import EventRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.event import Event, GeoPoint, ensure_starts_in_future
from ....domain.constants import EventFields
from ....domain.exceptions import ValidationError
from ....utils.datetime_utils import utc_now
from ...dto.event_dto import EventCreateRequest, EventResponse, GeoPointSchema
from ...services.presenters import present_event
from ...services.reference_expander import UserReferenceExpander
from ...services.user_references import ensure_users_exist

logger = logging.getLogger(__name__)


def to_geo_point(location: Optional[GeoPointSchema]) -> Optional[GeoPoint]:
    """
    Convert a GeoJSON point from a request to the domain point

    Raises:
        ValidationError: If the point is not exactly [longitude, latitude]
    """
    if location is None:
        return None
    if location.type != "Point" or len(location.coordinates) != 2:
        raise ValidationError.for_field(
            EventFields.LOCATION_COORDS,
            "Invalid coordinates format [longitude, latitude]",
            location.coordinates,
        )
    longitude, latitude = location.coordinates
    return GeoPoint(longitude=longitude, latitude=latitude)


class CreateEventUseCase:
    """Use case for creating a new event"""

    def __init__(self, event_repository: EventRepository, user_repository: UserRepository) -> None:
        self.event_repository = event_repository
        self.user_repository = user_repository
        self.expander = UserReferenceExpander(user_repository)

    async def execute(self, request: EventCreateRequest) -> EventResponse:
        """
        Create a new event

        Args:
            request: Event creation request (host named by ID)

        Returns:
            EventResponse with the host expanded

        Raises:
            ValidationError: If a field is invalid, the event does not start in the
                future, or the host does not exist
        """
        now = utc_now()
        new_event = Event(
            id=None,
            title=request.title,
            description=request.description,
            start_time=request.start_time,
            end_time=request.end_time,
            host_id=request.host,
            location_name=request.location_name,
            location=to_geo_point(request.location_coords),
        )
        ensure_starts_in_future(new_event, now)
        await ensure_users_exist(self.user_repository, [(EventFields.HOST, [new_event.host_id])])

        saved_event = await self.event_repository.create(new_event)
        logger.info(f"Created event {saved_event.id} hosted by {saved_event.host_id}")

        users = await self.expander.load([saved_event.host_id])
        return present_event(saved_event, users, now)
