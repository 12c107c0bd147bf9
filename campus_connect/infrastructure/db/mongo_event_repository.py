# Standard library imports
from typing import Any, Dict, List, Optional, Tuple

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection

# Local application imports
from ...domain.repositories.event_repository import EventRepository
from ...domain.models.event import Event, GeoPoint
from ...domain.models.filters import EventFilter
from ...domain.models.mutation import Mutation
from ...domain.models.pagination import PageRequest
from ...domain.constants import EventFields
from ...utils.datetime_utils import ensure_utc
from .mongo_base_repository import (
    MongoRepository,
    id_to_str,
    search_clause,
    to_object_id,
    to_object_ids,
)
from .mongo_connection import get_event_collection


GEO_POINT_TYPE = "Point"


class MongoEventRepository(MongoRepository[Event], EventRepository):
    """MongoDB implementation of EventRepository"""

    entity_name = "Event"

    def __init__(self, event_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        super().__init__(event_collection if event_collection is not None else get_event_collection())

    async def find_by_id(self, event_id: str) -> Optional[Event]:
        return await self._find_by_id(event_id)

    async def list(self, event_filter: EventFilter, page: PageRequest) -> Tuple[List[Event], int]:
        """
        List events ordered by start time (soonest first)

        Args:
            event_filter: Time window, host/attendee and free-text criteria
            page: Requested page

        Returns:
            Tuple of (events on the page, total matching events)
        """
        query: Dict[str, Any] = search_clause(
            event_filter.search,
            [EventFields.TITLE, EventFields.DESCRIPTION, EventFields.LOCATION_NAME],
        )

        start_range: Dict[str, Any] = {}
        if event_filter.start_after is not None:
            start_range["$gt"] = event_filter.start_after
        if event_filter.start_before is not None:
            start_range["$lt"] = event_filter.start_before
        if start_range:
            query[EventFields.START_TIME] = start_range

        if event_filter.host_id:
            query[EventFields.HOST] = to_object_id(event_filter.host_id)
        if event_filter.attendee_id:
            query[EventFields.ATTENDEES] = to_object_id(event_filter.attendee_id)

        return await self._paginate(
            query, [(EventFields.START_TIME, 1), (EventFields.MONGO_ID, 1)], page
        )

    async def create(self, event: Event) -> Event:
        return await self._insert(event)

    async def apply(self, event_id: str, mutation: Mutation[Event]) -> Event:
        return await self._apply(event_id, mutation)

    async def delete(self, event_id: str) -> bool:
        return await self._delete(event_id)

    async def count_hosted_by(self, user_id: str) -> int:
        object_id = to_object_id(user_id)
        if object_id is None:
            return 0
        return await self._count({EventFields.HOST: object_id})

    async def count_attended_by(self, user_id: str) -> int:
        object_id = to_object_id(user_id)
        if object_id is None:
            return 0
        return await self._count({EventFields.ATTENDEES: object_id})

    def _encode_value(self, field: str, value: Any) -> Any:
        if field in (EventFields.HOST, EventFields.ATTENDEES):
            return to_object_id(value)
        if field == EventFields.LOCATION_COORDS:
            return self._geo_point_to_dict(value)
        return value

    def _document_to_entity(self, document: Dict[str, Any]) -> Event:
        """
        Convert MongoDB document to Event domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            Event domain model
        """
        if not document:
            raise ValueError("Invalid document: document is None or empty")

        return Event(
            id=id_to_str(document.get(EventFields.MONGO_ID)),
            title=document.get(EventFields.TITLE, ""),
            description=document.get(EventFields.DESCRIPTION, ""),
            start_time=ensure_utc(document.get(EventFields.START_TIME)),
            end_time=ensure_utc(document.get(EventFields.END_TIME)),
            host_id=id_to_str(document.get(EventFields.HOST)),
            location_name=document.get(EventFields.LOCATION_NAME),
            location=self._dict_to_geo_point(document.get(EventFields.LOCATION_COORDS)),
            attendee_ids=[str(attendee) for attendee in document.get(EventFields.ATTENDEES, [])],
            created_at=ensure_utc(document.get(EventFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(EventFields.UPDATED_AT)),
        )

    def _entity_to_dict(self, event: Event) -> Dict[str, Any]:
        """
        Convert Event domain model to MongoDB document

        Args:
            event: Event domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        if not event:
            raise ValueError("Event cannot be None")

        event_dict: Dict[str, Any] = {
            EventFields.TITLE: event.title,
            EventFields.DESCRIPTION: event.description,
            EventFields.START_TIME: event.start_time,
            EventFields.END_TIME: event.end_time,
            EventFields.HOST: to_object_id(event.host_id),
            EventFields.ATTENDEES: to_object_ids(event.attendee_ids),
        }
        if event.location_name:
            event_dict[EventFields.LOCATION_NAME] = event.location_name
        # An absent point keeps the document out of the 2dsphere index
        if event.location is not None:
            event_dict[EventFields.LOCATION_COORDS] = self._geo_point_to_dict(event.location)
        return event_dict

    @staticmethod
    def _geo_point_to_dict(location: Optional[GeoPoint]) -> Optional[Dict[str, Any]]:
        if location is None:
            return None
        return {
            EventFields.GEO_TYPE: GEO_POINT_TYPE,
            EventFields.GEO_COORDINATES: [location.longitude, location.latitude],
        }

    @staticmethod
    def _dict_to_geo_point(value: Optional[Dict[str, Any]]) -> Optional[GeoPoint]:
        if not value:
            return None
        coordinates = value.get(EventFields.GEO_COORDINATES) or []
        if len(coordinates) != 2:
            return None
        return GeoPoint(longitude=coordinates[0], latitude=coordinates[1])
