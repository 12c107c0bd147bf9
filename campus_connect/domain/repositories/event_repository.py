from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from ..models.event import Event
from ..models.filters import EventFilter
from ..models.mutation import Mutation
from ..models.pagination import PageRequest


class EventRepository(ABC):
    """Repository interface - defines contract for event data access"""

    @abstractmethod
    async def find_by_id(self, event_id: str) -> Optional[Event]:
        """Find event by ID; a malformed ID finds nothing"""
        pass

    @abstractmethod
    async def list(self, event_filter: EventFilter, page: PageRequest) -> Tuple[List[Event], int]:
        """Return one page of events sorted by start time, plus the total match count"""
        pass

    @abstractmethod
    async def create(self, event: Event) -> Event:
        """Insert a new event"""
        pass

    @abstractmethod
    async def apply(self, event_id: str, mutation: Mutation[Event]) -> Event:
        """Persist a mutation atomically and return the stored event"""
        pass

    @abstractmethod
    async def delete(self, event_id: str) -> bool:
        """Hard delete; returns False when nothing was deleted"""
        pass

    @abstractmethod
    async def count_hosted_by(self, user_id: str) -> int:
        """Number of events hosted by a user"""
        pass

    @abstractmethod
    async def count_attended_by(self, user_id: str) -> int:
        """Number of events a user is attending (hosted events excluded)"""
        pass
