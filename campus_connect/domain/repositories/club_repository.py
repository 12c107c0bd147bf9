from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from ..models.club import Club
from ..models.filters import ClubFilter
from ..models.mutation import Mutation
from ..models.pagination import PageRequest


class ClubRepository(ABC):
    """Repository interface - defines contract for club data access"""

    @abstractmethod
    async def find_by_id(self, club_id: str) -> Optional[Club]:
        """Find club by ID; a malformed ID finds nothing"""
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Club]:
        """Find club by its exact name"""
        pass

    @abstractmethod
    async def list(self, club_filter: ClubFilter, page: PageRequest) -> Tuple[List[Club], int]:
        """Return one page of clubs sorted by name, plus the total match count"""
        pass

    @abstractmethod
    async def create(self, club: Club) -> Club:
        """Insert a new club; duplicate name is a conflict"""
        pass

    @abstractmethod
    async def apply(self, club_id: str, mutation: Mutation[Club]) -> Club:
        """Persist a mutation atomically and return the stored club"""
        pass

    @abstractmethod
    async def delete(self, club_id: str) -> bool:
        """Hard delete; returns False when nothing was deleted"""
        pass

    @abstractmethod
    async def count_memberships(self, user_id: str) -> int:
        """Number of clubs a user belongs to"""
        pass

    @abstractmethod
    async def count_officer_positions(self, user_id: str) -> int:
        """Number of clubs where a user is an officer"""
        pass
