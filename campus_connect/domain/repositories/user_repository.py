from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple
from ..models.user import User
from ..models.filters import UserFilter
from ..models.mutation import Mutation
from ..models.pagination import PageRequest


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID; a malformed ID finds nothing"""
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[str]) -> List[User]:
        """Find every existing user among the given IDs"""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass

    @abstractmethod
    async def list(self, user_filter: UserFilter, page: PageRequest) -> Tuple[List[User], int]:
        """Return one page of users sorted by name, plus the total match count"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user; duplicate email is a conflict"""
        pass

    @abstractmethod
    async def apply(self, user_id: str, mutation: Mutation[User]) -> User:
        """Persist a mutation atomically and return the stored user"""
        pass

    @abstractmethod
    async def delete(self, user_id: str) -> bool:
        """Hard delete; returns False when nothing was deleted"""
        pass
