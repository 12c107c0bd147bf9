# Standard library imports
from typing import Dict, Iterable, Optional, Sequence

# Local application imports
from ...domain.models.user import User
from ...domain.repositories.user_repository import UserRepository


class UserReferenceExpander:
    """
    Read-time join of user references.

    Loads every referenced user of a response in one query. A reference to a
    deleted user resolves to None instead of failing the whole read.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def load(self, *id_groups: Iterable[Optional[str]]) -> "UserLookup":
        wanted = list(dict.fromkeys(
            user_id for group in id_groups for user_id in group if user_id
        ))
        if not wanted:
            return UserLookup({})
        users = await self.user_repository.find_by_ids(wanted)
        return UserLookup({user.id: user for user in users})


class UserLookup:
    """Users loaded for one response, keyed by ID"""

    def __init__(self, users_by_id: Dict[str, User]) -> None:
        self.users_by_id = users_by_id

    def get(self, user_id: Optional[str]) -> Optional[User]:
        if not user_id:
            return None
        return self.users_by_id.get(user_id)

    def existing(self, user_ids: Sequence[str]) -> Sequence[User]:
        """Users for the given IDs in the same order, missing ones omitted"""
        users = (self.users_by_id.get(user_id) for user_id in user_ids)
        return [user for user in users if user is not None]
