# Standard library imports
from typing import Any, Dict, List, Optional, Sequence, Tuple

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.models.filters import UserFilter
from ...domain.models.mutation import Mutation
from ...domain.models.pagination import PageRequest
from ...domain.constants import UserFields
from ...utils.datetime_utils import ensure_utc
from .mongo_base_repository import (
    MongoRepository,
    id_to_str,
    search_clause,
    to_object_ids,
    translate_errors,
)
from .mongo_connection import get_user_collection


DUPLICATE_EMAIL_MESSAGE = "User with this email already exists"


class MongoUserRepository(MongoRepository[User], UserRepository):
    """MongoDB implementation of UserRepository"""

    entity_name = "User"

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        super().__init__(user_collection if user_collection is not None else get_user_collection())

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return await self._find_by_id(user_id)

    async def find_by_ids(self, user_ids: Sequence[str]) -> List[User]:
        """
        Find users by ID

        Args:
            user_ids: IDs to look up; malformed and unknown IDs are skipped

        Returns:
            Existing users, in no particular order
        """
        object_ids = to_object_ids(list(dict.fromkeys(user_ids)))
        if not object_ids:
            return []

        with translate_errors("finding users by ID"):
            cursor = self.collection.find({UserFields.MONGO_ID: {"$in": object_ids}})
            users = []
            async for document in cursor:
                users.append(self._document_to_entity(document))
        return users

    async def find_by_email(self, email: str) -> Optional[User]:
        if not email:
            return None
        return await self._find_one({UserFields.EMAIL: email.strip().lower()})

    async def list(self, user_filter: UserFilter, page: PageRequest) -> Tuple[List[User], int]:
        query = search_clause(
            user_filter.search, [UserFields.NAME, UserFields.EMAIL, UserFields.MAJOR]
        )
        return await self._paginate(
            query, [(UserFields.NAME, 1), (UserFields.MONGO_ID, 1)], page
        )

    async def create(self, user: User) -> User:
        return await self._insert(user, DUPLICATE_EMAIL_MESSAGE)

    async def apply(self, user_id: str, mutation: Mutation[User]) -> User:
        return await self._apply(user_id, mutation, DUPLICATE_EMAIL_MESSAGE)

    async def delete(self, user_id: str) -> bool:
        return await self._delete(user_id)

    def _document_to_entity(self, document: Dict[str, Any]) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document:
            raise ValueError("Invalid document: document is None or empty")

        return User(
            id=id_to_str(document.get(UserFields.MONGO_ID)),
            name=document.get(UserFields.NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            bio=document.get(UserFields.BIO),
            major=document.get(UserFields.MAJOR),
            profile_picture_url=document.get(UserFields.PROFILE_PICTURE_URL),
            notification_token=document.get(UserFields.NOTIFICATION_TOKEN),
            created_at=ensure_utc(document.get(UserFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(UserFields.UPDATED_AT)),
        )

    def _entity_to_dict(self, user: User) -> Dict[str, Any]:
        """
        Convert User domain model to MongoDB document

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage (unset optional fields omitted)
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict: Dict[str, Any] = {
            UserFields.NAME: user.name,
            UserFields.EMAIL: user.email,
            UserFields.BIO: user.bio,
            UserFields.MAJOR: user.major,
            UserFields.PROFILE_PICTURE_URL: user.profile_picture_url,
            UserFields.NOTIFICATION_TOKEN: user.notification_token,
        }
        return {key: value for key, value in user_dict.items() if value is not None}
