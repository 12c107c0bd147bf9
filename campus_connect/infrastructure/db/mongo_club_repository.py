# Standard library imports
from typing import Any, Dict, List, Optional, Tuple

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection

# Local application imports
from ...domain.repositories.club_repository import ClubRepository
from ...domain.models.club import Club
from ...domain.models.filters import ClubFilter
from ...domain.models.mutation import Mutation
from ...domain.models.pagination import PageRequest
from ...domain.constants import ClubFields
from ...utils.datetime_utils import ensure_utc
from .mongo_base_repository import (
    MongoRepository,
    id_to_str,
    search_clause,
    to_object_id,
    to_object_ids,
)
from .mongo_connection import get_club_collection


DUPLICATE_NAME_MESSAGE = "Club with this name already exists"


class MongoClubRepository(MongoRepository[Club], ClubRepository):
    """MongoDB implementation of ClubRepository"""

    entity_name = "Club"

    def __init__(self, club_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        super().__init__(club_collection if club_collection is not None else get_club_collection())

    async def find_by_id(self, club_id: str) -> Optional[Club]:
        return await self._find_by_id(club_id)

    async def find_by_name(self, name: str) -> Optional[Club]:
        if not name:
            return None
        return await self._find_one({ClubFields.NAME: name.strip()})

    async def list(self, club_filter: ClubFilter, page: PageRequest) -> Tuple[List[Club], int]:
        query: Dict[str, Any] = search_clause(
            club_filter.search, [ClubFields.NAME, ClubFields.DESCRIPTION]
        )
        if club_filter.member_id:
            query[ClubFields.MEMBERS] = to_object_id(club_filter.member_id)
        return await self._paginate(
            query, [(ClubFields.NAME, 1), (ClubFields.MONGO_ID, 1)], page
        )

    async def create(self, club: Club) -> Club:
        return await self._insert(club, DUPLICATE_NAME_MESSAGE)

    async def apply(self, club_id: str, mutation: Mutation[Club]) -> Club:
        return await self._apply(club_id, mutation, DUPLICATE_NAME_MESSAGE)

    async def delete(self, club_id: str) -> bool:
        return await self._delete(club_id)

    async def count_memberships(self, user_id: str) -> int:
        object_id = to_object_id(user_id)
        if object_id is None:
            return 0
        return await self._count({ClubFields.MEMBERS: object_id})

    async def count_officer_positions(self, user_id: str) -> int:
        object_id = to_object_id(user_id)
        if object_id is None:
            return 0
        return await self._count({ClubFields.OFFICERS: object_id})

    def _encode_value(self, field: str, value: Any) -> Any:
        if field in (ClubFields.MEMBERS, ClubFields.OFFICERS):
            return to_object_id(value)
        return value

    def _document_to_entity(self, document: Dict[str, Any]) -> Club:
        """
        Convert MongoDB document to Club domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            Club domain model
        """
        if not document:
            raise ValueError("Invalid document: document is None or empty")

        return Club(
            id=id_to_str(document.get(ClubFields.MONGO_ID)),
            name=document.get(ClubFields.NAME, ""),
            description=document.get(ClubFields.DESCRIPTION),
            member_ids=[str(member) for member in document.get(ClubFields.MEMBERS, [])],
            officer_ids=[str(officer) for officer in document.get(ClubFields.OFFICERS, [])],
            created_at=ensure_utc(document.get(ClubFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(ClubFields.UPDATED_AT)),
        )

    def _entity_to_dict(self, club: Club) -> Dict[str, Any]:
        """
        Convert Club domain model to MongoDB document

        Args:
            club: Club domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        if not club:
            raise ValueError("Club cannot be None")

        club_dict: Dict[str, Any] = {
            ClubFields.NAME: club.name,
            ClubFields.MEMBERS: to_object_ids(club.member_ids),
            ClubFields.OFFICERS: to_object_ids(club.officer_ids),
        }
        if club.description:
            club_dict[ClubFields.DESCRIPTION] = club.description
        return club_dict
