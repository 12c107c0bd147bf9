# Standard library imports
import logging
import re
from contextlib import contextmanager
from typing import Any, Dict, Generic, Iterator, List, Mapping, Optional, Sequence, Tuple, TypeVar

# External package imports
from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.exceptions import ConflictError, NotFoundError, StorageError
from ...domain.models.mutation import Mutation
from ...domain.models.pagination import PageRequest
from ...utils.datetime_utils import utc_now
from .mongo_mutation import to_update_parts

logger = logging.getLogger(__name__)

T = TypeVar("T")

MONGO_ID = "_id"


def to_object_id(value: Optional[str]) -> Optional[ObjectId]:
    """Convert an id string to ObjectId; malformed ids yield None"""
    if not value:
        return None
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def to_object_ids(values: Sequence[str]) -> List[ObjectId]:
    object_ids = (to_object_id(value) for value in values)
    return [object_id for object_id in object_ids if object_id is not None]


def id_to_str(value: Any) -> Optional[str]:
    return str(value) if value is not None else None


def search_clause(term: Optional[str], fields: Sequence[str]) -> Dict[str, Any]:
    """Case-insensitive substring match of ``term`` on any of ``fields``"""
    if not term:
        return {}
    pattern = {"$regex": re.escape(term), "$options": "i"}
    return {"$or": [{field: pattern} for field in fields]}


@contextmanager
def translate_errors(action: str, conflict_message: Optional[str] = None) -> Iterator[None]:
    """
    Translate driver errors into domain errors.

    DuplicateKeyError becomes ConflictError; any other PyMongoError becomes
    StorageError. Domain errors raised inside the block pass through.
    """
    try:
        yield
    except DuplicateKeyError as e:
        logger.info(f"Duplicate key while {action}: {e}")
        raise ConflictError(conflict_message or f"Duplicate value while {action}")
    except PyMongoError as e:
        logger.error(f"MongoDB error while {action}: {e}", exc_info=True)
        raise StorageError(f"Error {action}", details={"reason": str(e)})


class MongoRepository(Generic[T]):
    """
    Shared MongoDB plumbing for the entity repositories.

    Subclasses provide ``_document_to_entity`` / ``_entity_to_dict`` and, where
    stored values differ from domain values, ``_encode_value``.
    """

    entity_name = "Entity"
    key_aliases: Mapping[str, str] = {}

    def __init__(self, collection: AsyncIOMotorCollection) -> None:
        self.collection = collection

    @property
    def not_found_message(self) -> str:
        return f"{self.entity_name} not found"

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def _document_to_entity(self, document: Dict[str, Any]) -> T:
        raise NotImplementedError

    def _entity_to_dict(self, entity: T) -> Dict[str, Any]:
        raise NotImplementedError

    def _encode_value(self, field: str, value: Any) -> Any:
        return value

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def _find_by_id(self, entity_id: str) -> Optional[T]:
        object_id = to_object_id(entity_id)
        if object_id is None:
            return None

        with translate_errors(f"finding {self.entity_name.lower()} by ID"):
            document = await self.collection.find_one({MONGO_ID: object_id})
        if document is None:
            return None
        return self._document_to_entity(document)

    async def _find_one(self, query: Dict[str, Any]) -> Optional[T]:
        with translate_errors(f"finding {self.entity_name.lower()}"):
            document = await self.collection.find_one(query)
        if document is None:
            return None
        return self._document_to_entity(document)

    async def _paginate(
        self,
        query: Dict[str, Any],
        sort: List[Tuple[str, int]],
        page: PageRequest,
    ) -> Tuple[List[T], int]:
        """One page of entities matching ``query`` plus the total match count"""
        with translate_errors(f"listing {self.entity_name.lower()}s"):
            total = await self.collection.count_documents(query)
            cursor = self.collection.find(query).sort(sort).skip(page.skip).limit(page.limit)
            entities = []
            async for document in cursor:
                entities.append(self._document_to_entity(document))
        return entities, total

    async def _count(self, query: Dict[str, Any]) -> int:
        with translate_errors(f"counting {self.entity_name.lower()}s"):
            return await self.collection.count_documents(query)

    async def _insert(self, entity: T, conflict_message: Optional[str] = None) -> T:
        """Insert a new entity with fresh timestamps and return it as stored"""
        now = utc_now()
        document = self._entity_to_dict(entity)
        document.pop(MONGO_ID, None)
        document["createdAt"] = now
        document["updatedAt"] = now

        with translate_errors(f"creating {self.entity_name.lower()}", conflict_message):
            result = await self.collection.insert_one(document)

        document[MONGO_ID] = result.inserted_id
        return self._document_to_entity(document)

    async def _apply(
        self,
        entity_id: str,
        mutation: Mutation[T],
        conflict_message: Optional[str] = None,
    ) -> T:
        """
        Persist ``mutation`` in one guarded write.

        Raises:
            NotFoundError: If the document does not exist (or the ID is malformed)
            CampusConnectError: The mutation's guard_error when a guard no longer holds
        """
        object_id = to_object_id(entity_id)
        if object_id is None:
            raise NotFoundError(self.not_found_message)
        if not mutation.changed:
            return mutation.entity

        guard_filter, update = to_update_parts(
            mutation, utc_now(), self._encode_value, self.key_aliases
        )
        query = {MONGO_ID: object_id, **guard_filter}

        with translate_errors(f"updating {self.entity_name.lower()}", conflict_message):
            document = await self.collection.find_one_and_update(
                query, update, return_document=ReturnDocument.AFTER
            )
            if document is None:
                exists = await self.collection.count_documents({MONGO_ID: object_id}, limit=1)

        if document is not None:
            return self._document_to_entity(document)
        if exists and mutation.guard_error is not None:
            raise mutation.guard_error
        raise NotFoundError(self.not_found_message)

    async def _delete(self, entity_id: str) -> bool:
        object_id = to_object_id(entity_id)
        if object_id is None:
            return False

        with translate_errors(f"deleting {self.entity_name.lower()}"):
            result = await self.collection.delete_one({MONGO_ID: object_id})
        return result.deleted_count > 0
