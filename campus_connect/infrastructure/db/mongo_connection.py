# Standard library imports
import logging
from typing import Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING, GEOSPHERE, IndexModel
from pymongo.errors import PyMongoError

# Local application imports
from ...core.config import get_settings
from ...domain.constants import ClubFields, EventFields, ListingFields, PostFields, UserFields

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
EVENTS_COLLECTION = "events"
CLUBS_COLLECTION = "clubs"
LISTINGS_COLLECTION = "marketplacelistings"
POSTS_COLLECTION = "posts"


# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    The client is created lazily; motor does not connect until the first
    operation, so building the container never blocks on the server.

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(
        settings.mongo_uri,
        maxPoolSize=settings.mongo_max_pool_size,
        serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
        socketTimeoutMS=settings.mongo_socket_timeout_ms,
        tz_aware=True,
    )
    _mongo_database = _mongo_client[settings.mongo_database_name]
    logger.info(f"MongoDB client created for database '{settings.mongo_database_name}'")
    return _mongo_database


def close_connection() -> None:
    """Close the shared client; the next get_database() call reconnects"""
    global _mongo_client, _mongo_database

    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("MongoDB client closed")
    _mongo_client = None
    _mongo_database = None


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    return get_database()[USERS_COLLECTION]


def get_event_collection() -> AsyncIOMotorCollection:
    """
    Get events collection from MongoDB

    Returns:
        MongoDB collection for events
    """
    return get_database()[EVENTS_COLLECTION]


def get_club_collection() -> AsyncIOMotorCollection:
    """
    Get clubs collection from MongoDB

    Returns:
        MongoDB collection for clubs
    """
    return get_database()[CLUBS_COLLECTION]


def get_listing_collection() -> AsyncIOMotorCollection:
    """
    Get marketplace listings collection from MongoDB

    Returns:
        MongoDB collection for marketplace listings
    """
    return get_database()[LISTINGS_COLLECTION]


def get_post_collection() -> AsyncIOMotorCollection:
    """
    Get posts collection from MongoDB

    Returns:
        MongoDB collection for posts
    """
    return get_database()[POSTS_COLLECTION]


def index_models() -> Dict[str, List[IndexModel]]:
    """Indexes every collection needs, keyed by collection name"""
    return {
        USERS_COLLECTION: [
            IndexModel([(UserFields.EMAIL, ASCENDING)], unique=True, name="email_unique"),
            IndexModel([(UserFields.NAME, ASCENDING)], name="name"),
        ],
        EVENTS_COLLECTION: [
            IndexModel([(EventFields.START_TIME, ASCENDING)], name="start_time"),
            IndexModel([(EventFields.HOST, ASCENDING)], name="host"),
            IndexModel([(EventFields.ATTENDEES, ASCENDING)], name="attendees"),
            IndexModel([(EventFields.LOCATION_COORDS, GEOSPHERE)], name="location_2dsphere"),
        ],
        CLUBS_COLLECTION: [
            IndexModel([(ClubFields.NAME, ASCENDING)], unique=True, name="name_unique"),
            IndexModel([(ClubFields.MEMBERS, ASCENDING)], name="members"),
            IndexModel([(ClubFields.OFFICERS, ASCENDING)], name="officers"),
        ],
        LISTINGS_COLLECTION: [
            IndexModel([(ListingFields.SELLER, ASCENDING)], name="seller"),
            IndexModel([(ListingFields.CATEGORY, ASCENDING)], name="category"),
            IndexModel([(ListingFields.PRICE, ASCENDING)], name="price"),
            IndexModel([(ListingFields.IS_AVAILABLE, ASCENDING)], name="is_available"),
            IndexModel([(ListingFields.CREATED_AT, DESCENDING)], name="created_at"),
        ],
        POSTS_COLLECTION: [
            IndexModel([(PostFields.AUTHOR, ASCENDING)], name="author"),
            IndexModel([(PostFields.CREATED_AT, DESCENDING)], name="created_at"),
            IndexModel([(PostFields.LIKES, ASCENDING)], name="likes"),
        ],
    }


async def ensure_indexes(database: Optional[AsyncIOMotorDatabase] = None) -> None:
    """
    Create the indexes for every collection.

    Failures are logged per collection and never abort startup; uniqueness
    is still checked by the use cases when an index could not be built.
    """
    database = database if database is not None else get_database()
    for collection_name, indexes in index_models().items():
        try:
            await database[collection_name].create_indexes(indexes)
            logger.info(f"Ensured {len(indexes)} index(es) on '{collection_name}'")
        except PyMongoError as e:
            logger.error(f"Failed to ensure indexes on '{collection_name}': {e}", exc_info=True)
