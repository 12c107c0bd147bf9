from .mongo_connection import (
    get_database,
    get_user_collection,
    get_event_collection,
    get_club_collection,
    get_listing_collection,
    get_post_collection,
    ensure_indexes,
    close_connection,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_event_repository import MongoEventRepository
from .mongo_club_repository import MongoClubRepository
from .mongo_listing_repository import MongoListingRepository
from .mongo_post_repository import MongoPostRepository

__all__ = [
    "get_database",
    "get_user_collection",
    "get_event_collection",
    "get_club_collection",
    "get_listing_collection",
    "get_post_collection",
    "ensure_indexes",
    "close_connection",
    "MongoUserRepository",
    "MongoEventRepository",
    "MongoClubRepository",
    "MongoListingRepository",
    "MongoPostRepository",
]
