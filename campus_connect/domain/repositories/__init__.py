from .user_repository import UserRepository
from .event_repository import EventRepository
from .club_repository import ClubRepository
from .listing_repository import ListingRepository
from .post_repository import PostRepository

__all__ = ["UserRepository", "EventRepository", "ClubRepository", "ListingRepository", "PostRepository"]
