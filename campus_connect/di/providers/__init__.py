from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .user_provider import UserProvider
from .event_provider import EventProvider
from .club_provider import ClubProvider
from .listing_provider import ListingProvider
from .post_provider import PostProvider
from .media_provider import MediaProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "UserProvider",
    "EventProvider",
    "ClubProvider",
    "ListingProvider",
    "PostProvider",
    "MediaProvider",
]
