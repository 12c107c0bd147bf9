from .user import User
from .event import Event, GeoPoint, ensure_starts_in_future
from .club import Club
from .listing import ListingCategory, MarketplaceListing, MAX_LISTING_IMAGES
from .post import Comment, Post
from .pagination import PageInfo, PageRequest
from .filters import ClubFilter, EventFilter, ListingFilter, PostFilter, UserFilter
from .mutation import Mutation

__all__ = [
    "User",
    "Event",
    "GeoPoint",
    "ensure_starts_in_future",
    "Club",
    "ListingCategory",
    "MarketplaceListing",
    "MAX_LISTING_IMAGES",
    "Comment",
    "Post",
    "PageInfo",
    "PageRequest",
    "ClubFilter",
    "EventFilter",
    "ListingFilter",
    "PostFilter",
    "UserFilter",
    "Mutation",
]
