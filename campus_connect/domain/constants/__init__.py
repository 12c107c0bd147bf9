"""Constants for domain model field names"""

from .user_fields import UserFields
from .event_fields import EventFields
from .club_fields import ClubFields
from .listing_fields import ListingFields
from .post_fields import PostFields, CommentFields

__all__ = [
    "UserFields",
    "EventFields",
    "ClubFields",
    "ListingFields",
    "PostFields",
    "CommentFields",
]
