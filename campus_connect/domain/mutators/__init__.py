"""
Relationship mutators.

Each mutator checks its preconditions against the current entity and returns a
``Mutation`` describing the next state; none of them touches storage.
"""

from .event_mutators import attend_event, leave_event, update_event
from .club_mutators import join_club, leave_club, add_officer, remove_officer
from .post_mutators import toggle_like, add_comment, remove_comment
from .listing_mutators import mark_as_sold, mark_as_available, add_image
from .field_updates import update_fields

__all__ = [
    "attend_event",
    "leave_event",
    "update_event",
    "join_club",
    "leave_club",
    "add_officer",
    "remove_officer",
    "toggle_like",
    "add_comment",
    "remove_comment",
    "mark_as_sold",
    "mark_as_available",
    "add_image",
    "update_fields",
]
