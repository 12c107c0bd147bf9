from .id_generator import new_id
from .reference_expander import UserLookup, UserReferenceExpander
from .user_references import ensure_users_exist, require_actor

__all__ = [
    "new_id",
    "UserLookup",
    "UserReferenceExpander",
    "ensure_users_exist",
    "require_actor",
]
