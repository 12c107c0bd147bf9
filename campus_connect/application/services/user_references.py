"""
Referential checks against the users collection.

Hard deletes never cascade, so references are checked when they are written:
creation-time references must name existing users, and the acting user of a
relationship operation must exist.
"""

# Standard library imports
from typing import Iterable, List, Tuple

# Local application imports
from ...domain.exceptions import FieldError, NotFoundError, ValidationError
from ...domain.models.user import User
from ...domain.repositories.user_repository import UserRepository
from ...domain.validation import is_valid_id


ACTOR_FIELD = "userId"


async def require_actor(user_repository: UserRepository, user_id: str) -> User:
    """
    Resolve the acting user of a relationship operation.

    Raises:
        ValidationError: If ``user_id`` is not a well-formed identifier
        NotFoundError: If no such user exists
    """
    if not is_valid_id(user_id):
        raise ValidationError.for_field(ACTOR_FIELD, f"Invalid {ACTOR_FIELD} format", user_id)

    user = await user_repository.find_by_id(user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


async def ensure_users_exist(
    user_repository: UserRepository,
    references: Iterable[Tuple[str, Iterable[str]]],
) -> None:
    """
    Check that every referenced user exists.

    Args:
        references: ``(field, [user ids])`` pairs, checked with one lookup

    Raises:
        ValidationError: Listing each field that names a missing user
    """
    references = [(field, list(user_ids)) for field, user_ids in references]
    wanted = {user_id for _, user_ids in references for user_id in user_ids}
    if not wanted:
        return

    found = {user.id for user in await user_repository.find_by_ids(list(wanted))}
    errors: List[FieldError] = []
    for field, user_ids in references:
        missing = [user_id for user_id in user_ids if user_id not in found]
        if missing:
            errors.append(FieldError(field=field, message="Referenced user not found", value=missing))
    if errors:
        raise ValidationError("Validation failed", errors)
