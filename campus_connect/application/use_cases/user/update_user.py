# Standard library imports
import logging
from typing import Any, Dict

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ....domain.exceptions import NotFoundError, ValidationError
from ....domain.mutators import update_fields
from ...dto.user_dto import AvatarUpdateRequest, UserResponse, UserUpdateRequest
from ...services.presenters import present_user

logger = logging.getLogger(__name__)

# Entity attribute -> stored field, for the profile fields a user may change
UPDATABLE_FIELDS = {
    "name": UserFields.NAME,
    "bio": UserFields.BIO,
    "major": UserFields.MAJOR,
    "profile_picture_url": UserFields.PROFILE_PICTURE_URL,
    "notification_token": UserFields.NOTIFICATION_TOKEN,
}


class UpdateUserUseCase:
    """Use case for updating the allow-listed profile fields of a user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str, request: UserUpdateRequest) -> UserResponse:
        """
        Update a user profile

        Args:
            user_id: ID of the user
            request: Fields to change; fields not sent are kept

        Returns:
            UserResponse with the updated user

        Raises:
            NotFoundError: If the user does not exist
            ValidationError: If no allowed field is sent or a value is invalid
        """
        changes = request.model_dump(exclude_unset=True)
        return await _apply_profile_changes(self.user_repository, user_id, changes)


class UpdateAvatarUseCase:
    """Use case for replacing only the profile picture of a user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str, request: AvatarUpdateRequest) -> UserResponse:
        if not request.profile_picture_url:
            raise ValidationError.for_field(
                UserFields.PROFILE_PICTURE_URL,
                "Profile picture URL is required",
                request.profile_picture_url,
            )
        changes = {"profile_picture_url": request.profile_picture_url}
        return await _apply_profile_changes(self.user_repository, user_id, changes)


async def _apply_profile_changes(
    user_repository: UserRepository,
    user_id: str,
    changes: Dict[str, Any],
) -> UserResponse:
    user = await user_repository.find_by_id(user_id)
    if not user:
        raise NotFoundError("User not found")

    mutation = update_fields(user, changes, UPDATABLE_FIELDS)
    saved_user = await user_repository.apply(user_id, mutation)
    logger.info(f"Updated user {user_id}: {sorted(changes)}")
    return present_user(saved_user)
