# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import ConflictError
from ...dto.user_dto import UserCreateRequest, UserResponse
from ...services.presenters import present_user

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for creating a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserCreateRequest) -> UserResponse:
        """
        Create a new user

        Args:
            request: User creation request

        Returns:
            UserResponse with the created user

        Raises:
            ValidationError: If a field is out of bounds
            ConflictError: If the email is already registered
        """
        new_user = User(
            id=None,
            name=request.name,
            email=request.email,
            bio=request.bio,
            major=request.major,
            profile_picture_url=request.profile_picture_url,
            notification_token=request.notification_token,
        )

        existing_user = await self.user_repository.find_by_email(new_user.email)
        if existing_user:
            raise ConflictError("User with this email already exists")

        saved_user = await self.user_repository.create(new_user)
        logger.info(f"Created user {saved_user.id}")
        return present_user(saved_user)
