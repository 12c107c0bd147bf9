# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """
    Use case for hard-deleting a user.

    References held by events, clubs, listings and posts are left in place;
    reads expand them to null.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> None:
        deleted = await self.user_repository.delete(user_id)
        if not deleted:
            raise NotFoundError("User not found")
        logger.info(f"Deleted user {user_id}")
