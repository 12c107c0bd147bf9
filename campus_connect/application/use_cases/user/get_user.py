# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import NotFoundError
from ...dto.user_dto import UserResponse
from ...services.presenters import present_user


class GetUserUseCase:
    """Use case for getting a user by ID"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> UserResponse:
        user = await self.user_repository.find_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return present_user(user)
