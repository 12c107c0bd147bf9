# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.filters import UserFilter
from ....domain.models.pagination import PageInfo, PageRequest
from ...dto.user_dto import UserListResponse
from ...services.presenters import present_pagination, present_user


class ListUsersUseCase:
    """Use case for listing users with optional name/email/major search"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(
        self,
        page: int = 1,
        limit: int = 10,
        search: Optional[str] = None,
    ) -> UserListResponse:
        page_request = PageRequest(page=page, limit=limit)
        users, total = await self.user_repository.list(UserFilter(search=search), page_request)
        return UserListResponse(
            users=[present_user(user) for user in users],
            pagination=present_pagination(PageInfo.from_total(page_request, total)),
        )
