# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.club_repository import ClubRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.filters import ClubFilter
from ....domain.models.pagination import PageInfo, PageRequest
from ...dto.club_dto import ClubListResponse
from ...services.presenters import present_club, present_pagination
from ...services.reference_expander import UserReferenceExpander


class ListClubsUseCase:
    """Use case for listing clubs ordered by name"""

    def __init__(self, club_repository: ClubRepository, user_repository: UserRepository) -> None:
        self.club_repository = club_repository
        self.expander = UserReferenceExpander(user_repository)

    async def execute(
        self,
        page: int = 1,
        limit: int = 10,
        search: Optional[str] = None,
        member_id: Optional[str] = None,
    ) -> ClubListResponse:
        page_request = PageRequest(page=page, limit=limit)
        clubs, total = await self.club_repository.list(
            ClubFilter(search=search, member_id=member_id), page_request
        )
        users = await self.expander.load(
            [member for club in clubs for member in club.member_ids]
        )
        return ClubListResponse(
            clubs=[present_club(club, users) for club in clubs],
            pagination=present_pagination(PageInfo.from_total(page_request, total)),
        )
