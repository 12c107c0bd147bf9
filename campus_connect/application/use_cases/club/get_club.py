# Local application imports
from ....domain.repositories.club_repository import ClubRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.club import Club
from ....domain.exceptions import NotFoundError
from ...dto.club_dto import ClubMembersResponse, ClubOfficersResponse, ClubResponse
from ...services.presenters import present_club, present_user_summaries
from ...services.reference_expander import UserReferenceExpander


async def load_club(club_repository: ClubRepository, club_id: str) -> Club:
    """Find a club or raise NotFoundError (malformed IDs included)"""
    club = await club_repository.find_by_id(club_id)
    if not club:
        raise NotFoundError("Club not found")
    return club


class GetClubUseCase:
    """Use case for getting a club with members and officers expanded"""

    def __init__(self, club_repository: ClubRepository, user_repository: UserRepository) -> None:
        self.club_repository = club_repository
        self.expander = UserReferenceExpander(user_repository)

    async def execute(self, club_id: str) -> ClubResponse:
        club = await load_club(self.club_repository, club_id)
        users = await self.expander.load(club.member_ids)
        return present_club(club, users)


class ListClubMembersUseCase:
    def __init__(self, club_repository: ClubRepository, user_repository: UserRepository) -> None:
        self.club_repository = club_repository
        self.expander = UserReferenceExpander(user_repository)

    async def execute(self, club_id: str) -> ClubMembersResponse:
        club = await load_club(self.club_repository, club_id)
        users = await self.expander.load(club.member_ids)
        return ClubMembersResponse(
            members=present_user_summaries(users.existing(club.member_ids)),
            member_count=club.member_count,
        )


class ListClubOfficersUseCase:
    def __init__(self, club_repository: ClubRepository, user_repository: UserRepository) -> None:
        self.club_repository = club_repository
        self.expander = UserReferenceExpander(user_repository)

    async def execute(self, club_id: str) -> ClubOfficersResponse:
        club = await load_club(self.club_repository, club_id)
        users = await self.expander.load(club.officer_ids)
        return ClubOfficersResponse(
            officers=present_user_summaries(users.existing(club.officer_ids)),
            officer_count=club.officer_count,
        )
