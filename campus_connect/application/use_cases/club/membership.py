# Standard library imports
import logging

# Local application imports
from ....domain.repositories.club_repository import ClubRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.mutators import join_club, leave_club
from ...dto.club_dto import MembershipResponse
from ...services.user_references import require_actor
from .get_club import load_club

logger = logging.getLogger(__name__)


class JoinClubUseCase:
    """Use case for a user joining a club"""

    def __init__(self, club_repository: ClubRepository, user_repository: UserRepository) -> None:
        self.club_repository = club_repository
        self.user_repository = user_repository

    async def execute(self, club_id: str, user_id: str) -> MembershipResponse:
        """
        Join a club

        Raises:
            NotFoundError: If the club or the user does not exist
            ConflictError: If the user is already a member
        """
        club = await load_club(self.club_repository, club_id)
        await require_actor(self.user_repository, user_id)

        saved_club = await self.club_repository.apply(club_id, join_club(club, user_id))
        logger.info(f"User {user_id} joined club {club_id}")

        return MembershipResponse(
            member_count=saved_club.member_count,
            is_member=saved_club.is_member(user_id),
        )


class LeaveClubUseCase:
    """Use case for a user leaving a club; officer status is dropped with membership"""

    def __init__(self, club_repository: ClubRepository, user_repository: UserRepository) -> None:
        self.club_repository = club_repository
        self.user_repository = user_repository

    async def execute(self, club_id: str, user_id: str) -> MembershipResponse:
        """
        Leave a club

        Raises:
            NotFoundError: If the club or the user does not exist, or the user
                is not a member
        """
        club = await load_club(self.club_repository, club_id)
        await require_actor(self.user_repository, user_id)

        saved_club = await self.club_repository.apply(club_id, leave_club(club, user_id))
        logger.info(f"User {user_id} left club {club_id}")

        return MembershipResponse(
            member_count=saved_club.member_count,
            is_member=saved_club.is_member(user_id),
        )
