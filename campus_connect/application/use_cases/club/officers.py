# Standard library imports
import logging

# Local application imports
from ....domain.repositories.club_repository import ClubRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.club import Club
from ....domain.mutators import add_officer, remove_officer
from ...dto.club_dto import OfficerResponse
from ...services.user_references import require_actor
from .get_club import load_club

logger = logging.getLogger(__name__)


class AddOfficerUseCase:
    """
    Use case for promoting a user to officer.

    A non-member is added to the members in the same write. Promoting an
    existing officer succeeds without changes.
    """

    def __init__(self, club_repository: ClubRepository, user_repository: UserRepository) -> None:
        self.club_repository = club_repository
        self.user_repository = user_repository

    async def execute(self, club_id: str, user_id: str) -> OfficerResponse:
        club = await load_club(self.club_repository, club_id)
        await require_actor(self.user_repository, user_id)

        mutation = add_officer(club, user_id)
        saved_club = await self.club_repository.apply(club_id, mutation)
        if mutation.changed:
            logger.info(f"User {user_id} is now an officer of club {club_id}")

        return _officer_response(saved_club, user_id)


class RemoveOfficerUseCase:
    """Use case for revoking officer status; membership is kept"""

    def __init__(self, club_repository: ClubRepository, user_repository: UserRepository) -> None:
        self.club_repository = club_repository
        self.user_repository = user_repository

    async def execute(self, club_id: str, user_id: str) -> OfficerResponse:
        club = await load_club(self.club_repository, club_id)
        await require_actor(self.user_repository, user_id)

        mutation = remove_officer(club, user_id)
        saved_club = await self.club_repository.apply(club_id, mutation)
        if mutation.changed:
            logger.info(f"User {user_id} is no longer an officer of club {club_id}")

        return _officer_response(saved_club, user_id)


def _officer_response(club: Club, user_id: str) -> OfficerResponse:
    return OfficerResponse(
        officer_count=club.officer_count,
        member_count=club.member_count,
        is_officer=club.is_officer(user_id),
    )
