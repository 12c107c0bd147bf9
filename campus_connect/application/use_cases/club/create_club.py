# Standard library imports
import logging

# Local application imports
from ....domain.repositories.club_repository import ClubRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.club import Club
from ....domain.constants import ClubFields
from ....domain.exceptions import ConflictError
from ...dto.club_dto import ClubCreateRequest, ClubResponse
from ...services.presenters import present_club
from ...services.reference_expander import UserReferenceExpander
from ...services.user_references import ensure_users_exist

logger = logging.getLogger(__name__)


class CreateClubUseCase:
    """Use case for creating a club with optional initial members and officers"""

    def __init__(self, club_repository: ClubRepository, user_repository: UserRepository) -> None:
        self.club_repository = club_repository
        self.user_repository = user_repository
        self.expander = UserReferenceExpander(user_repository)

    async def execute(self, request: ClubCreateRequest) -> ClubResponse:
        """
        Create a new club

        Members and officers are validated together before anything is stored,
        so an officer missing from the members list rejects the whole request.

        Raises:
            ValidationError: If a field is invalid, an officer is not a member,
                or a referenced user does not exist
            ConflictError: If the club name is taken
        """
        new_club = Club(
            id=None,
            name=request.name,
            description=request.description,
            member_ids=list(request.members),
            officer_ids=list(request.officers),
        )

        existing_club = await self.club_repository.find_by_name(new_club.name)
        if existing_club:
            raise ConflictError("Club with this name already exists")

        await ensure_users_exist(
            self.user_repository,
            [(ClubFields.MEMBERS, new_club.member_ids), (ClubFields.OFFICERS, new_club.officer_ids)],
        )

        saved_club = await self.club_repository.create(new_club)
        logger.info(f"Created club {saved_club.id} ({saved_club.name})")

        users = await self.expander.load(saved_club.member_ids)
        return present_club(saved_club, users)
