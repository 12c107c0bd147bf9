# Standard library imports
from dataclasses import replace

# Local application imports
from ..constants import ClubFields
from ..exceptions import ConflictError, NotFoundError
from ..models.club import Club
from ..models.mutation import AddToSet, Contains, Mutation, NotContains, Pull


def join_club(club: Club, user_id: str) -> Mutation[Club]:
    """
    Add a user to the members.

    Raises:
        ConflictError: If the user is already a member
    """
    already_member = ConflictError("User is already a member of this club")
    if club.is_member(user_id):
        raise already_member

    return Mutation(
        entity=replace(club, member_ids=[*club.member_ids, user_id]),
        effects=[AddToSet(ClubFields.MEMBERS, user_id)],
        guards=[NotContains(ClubFields.MEMBERS, user_id)],
        guard_error=already_member,
    )


def leave_club(club: Club, user_id: str) -> Mutation[Club]:
    """
    Remove a user from the members and, if present, from the officers.

    Raises:
        NotFoundError: If the user is not a member
    """
    not_member = NotFoundError("User is not a member of this club")
    if not club.is_member(user_id):
        raise not_member

    return Mutation(
        entity=replace(
            club,
            member_ids=[member for member in club.member_ids if member != user_id],
            officer_ids=[officer for officer in club.officer_ids if officer != user_id],
        ),
        effects=[Pull(ClubFields.MEMBERS, user_id), Pull(ClubFields.OFFICERS, user_id)],
        guards=[Contains(ClubFields.MEMBERS, user_id)],
        guard_error=not_member,
    )


def add_officer(club: Club, user_id: str) -> Mutation[Club]:
    """
    Make a user an officer, adding them to the members first when needed.

    Idempotent: re-adding an existing officer changes nothing.
    """
    if club.is_officer(user_id):
        return Mutation(entity=club)

    member_ids = club.member_ids if club.is_member(user_id) else [*club.member_ids, user_id]
    # Both sets are written together so a concurrent leave cannot strand an officer
    return Mutation(
        entity=replace(club, member_ids=member_ids, officer_ids=[*club.officer_ids, user_id]),
        effects=[AddToSet(ClubFields.MEMBERS, user_id), AddToSet(ClubFields.OFFICERS, user_id)],
    )


def remove_officer(club: Club, user_id: str) -> Mutation[Club]:
    """Drop officer status only; membership is kept. Idempotent."""
    if not club.is_officer(user_id):
        return Mutation(entity=club)

    return Mutation(
        entity=replace(
            club,
            officer_ids=[officer for officer in club.officer_ids if officer != user_id],
        ),
        effects=[Pull(ClubFields.OFFICERS, user_id)],
    )
