"""
Unit tests for user use cases (Create, Get, List, Update, Avatar, Profile, Delete).
"""
from datetime import timedelta

import pytest

from campus_connect.application.dto.user_dto import (
    AvatarUpdateRequest,
    UserCreateRequest,
    UserUpdateRequest,
)
from campus_connect.application.use_cases.user import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserProfileUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateAvatarUseCase,
    UpdateUserUseCase,
)
from campus_connect.domain.exceptions import ConflictError, NotFoundError, ValidationError
from campus_connect.domain.models import Club, Event, MarketplaceListing, User
from campus_connect.utils.datetime_utils import utc_now


@pytest.fixture
def alice(user_repo):
    return user_repo.add(User(id=None, name="Alice", email="alice@example.com", major="Math"))


class TestCreateUserUseCase:
    """Tests for CreateUserUseCase"""

    @pytest.mark.asyncio
    async def test_create_success(self, user_repo):
        use_case = CreateUserUseCase(user_repo)
        result = await use_case.execute(
            UserCreateRequest(name=" Bob ", email="Bob@Example.com", major="Physics")
        )
        assert result.id
        assert result.name == "Bob"
        assert result.email == "bob@example.com"
        assert result.created_at is not None

    @pytest.mark.asyncio
    async def test_duplicate_email_case_insensitive(self, user_repo, alice):
        use_case = CreateUserUseCase(user_repo)
        with pytest.raises(ConflictError, match="User with this email already exists"):
            await use_case.execute(UserCreateRequest(name="Other", email="ALICE@example.com"))

    @pytest.mark.asyncio
    async def test_invalid_fields_rejected_before_store(self, user_repo):
        use_case = CreateUserUseCase(user_repo)
        with pytest.raises(ValidationError):
            await use_case.execute(
                UserCreateRequest(name="Bob", email="bob@example.com", bio="x" * 501)
            )
        assert user_repo.items == {}


class TestGetAndListUsers:
    """Tests for GetUserUseCase and ListUsersUseCase"""

    @pytest.mark.asyncio
    async def test_get_unknown_and_malformed(self, user_repo):
        use_case = GetUserUseCase(user_repo)
        with pytest.raises(NotFoundError, match="User not found"):
            await use_case.execute("64b7f0c2a1b2c3d4e5f6ffff")
        with pytest.raises(NotFoundError):
            await use_case.execute("not-an-id")

    @pytest.mark.asyncio
    async def test_list_search_and_pagination(self, user_repo, alice):
        user_repo.add(User(id=None, name="Bob", email="bob@example.com", major="Physics"))
        use_case = ListUsersUseCase(user_repo)

        result = await use_case.execute(page=1, limit=10, search="math")

        assert [user.name for user in result.users] == ["Alice"]
        assert result.pagination.total == 1
        assert result.pagination.total_pages == 1

    @pytest.mark.asyncio
    async def test_list_limit_out_of_range(self, user_repo):
        with pytest.raises(ValidationError):
            await ListUsersUseCase(user_repo).execute(limit=500)


class TestUpdateUserUseCase:
    """Tests for UpdateUserUseCase and UpdateAvatarUseCase"""

    @pytest.mark.asyncio
    async def test_update_allowed_fields(self, user_repo, alice):
        use_case = UpdateUserUseCase(user_repo)
        result = await use_case.execute(alice.id, UserUpdateRequest(bio="Likes proofs"))
        assert result.bio == "Likes proofs"
        assert result.email == "alice@example.com"

    @pytest.mark.asyncio
    async def test_update_without_fields_rejected(self, user_repo, alice):
        use_case = UpdateUserUseCase(user_repo)
        with pytest.raises(ValidationError, match="No valid fields provided for update"):
            await use_case.execute(alice.id, UserUpdateRequest())

    @pytest.mark.asyncio
    async def test_update_unknown_user(self, user_repo):
        use_case = UpdateUserUseCase(user_repo)
        with pytest.raises(NotFoundError):
            await use_case.execute("64b7f0c2a1b2c3d4e5f6ffff", UserUpdateRequest(bio="x"))

    @pytest.mark.asyncio
    async def test_avatar_requires_image_url(self, user_repo, alice):
        use_case = UpdateAvatarUseCase(user_repo)
        with pytest.raises(ValidationError):
            await use_case.execute(alice.id, AvatarUpdateRequest(profile_picture_url=None))
        with pytest.raises(ValidationError):
            await use_case.execute(
                alice.id, AvatarUpdateRequest(profile_picture_url="https://cdn.example.com/a.bmp")
            )

        result = await use_case.execute(
            alice.id, AvatarUpdateRequest(profile_picture_url="https://cdn.example.com/a.jpg")
        )
        assert result.profile_picture_url == "https://cdn.example.com/a.jpg"


class TestGetUserProfileUseCase:
    """Tests for GetUserProfileUseCase"""

    @pytest.mark.asyncio
    async def test_stats_counted_from_other_collections(
        self, user_repo, event_repo, club_repo, listing_repo, alice
    ):
        bob = user_repo.add(User(id=None, name="Bob", email="bob@example.com"))
        start = utc_now() + timedelta(days=2)
        event_repo.add(Event(id=None, title="Study group", description="Algebra",
                             start_time=start, end_time=start + timedelta(hours=1),
                             host_id=alice.id, attendee_ids=[bob.id]))
        event_repo.add(Event(id=None, title="Movie night", description="Popcorn",
                             start_time=start, end_time=start + timedelta(hours=2),
                             host_id=bob.id, attendee_ids=[alice.id]))
        club_repo.add(Club(id=None, name="Chess Club", member_ids=[alice.id], officer_ids=[alice.id]))
        club_repo.add(Club(id=None, name="Go Club", member_ids=[alice.id, bob.id]))
        listing_repo.add(MarketplaceListing(id=None, title="Desk lamp", price=8,
                                            seller_id=alice.id, category="furniture"))
        listing_repo.add(MarketplaceListing(id=None, title="Old phone", price=20,
                                            seller_id=alice.id, category="electronics",
                                            is_available=False))

        use_case = GetUserProfileUseCase(user_repo, event_repo, club_repo, listing_repo)
        result = await use_case.execute(alice.id)

        assert result.user.id == alice.id
        assert result.stats.club_memberships == 2
        assert result.stats.officer_positions == 1
        assert result.stats.hosted_events_count == 1
        assert result.stats.attending_events_count == 1
        assert result.stats.active_listings == 1

    @pytest.mark.asyncio
    async def test_profile_unknown_user(self, user_repo, event_repo, club_repo, listing_repo):
        use_case = GetUserProfileUseCase(user_repo, event_repo, club_repo, listing_repo)
        with pytest.raises(NotFoundError):
            await use_case.execute("64b7f0c2a1b2c3d4e5f6ffff")


class TestDeleteUserUseCase:
    """Tests for DeleteUserUseCase"""

    @pytest.mark.asyncio
    async def test_delete_then_not_found(self, user_repo, alice):
        use_case = DeleteUserUseCase(user_repo)
        await use_case.execute(alice.id)
        with pytest.raises(NotFoundError):
            await use_case.execute(alice.id)
