"""
Integration tests for club API endpoints.
Uses TestClient with mocked use cases (no real DB).
"""
from unittest.mock import AsyncMock

import pytest

from campus_connect.application.dto.club_dto import (
    ClubMembersResponse,
    ClubResponse,
    MembershipResponse,
    OfficerResponse,
)
from campus_connect.application.dto.common_dto import UserSummary
from campus_connect.application.use_cases.club import (
    AddOfficerUseCase,
    CreateClubUseCase,
    JoinClubUseCase,
    LeaveClubUseCase,
    ListClubMembersUseCase,
    RemoveOfficerUseCase,
)
from campus_connect.domain.exceptions import ConflictError, NotFoundError

pytestmark = pytest.mark.integration

CLUB_ID = "64b7f0c2a1b2c3d4e5f60201"
USER_ID = "64b7f0c2a1b2c3d4e5f60001"


@pytest.fixture
def use_cases():
    return {
        use_case: AsyncMock(spec=use_case)
        for use_case in (
            CreateClubUseCase,
            ListClubMembersUseCase,
            JoinClubUseCase,
            LeaveClubUseCase,
            AddOfficerUseCase,
            RemoveOfficerUseCase,
        )
    }


@pytest.fixture
def client(api_client, use_cases):
    with api_client("clubs_controller", use_cases) as c:
        yield c


class TestClubsAPI:
    """Tests for /api/v1/clubs endpoints"""

    def test_create_club(self, client, use_cases):
        member = UserSummary(id=USER_ID, name="Mia Member")
        use_cases[CreateClubUseCase].execute.return_value = ClubResponse(
            id=CLUB_ID, name="Chess Club", members=[member], officers=[member],
            member_count=1, officer_count=1,
        )

        response = client.post(
            "/api/v1/clubs",
            json={"name": "Chess Club", "members": [USER_ID], "officers": [USER_ID]},
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["memberCount"] == 1
        assert data["officers"][0]["name"] == "Mia Member"

    def test_duplicate_name(self, client, use_cases):
        use_cases[CreateClubUseCase].execute.side_effect = ConflictError(
            "Club with this name already exists"
        )

        response = client.post("/api/v1/clubs", json={"name": "Chess Club"})

        assert response.status_code == 409
        assert response.json()["message"] == "Club with this name already exists"

    def test_members(self, client, use_cases):
        use_cases[ListClubMembersUseCase].execute.return_value = ClubMembersResponse(
            members=[], member_count=2
        )

        response = client.get(f"/api/v1/clubs/{CLUB_ID}/members")

        assert response.json()["data"] == {"members": [], "memberCount": 2}

    def test_join(self, client, use_cases):
        use_cases[JoinClubUseCase].execute.return_value = MembershipResponse(
            member_count=3, is_member=True
        )

        response = client.post(f"/api/v1/clubs/{CLUB_ID}/join", json={"userId": USER_ID})

        assert response.status_code == 200
        assert response.json()["message"] == "Successfully joined club"
        use_cases[JoinClubUseCase].execute.assert_awaited_once_with(CLUB_ID, USER_ID)

    def test_join_unknown_club(self, client, use_cases):
        use_cases[JoinClubUseCase].execute.side_effect = NotFoundError("Club not found")

        response = client.post(f"/api/v1/clubs/{CLUB_ID}/join", json={"userId": USER_ID})

        assert response.status_code == 404

    def test_leave_with_body(self, client, use_cases):
        use_cases[LeaveClubUseCase].execute.return_value = MembershipResponse(
            member_count=2, is_member=False
        )

        response = client.request("DELETE", f"/api/v1/clubs/{CLUB_ID}/leave", json={"userId": USER_ID})

        assert response.json()["data"]["isMember"] is False

    def test_add_officer(self, client, use_cases):
        use_cases[AddOfficerUseCase].execute.return_value = OfficerResponse(
            officer_count=1, member_count=1, is_officer=True
        )

        response = client.post(f"/api/v1/clubs/{CLUB_ID}/officers", json={"userId": USER_ID})

        assert response.json()["data"] == {"officerCount": 1, "memberCount": 1, "isOfficer": True}

    def test_remove_officer(self, client, use_cases):
        use_cases[RemoveOfficerUseCase].execute.return_value = OfficerResponse(
            officer_count=0, member_count=1, is_officer=False
        )

        response = client.request(
            "DELETE", f"/api/v1/clubs/{CLUB_ID}/officers", json={"userId": USER_ID}
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Officer removed successfully"
