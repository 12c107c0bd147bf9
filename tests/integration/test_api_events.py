"""
Integration tests for event API endpoints.
Uses TestClient with mocked use cases (no real DB).
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from campus_connect.application.dto.common_dto import PaginationResponse, UserSummary
from campus_connect.application.dto.event_dto import (
    AttendanceResponse,
    EventListResponse,
    EventResponse,
    GeoPointSchema,
)
from campus_connect.application.use_cases.event import (
    AttendEventUseCase,
    CreateEventUseCase,
    GetEventUseCase,
    LeaveEventUseCase,
    ListEventsUseCase,
)
from campus_connect.domain.exceptions import ConflictError, NotFoundError

pytestmark = pytest.mark.integration

EVENT_ID = "64b7f0c2a1b2c3d4e5f60101"
HOST_ID = "64b7f0c2a1b2c3d4e5f60001"
USER_ID = "64b7f0c2a1b2c3d4e5f60002"


def event_response():
    return EventResponse(
        id=EVENT_ID,
        title="Hack Night",
        description="Bring a laptop",
        location_coords=GeoPointSchema(coordinates=[-122.4, 37.8]),
        start_time=datetime(2030, 3, 1, 18, 0, tzinfo=timezone.utc),
        end_time=datetime(2030, 3, 1, 22, 0, tzinfo=timezone.utc),
        host=UserSummary(id=HOST_ID, name="Hope Host"),
        attendees=[],
        attendee_count=0,
        is_upcoming=True,
    )


def empty_page():
    return EventListResponse(
        events=[],
        pagination=PaginationResponse(page=1, limit=10, total=0, total_pages=0,
                                      has_next=False, has_prev=False),
    )


@pytest.fixture
def use_cases():
    return {
        use_case: AsyncMock(spec=use_case)
        for use_case in (
            CreateEventUseCase,
            GetEventUseCase,
            ListEventsUseCase,
            AttendEventUseCase,
            LeaveEventUseCase,
        )
    }


@pytest.fixture
def client(api_client, use_cases):
    with api_client("events_controller", use_cases) as c:
        yield c


class TestEventsAPI:
    """Tests for /api/v1/events endpoints"""

    def test_create_event(self, client, use_cases):
        use_cases[CreateEventUseCase].execute.return_value = event_response()

        response = client.post(
            "/api/v1/events",
            json={
                "title": "Hack Night",
                "description": "Bring a laptop",
                "startTime": "2030-03-01T18:00:00Z",
                "endTime": "2030-03-01T22:00:00Z",
                "host": HOST_ID,
                "locationCoords": {"type": "Point", "coordinates": [-122.4, 37.8]},
            },
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["host"]["name"] == "Hope Host"
        assert data["locationCoords"]["coordinates"] == [-122.4, 37.8]
        assert data["isUpcoming"] is True
        request = use_cases[CreateEventUseCase].execute.call_args.args[0]
        assert request.start_time == datetime(2030, 3, 1, 18, 0, tzinfo=timezone.utc)

    def test_create_event_missing_fields(self, client):
        response = client.post("/api/v1/events", json={"title": "Hack Night"})

        assert response.status_code == 400
        fields = {error["field"] for error in response.json()["errors"]}
        assert {"description", "startTime", "endTime", "host"} <= fields

    def test_list_passes_filters(self, client, use_cases):
        use_cases[ListEventsUseCase].execute.return_value = empty_page()

        response = client.get(
            "/api/v1/events",
            params={"hostId": HOST_ID, "attendeeId": USER_ID, "startAfter": "2030-01-01T00:00:00Z"},
        )

        assert response.status_code == 200
        kwargs = use_cases[ListEventsUseCase].execute.call_args.kwargs
        assert kwargs["host_id"] == HOST_ID
        assert kwargs["attendee_id"] == USER_ID
        assert kwargs["start_after"] == datetime(2030, 1, 1, tzinfo=timezone.utc)
        assert kwargs["upcoming"] is False

    def test_upcoming_route(self, client, use_cases):
        use_cases[ListEventsUseCase].execute.return_value = empty_page()

        response = client.get("/api/v1/events/upcoming")

        assert response.status_code == 200
        use_cases[ListEventsUseCase].execute.assert_awaited_once_with(page=1, limit=10, upcoming=True)
        use_cases[GetEventUseCase].execute.assert_not_called()

    def test_get_event_not_found(self, client, use_cases):
        use_cases[GetEventUseCase].execute.side_effect = NotFoundError("Event not found")

        response = client.get(f"/api/v1/events/{EVENT_ID}")

        assert response.status_code == 404
        assert response.json()["message"] == "Event not found"

    def test_attend(self, client, use_cases):
        use_cases[AttendEventUseCase].execute.return_value = AttendanceResponse(
            attendee_count=1, is_attending=True
        )

        response = client.post(f"/api/v1/events/{EVENT_ID}/attend", json={"userId": USER_ID})

        assert response.status_code == 200
        assert response.json()["data"] == {"attendeeCount": 1, "isAttending": True}
        use_cases[AttendEventUseCase].execute.assert_awaited_once_with(EVENT_ID, USER_ID)

    def test_attend_twice_conflicts(self, client, use_cases):
        use_cases[AttendEventUseCase].execute.side_effect = ConflictError(
            "User is already attending this event"
        )

        response = client.post(f"/api/v1/events/{EVENT_ID}/attend", json={"userId": USER_ID})

        assert response.status_code == 409
        assert response.json()["success"] is False

    def test_attend_requires_user_id(self, client, use_cases):
        response = client.post(f"/api/v1/events/{EVENT_ID}/attend", json={})

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "userId"

    def test_leave_with_body(self, client, use_cases):
        use_cases[LeaveEventUseCase].execute.return_value = AttendanceResponse(
            attendee_count=0, is_attending=False
        )

        response = client.request(
            "DELETE", f"/api/v1/events/{EVENT_ID}/attend", json={"userId": USER_ID}
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Successfully left event"
