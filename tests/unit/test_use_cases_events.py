"""
Unit tests for event use cases, driven by in-memory repositories.
"""
from datetime import timedelta

import pytest

from campus_connect.application.dto.event_dto import (
    EventCreateRequest,
    EventUpdateRequest,
    GeoPointSchema,
)
from campus_connect.application.use_cases.event import (
    AttendEventUseCase,
    CreateEventUseCase,
    DeleteEventUseCase,
    GetEventUseCase,
    LeaveEventUseCase,
    ListEventAttendeesUseCase,
    ListEventsUseCase,
    UpdateEventUseCase,
)
from campus_connect.domain.exceptions import ConflictError, NotFoundError, ValidationError
from campus_connect.domain.models import Event, User
from campus_connect.utils.datetime_utils import utc_now

UNKNOWN_ID = "64b7f0c2a1b2c3d4e5f6ffff"


@pytest.fixture
def host(user_repo):
    return user_repo.add(User(id=None, name="Hana Host", email="hana@example.com"))


@pytest.fixture
def alice(user_repo):
    return user_repo.add(User(id=None, name="Alice", email="alice@example.com"))


@pytest.fixture
def upcoming_event(event_repo, host):
    start = utc_now() + timedelta(days=3)
    return event_repo.add(Event(
        id=None,
        title="Hack Night",
        description="Bring a laptop",
        start_time=start,
        end_time=start + timedelta(hours=3),
        host_id=host.id,
        location_name="Library",
    ))


@pytest.fixture
def past_event(event_repo, host):
    start = utc_now() - timedelta(days=3)
    return event_repo.add(Event(
        id=None,
        title="Welcome Week",
        description="Already happened",
        start_time=start,
        end_time=start + timedelta(hours=3),
        host_id=host.id,
    ))


def create_request(host_id, **overrides) -> EventCreateRequest:
    start = utc_now() + timedelta(days=1)
    values = dict(
        title="Board games",
        description="Bring your favourite",
        start_time=start,
        end_time=start + timedelta(hours=2),
        host=host_id,
    )
    values.update(overrides)
    return EventCreateRequest(**values)


class TestCreateEventUseCase:
    """Tests for CreateEventUseCase"""

    @pytest.mark.asyncio
    async def test_create_expands_host(self, event_repo, user_repo, host):
        use_case = CreateEventUseCase(event_repo, user_repo)
        result = await use_case.execute(create_request(
            host.id,
            location_coords=GeoPointSchema(coordinates=[-122.4, 37.8]),
        ))
        assert result.host.name == "Hana Host"
        assert result.attendee_count == 0
        assert result.is_upcoming is True
        assert result.location_coords.coordinates == [-122.4, 37.8]

    @pytest.mark.asyncio
    async def test_start_in_past_rejected(self, event_repo, user_repo, host):
        use_case = CreateEventUseCase(event_repo, user_repo)
        start = utc_now() - timedelta(minutes=5)
        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(create_request(
                host.id, start_time=start, end_time=start + timedelta(hours=1)
            ))
        assert exc_info.value.errors[0].field == "startTime"
        assert event_repo.items == {}

    @pytest.mark.asyncio
    async def test_unknown_host_rejected(self, event_repo, user_repo):
        use_case = CreateEventUseCase(event_repo, user_repo)
        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(create_request(UNKNOWN_ID))
        assert exc_info.value.errors[0].field == "host"
        assert exc_info.value.errors[0].message == "Referenced user not found"

    @pytest.mark.asyncio
    async def test_malformed_coordinates(self, event_repo, user_repo, host):
        use_case = CreateEventUseCase(event_repo, user_repo)
        with pytest.raises(ValidationError):
            await use_case.execute(create_request(
                host.id, location_coords=GeoPointSchema(coordinates=[1.0])
            ))


class TestAttendance:
    """Tests for AttendEventUseCase and LeaveEventUseCase"""

    @pytest.mark.asyncio
    async def test_attend_then_conflict(self, event_repo, user_repo, upcoming_event, alice):
        use_case = AttendEventUseCase(event_repo, user_repo)

        result = await use_case.execute(upcoming_event.id, alice.id)
        assert result.attendee_count == 1
        assert result.is_attending is True

        with pytest.raises(ConflictError, match="already attending"):
            await use_case.execute(upcoming_event.id, alice.id)

    @pytest.mark.asyncio
    async def test_host_cannot_attend(self, event_repo, user_repo, upcoming_event, host):
        use_case = AttendEventUseCase(event_repo, user_repo)
        with pytest.raises(ValidationError, match="automatically attending"):
            await use_case.execute(upcoming_event.id, host.id)

    @pytest.mark.asyncio
    async def test_started_event_rejected(self, event_repo, user_repo, past_event, alice):
        use_case = AttendEventUseCase(event_repo, user_repo)
        with pytest.raises(ValidationError, match="already started"):
            await use_case.execute(past_event.id, alice.id)

    @pytest.mark.asyncio
    async def test_unknown_user_and_event(self, event_repo, user_repo, upcoming_event, alice):
        use_case = AttendEventUseCase(event_repo, user_repo)
        with pytest.raises(NotFoundError, match="User not found"):
            await use_case.execute(upcoming_event.id, UNKNOWN_ID)
        with pytest.raises(NotFoundError, match="Event not found"):
            await use_case.execute(UNKNOWN_ID, alice.id)

    @pytest.mark.asyncio
    async def test_malformed_user_id(self, event_repo, user_repo, upcoming_event):
        use_case = AttendEventUseCase(event_repo, user_repo)
        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(upcoming_event.id, "abc")
        assert exc_info.value.errors[0].field == "userId"

    @pytest.mark.asyncio
    async def test_leave_is_idempotent(self, event_repo, user_repo, upcoming_event, alice):
        await AttendEventUseCase(event_repo, user_repo).execute(upcoming_event.id, alice.id)
        use_case = LeaveEventUseCase(event_repo, user_repo)

        first = await use_case.execute(upcoming_event.id, alice.id)
        second = await use_case.execute(upcoming_event.id, alice.id)

        assert first.attendee_count == 0
        assert second.attendee_count == 0
        assert second.is_attending is False


class TestReadEvents:
    """Tests for GetEvent, ListEvents and ListEventAttendees"""

    @pytest.mark.asyncio
    async def test_deleted_attendee_omitted_but_counted(self, event_repo, user_repo, upcoming_event, alice):
        await AttendEventUseCase(event_repo, user_repo).execute(upcoming_event.id, alice.id)
        await user_repo.delete(alice.id)

        result = await GetEventUseCase(event_repo, user_repo).execute(upcoming_event.id)

        assert result.attendees == []
        assert result.attendee_count == 1
        assert result.host.name == "Hana Host"

    @pytest.mark.asyncio
    async def test_deleted_host_expands_to_none(self, event_repo, user_repo, upcoming_event, host):
        await user_repo.delete(host.id)
        result = await ListEventAttendeesUseCase(event_repo, user_repo).execute(upcoming_event.id)
        assert result.host is None

    @pytest.mark.asyncio
    async def test_upcoming_filter(self, event_repo, user_repo, upcoming_event, past_event):
        use_case = ListEventsUseCase(event_repo, user_repo)

        everything = await use_case.execute()
        upcoming = await use_case.execute(upcoming=True)

        assert [event.title for event in everything.events] == ["Welcome Week", "Hack Night"]
        assert [event.title for event in upcoming.events] == ["Hack Night"]
        assert upcoming.pagination.total == 1

    @pytest.mark.asyncio
    async def test_attendee_filter(self, event_repo, user_repo, upcoming_event, past_event, alice):
        await AttendEventUseCase(event_repo, user_repo).execute(upcoming_event.id, alice.id)
        result = await ListEventsUseCase(event_repo, user_repo).execute(attendee_id=alice.id)
        assert [event.id for event in result.events] == [upcoming_event.id]


class TestUpdateAndDeleteEvent:
    """Tests for UpdateEventUseCase and DeleteEventUseCase"""

    @pytest.mark.asyncio
    async def test_end_checked_against_stored_start(self, event_repo, user_repo, upcoming_event):
        use_case = UpdateEventUseCase(event_repo, user_repo)
        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                upcoming_event.id,
                EventUpdateRequest(end_time=upcoming_event.start_time - timedelta(hours=1)),
            )
        assert exc_info.value.errors[0].field == "endTime"

    @pytest.mark.asyncio
    async def test_past_event_stays_editable(self, event_repo, user_repo, past_event):
        use_case = UpdateEventUseCase(event_repo, user_repo)
        result = await use_case.execute(
            past_event.id,
            EventUpdateRequest(
                title="Welcome Week recap",
                location_coords=GeoPointSchema(coordinates=[2.35, 48.85]),
            ),
        )
        assert result.title == "Welcome Week recap"
        assert result.location_coords.coordinates == [2.35, 48.85]
        assert result.is_upcoming is False

    @pytest.mark.asyncio
    async def test_delete(self, event_repo, upcoming_event):
        use_case = DeleteEventUseCase(event_repo)
        await use_case.execute(upcoming_event.id)
        with pytest.raises(NotFoundError):
            await use_case.execute(upcoming_event.id)
