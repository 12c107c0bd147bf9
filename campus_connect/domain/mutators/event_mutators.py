# Standard library imports
from dataclasses import replace
from datetime import datetime
from typing import Any, Dict, Mapping

# Local application imports
from ..constants import EventFields
from ..exceptions import ConflictError, ValidationError
from ..models.event import Event
from ..models.mutation import AddToSet, Equals, Mutation, NotContains, Pull
from .field_updates import update_fields


def attend_event(event: Event, user_id: str, now: datetime) -> Mutation[Event]:
    """
    Add a user to the event's attendees.

    Not idempotent: a second attend by the same user is a conflict.

    Raises:
        ValidationError: If the event already started or the user is the host
        ConflictError: If the user is already attending
    """
    if event.has_started(now):
        raise ValidationError.for_field(
            EventFields.START_TIME,
            "Cannot attend event that has already started",
            event.start_time.isoformat(),
        )
    if user_id == event.host_id:
        raise ValidationError.for_field("userId", "Event host is automatically attending", user_id)

    already_attending = ConflictError("User is already attending this event")
    if event.is_attending(user_id):
        raise already_attending

    return Mutation(
        entity=replace(event, attendee_ids=[*event.attendee_ids, user_id]),
        effects=[AddToSet(EventFields.ATTENDEES, user_id)],
        guards=[NotContains(EventFields.ATTENDEES, user_id)],
        guard_error=already_attending,
    )


def leave_event(event: Event, user_id: str) -> Mutation[Event]:
    """Remove a user from the attendees; removing an absent user is a no-op"""
    if not event.is_attending(user_id):
        return Mutation(entity=event)

    return Mutation(
        entity=replace(
            event,
            attendee_ids=[attendee for attendee in event.attendee_ids if attendee != user_id],
        ),
        effects=[Pull(EventFields.ATTENDEES, user_id)],
    )


def update_event(event: Event, changes: Dict[str, Any], field_names: Mapping[str, str]) -> Mutation[Event]:
    """
    Plain field update of an event.

    When only one of the two times changes, end-after-start was checked against
    the stored value of the other, so the write is guarded on that value still
    being stored.

    Raises:
        ValidationError: If nothing allow-listed is changed or the times are out of order
    """
    mutation = update_fields(event, changes, field_names)

    touches_start = "start_time" in changes
    touches_end = "end_time" in changes
    if mutation.changed and touches_start != touches_end:
        if touches_start:
            mutation.guards.append(Equals(EventFields.END_TIME, event.end_time))
        else:
            mutation.guards.append(Equals(EventFields.START_TIME, event.start_time))
        mutation.guard_error = ConflictError("Event times were changed concurrently, please retry")
    return mutation
