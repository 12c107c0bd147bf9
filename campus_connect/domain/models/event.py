# Standard library imports
import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

# Local application imports
from ..constants import EventFields
from ..exceptions import ValidationError
from ..validation import FieldValidator
from ...utils.datetime_utils import ensure_utc


TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 2000
LOCATION_NAME_MAX_LENGTH = 200


@dataclass(frozen=True)
class GeoPoint:
    """Geographic point stored as GeoJSON [longitude, latitude]"""
    longitude: float
    latitude: float


@dataclass
class Event:
    """
    Pure domain model for Event entity.

    The host is implicitly attending and is never part of ``attendee_ids``;
    ``attendee_ids`` preserves join order and holds no duplicates.
    """
    id: Optional[str]
    title: str
    description: str
    start_time: datetime
    end_time: datetime
    host_id: str
    location_name: Optional[str] = None
    location: Optional[GeoPoint] = None
    attendee_ids: List[str] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if isinstance(self.title, str):
            self.title = self.title.strip()
        if isinstance(self.location_name, str):
            self.location_name = self.location_name.strip() or None
        if isinstance(self.start_time, datetime):
            self.start_time = ensure_utc(self.start_time)
        if isinstance(self.end_time, datetime):
            self.end_time = ensure_utc(self.end_time)

        validator = FieldValidator()
        validator.text(EventFields.TITLE, self.title, min_length=TITLE_MIN_LENGTH,
                       max_length=TITLE_MAX_LENGTH, required=True, label="Title")
        validator.text(EventFields.DESCRIPTION, self.description,
                       max_length=DESCRIPTION_MAX_LENGTH, required=True, label="Description")
        validator.text(EventFields.LOCATION_NAME, self.location_name,
                       max_length=LOCATION_NAME_MAX_LENGTH, label="Location name")
        if self.location is not None:
            _validate_location(validator, self.location)

        if not isinstance(self.start_time, datetime):
            validator.add(EventFields.START_TIME, "Start time is required", self.start_time)
        if not isinstance(self.end_time, datetime):
            validator.add(EventFields.END_TIME, "End time is required", self.end_time)
        if (
            isinstance(self.start_time, datetime)
            and isinstance(self.end_time, datetime)
            and self.end_time <= self.start_time
        ):
            validator.add(EventFields.END_TIME, "End time must be after start time",
                          self.end_time.isoformat())

        validator.reference(EventFields.HOST, self.host_id)
        validator.references(EventFields.ATTENDEES, self.attendee_ids)
        if self.host_id and self.host_id in self.attendee_ids:
            validator.add(EventFields.ATTENDEES,
                          "Event host is automatically attending and cannot be an attendee",
                          self.host_id)
        validator.raise_if_invalid()

    @property
    def attendee_count(self) -> int:
        """Number of attendees, host excluded"""
        return len(self.attendee_ids)

    def is_attending(self, user_id: str) -> bool:
        return user_id in self.attendee_ids

    def has_started(self, now: datetime) -> bool:
        return self.start_time <= now

    def is_upcoming(self, now: datetime) -> bool:
        return self.start_time > now


def _validate_location(validator: FieldValidator, location: GeoPoint) -> None:
    longitude, latitude = location.longitude, location.latitude
    numeric = all(
        isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)
        for value in (longitude, latitude)
    )
    if not numeric or not (-180 <= longitude <= 180 and -90 <= latitude <= 90):
        validator.add(
            EventFields.LOCATION_COORDS,
            "Invalid coordinates format [longitude, latitude]",
            [longitude, latitude],
        )


def ensure_starts_in_future(event: Event, now: datetime) -> None:
    """
    Creation-only rule: a new event must start strictly after ``now``.

    Existing events are not re-checked on update, so a past event stays editable.

    Raises:
        ValidationError: If the start time is not in the future
    """
    if event.start_time <= now:
        raise ValidationError.for_field(
            EventFields.START_TIME,
            "Start time must be in the future",
            event.start_time.isoformat(),
        )
