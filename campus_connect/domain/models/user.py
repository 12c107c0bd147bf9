# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

# Local application imports
from ..constants import UserFields
from ..validation import FieldValidator


NAME_MAX_LENGTH = 100
BIO_MAX_LENGTH = 500
MAJOR_MAX_LENGTH = 100
NOTIFICATION_TOKEN_MAX_LENGTH = 100


def _clean(value: Optional[str]) -> Optional[str]:
    return value.strip() if isinstance(value, str) else value


@dataclass
class User:
    """
    Pure domain model for User entity - no external dependencies.

    Email is stored lowercase and is unique across users. Optional text
    fields are trimmed before validation.
    """
    id: Optional[str]
    name: str
    email: str
    bio: Optional[str] = None
    major: Optional[str] = None
    profile_picture_url: Optional[str] = None
    notification_token: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        self.name = _clean(self.name)
        self.email = _clean(self.email)
        if isinstance(self.email, str):
            self.email = self.email.lower()
        self.major = _clean(self.major) or None
        self.notification_token = _clean(self.notification_token) or None

        validator = FieldValidator()
        validator.text(UserFields.NAME, self.name, min_length=1, max_length=NAME_MAX_LENGTH,
                       required=True, label="Name")
        validator.email(UserFields.EMAIL, self.email)
        validator.text(UserFields.BIO, self.bio, max_length=BIO_MAX_LENGTH, label="Bio")
        validator.text(UserFields.MAJOR, self.major, max_length=MAJOR_MAX_LENGTH, label="Major")
        validator.image_url(UserFields.PROFILE_PICTURE_URL, self.profile_picture_url)
        validator.text(UserFields.NOTIFICATION_TOKEN, self.notification_token,
                       max_length=NOTIFICATION_TOKEN_MAX_LENGTH, label="Notification token")
        validator.raise_if_invalid()
