# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

# Local application imports
from ..constants import ClubFields
from ..validation import FieldValidator


NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 1000


@dataclass
class Club:
    """
    Pure domain model for Club entity.

    Invariant: every officer is also a member. Club names are unique.
    """
    id: Optional[str]
    name: str
    description: Optional[str] = None
    member_ids: List[str] = field(default_factory=list)
    officer_ids: List[str] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if isinstance(self.name, str):
            self.name = self.name.strip()
        if isinstance(self.description, str):
            self.description = self.description.strip() or None

        validator = FieldValidator()
        validator.text(ClubFields.NAME, self.name, min_length=NAME_MIN_LENGTH,
                       max_length=NAME_MAX_LENGTH, required=True, label="Club name")
        validator.text(ClubFields.DESCRIPTION, self.description,
                       max_length=DESCRIPTION_MAX_LENGTH, label="Description")
        validator.references(ClubFields.MEMBERS, self.member_ids)
        validator.references(ClubFields.OFFICERS, self.officer_ids)

        non_members = [officer for officer in self.officer_ids if officer not in self.member_ids]
        if non_members:
            validator.add(ClubFields.OFFICERS, "Officers must be members of the club", non_members)
        validator.raise_if_invalid()

    @property
    def member_count(self) -> int:
        return len(self.member_ids)

    @property
    def officer_count(self) -> int:
        return len(self.officer_ids)

    def is_member(self, user_id: str) -> bool:
        return user_id in self.member_ids

    def is_officer(self, user_id: str) -> bool:
        return user_id in self.officer_ids
