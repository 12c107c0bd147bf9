"""Query filters for the list endpoints of each resource"""

# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

# Local application imports
from ..validation import FieldValidator, normalize_search
from .listing import ListingCategory


@dataclass(frozen=True)
class UserFilter:
    search: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "search", normalize_search(self.search))


@dataclass(frozen=True)
class EventFilter:
    search: Optional[str] = None
    start_after: Optional[datetime] = None
    start_before: Optional[datetime] = None
    host_id: Optional[str] = None
    attendee_id: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "search", normalize_search(self.search))
        validator = FieldValidator()
        validator.reference("hostId", self.host_id, required=False)
        validator.reference("attendeeId", self.attendee_id, required=False)
        if self.start_after and self.start_before and self.start_after >= self.start_before:
            validator.add("startBefore", "startBefore must be after startAfter",
                          self.start_before.isoformat())
        validator.raise_if_invalid()


@dataclass(frozen=True)
class ClubFilter:
    search: Optional[str] = None
    member_id: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "search", normalize_search(self.search))
        validator = FieldValidator()
        validator.reference("memberId", self.member_id, required=False)
        validator.raise_if_invalid()


@dataclass(frozen=True)
class ListingFilter:
    """Listings default to available-only"""
    category: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    available_only: bool = True
    seller_id: Optional[str] = None
    search: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "search", normalize_search(self.search))
        validator = FieldValidator()
        if self.category is not None:
            validator.one_of("category", self.category, ListingCategory.values())
        validator.number("minPrice", self.min_price, minimum=0, required=False)
        validator.number("maxPrice", self.max_price, minimum=0, required=False)
        if (
            self.min_price is not None
            and self.max_price is not None
            and not validator.errors
            and self.min_price > self.max_price
        ):
            validator.add("maxPrice", "maxPrice must be greater than or equal to minPrice",
                          self.max_price)
        validator.reference("sellerId", self.seller_id, required=False)
        validator.raise_if_invalid()


@dataclass(frozen=True)
class PostFilter:
    search: Optional[str] = None
    author_id: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "search", normalize_search(self.search))
        validator = FieldValidator()
        validator.reference("authorId", self.author_id, required=False)
        validator.raise_if_invalid()
