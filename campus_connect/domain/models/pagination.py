# Standard library imports
import math
from dataclasses import dataclass

# Local application imports
from ..exceptions import ValidationError


DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass(frozen=True)
class PageRequest:
    """1-based page number and page size requested by a caller"""
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValidationError.for_field("page", "Page must be a positive integer", self.page)
        if self.limit < 1 or self.limit > MAX_LIMIT:
            raise ValidationError.for_field(
                "limit", f"Limit must be between 1 and {MAX_LIMIT}", self.limit
            )

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class PageInfo:
    """Pagination summary returned alongside every list"""
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def from_total(cls, request: PageRequest, total: int) -> "PageInfo":
        total_pages = math.ceil(total / request.limit)
        return cls(
            page=request.page,
            limit=request.limit,
            total=total,
            total_pages=total_pages,
            has_next=request.page < total_pages,
            has_prev=request.page > 1,
        )
