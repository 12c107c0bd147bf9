# Standard library imports
from typing import Any, Generic, List, Optional, TypeVar

# External package imports
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


T = TypeVar("T")


class CamelModel(BaseModel):
    """Base DTO: snake_case attributes, camelCase JSON (either accepted on input)"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FieldErrorResponse(CamelModel):
    """One field-level validation failure"""
    field: str
    message: str
    value: Optional[Any] = None


class ApiResponse(CamelModel, Generic[T]):
    """Uniform envelope wrapping every response body"""
    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None
    errors: Optional[List[FieldErrorResponse]] = None


class PaginationResponse(CamelModel):
    """DTO for pagination summary"""
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


class UserSummary(CamelModel):
    """Public projection of a referenced user"""
    id: str
    name: str
    profile_picture_url: Optional[str] = None
    major: Optional[str] = None
    email: Optional[str] = None


class UserActionRequest(CamelModel):
    """DTO for relationship operations; the acting user is named in the body"""
    user_id: str
