from datetime import datetime
from typing import List, Optional
from pydantic import Field
from .common_dto import CamelModel, PaginationResponse, UserSummary


class ClubCreateRequest(CamelModel):
    """DTO for club creation request"""
    name: str
    description: Optional[str] = None
    members: List[str] = Field(default_factory=list)
    officers: List[str] = Field(default_factory=list)


class ClubUpdateRequest(CamelModel):
    """DTO for club update; only the fields sent are changed"""
    name: Optional[str] = None
    description: Optional[str] = None


class ClubResponse(CamelModel):
    """DTO for club response with members and officers expanded"""
    id: str
    name: str
    description: Optional[str] = None
    members: List[UserSummary] = Field(default_factory=list)
    officers: List[UserSummary] = Field(default_factory=list)
    member_count: int
    officer_count: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ClubListResponse(CamelModel):
    clubs: List[ClubResponse]
    pagination: PaginationResponse


class ClubMembersResponse(CamelModel):
    members: List[UserSummary]
    member_count: int


class ClubOfficersResponse(CamelModel):
    officers: List[UserSummary]
    officer_count: int


class MembershipResponse(CamelModel):
    member_count: int
    is_member: bool


class OfficerResponse(CamelModel):
    officer_count: int
    member_count: int
    is_officer: bool
