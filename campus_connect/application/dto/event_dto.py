from datetime import datetime
from typing import List, Optional
from pydantic import Field
from .common_dto import CamelModel, PaginationResponse, UserSummary


class GeoPointSchema(CamelModel):
    """GeoJSON point, coordinates as [longitude, latitude]"""
    type: str = "Point"
    coordinates: List[float] = Field(default_factory=list)


class EventCreateRequest(CamelModel):
    """DTO for event creation request"""
    title: str
    description: str
    start_time: datetime
    end_time: datetime
    host: str
    location_name: Optional[str] = None
    location_coords: Optional[GeoPointSchema] = None


class EventUpdateRequest(CamelModel):
    """DTO for event update; only the fields sent are changed"""
    title: Optional[str] = None
    description: Optional[str] = None
    location_name: Optional[str] = None
    location_coords: Optional[GeoPointSchema] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None


class EventResponse(CamelModel):
    """DTO for event response with host and attendees expanded"""
    id: str
    title: str
    description: str
    location_name: Optional[str] = None
    location_coords: Optional[GeoPointSchema] = None
    start_time: datetime
    end_time: datetime
    host: Optional[UserSummary] = None
    attendees: List[UserSummary] = Field(default_factory=list)
    attendee_count: int
    is_upcoming: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class EventListResponse(CamelModel):
    events: List[EventResponse]
    pagination: PaginationResponse


class EventAttendeesResponse(CamelModel):
    host: Optional[UserSummary] = None
    attendees: List[UserSummary]
    attendee_count: int


class AttendanceResponse(CamelModel):
    attendee_count: int
    is_attending: bool
