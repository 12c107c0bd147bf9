# Standard library imports
from typing import Any, Dict

# External package imports
from fastapi import APIRouter

# Local application imports
from ...application.dto.common_dto import ApiResponse
from ...core.config import get_settings
from ...utils.datetime_utils import to_iso, utc_now


router = APIRouter(tags=["system"])

SERVICE_NAME = "campus-connect"


def _service_status() -> Dict[str, Any]:
    settings = get_settings()
    return {
        "service": SERVICE_NAME,
        "environment": settings.environment,
        "timestamp": to_iso(utc_now()),
    }


@router.get("/status", response_model=ApiResponse[Dict[str, Any]])
async def get_status() -> ApiResponse[Dict[str, Any]]:
    return ApiResponse(message="Server is running", data=_service_status())


@router.get("/health", response_model=ApiResponse[Dict[str, Any]])
async def get_health() -> ApiResponse[Dict[str, Any]]:
    return ApiResponse(message="OK", data=_service_status())
