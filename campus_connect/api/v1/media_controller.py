# External package imports
from fastapi import APIRouter

# Local application imports
from ...application.dto.common_dto import ApiResponse
from ...application.dto.media_dto import SignUploadResponse
from ...application.use_cases.media import SignUploadUseCase
from ...di.container import get_container


router = APIRouter(tags=["media"])


@router.post("/sign-upload", response_model=ApiResponse[SignUploadResponse])
async def sign_upload() -> ApiResponse[SignUploadResponse]:
    """
    Issue a signature the client uses to upload an image directly to the media host

    Returns:
        Signature, timestamp and the parameters that were signed
    """
    container = get_container()
    sign_upload_use_case = container.get(SignUploadUseCase)

    signed = await sign_upload_use_case.execute()
    return ApiResponse(data=signed)
