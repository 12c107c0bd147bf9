# Standard library imports
import logging

# Local application imports
from ....infrastructure.media.cloudinary_signer import CloudinaryUploadSigner
from ...dto.media_dto import SignUploadResponse

logger = logging.getLogger(__name__)


class SignUploadUseCase:
    """Use case for issuing a signed direct-upload authorization"""

    def __init__(self, upload_signer: CloudinaryUploadSigner) -> None:
        self.upload_signer = upload_signer

    async def execute(self) -> SignUploadResponse:
        signed = self.upload_signer.create_signature()
        logger.debug(f"Issued upload signature for timestamp {signed.timestamp}")
        return SignUploadResponse(
            signature=signed.signature,
            timestamp=signed.timestamp,
            api_key=signed.api_key,
            cloud_name=signed.cloud_name,
            folder=signed.folder,
            transformation=signed.transformation,
        )
