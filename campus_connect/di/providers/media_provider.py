from typing import TYPE_CHECKING
from ...application.use_cases.media import SignUploadUseCase
from ...infrastructure.media.cloudinary_signer import CloudinaryUploadSigner

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class MediaProvider:
    """Media provider - registers the upload signer and its use case"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        # Register CloudinaryUploadSigner as singleton (shared across all requests)
        container.register_singleton(CloudinaryUploadSigner, CloudinaryUploadSigner.from_settings())

        container.register_factory(
            SignUploadUseCase,
            lambda: SignUploadUseCase(upload_signer=container.get(CloudinaryUploadSigner))
        )
