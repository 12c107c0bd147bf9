# Standard library imports
import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

# External package imports
import cloudinary.utils

# Local application imports
from ...core.config import Settings, get_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadSignature:
    """Signed parameters a client sends with a direct upload"""
    signature: str
    timestamp: int
    api_key: str
    cloud_name: str
    folder: str
    transformation: str


class CloudinaryUploadSigner:
    """
    Issues signed upload authorizations for the media host.

    Image bytes never pass through this service: the client uploads directly
    with the returned signature, which is valid for a short window around its
    timestamp.
    """

    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        folder: str,
        transformation: str,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.folder = folder
        self.transformation = transformation
        self.clock = clock or time.time

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "CloudinaryUploadSigner":
        settings = settings or get_settings()
        return cls(
            cloud_name=settings.cloudinary_cloud_name,
            api_key=settings.cloudinary_api_key,
            api_secret=settings.cloudinary_api_secret,
            folder=settings.upload_folder,
            transformation=settings.upload_transformation,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.cloud_name and self.api_key and self.api_secret)

    def create_signature(self) -> UploadSignature:
        """
        Sign a new upload

        Raises:
            RuntimeError: If the media host credentials are not configured
        """
        if not self.is_configured:
            logger.error("Upload signing requested but Cloudinary credentials are not configured")
            raise RuntimeError("Media upload is not configured")

        timestamp = int(self.clock())
        params = {
            "folder": self.folder,
            "timestamp": timestamp,
            "transformation": self.transformation,
        }
        return UploadSignature(
            signature=cloudinary.utils.api_sign_request(params, self.api_secret),
            timestamp=timestamp,
            api_key=self.api_key,
            cloud_name=self.cloud_name,
            folder=self.folder,
            transformation=self.transformation,
        )
