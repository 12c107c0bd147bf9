from .common_dto import CamelModel


class SignUploadResponse(CamelModel):
    """Short-lived authorization for a direct client upload to the media host"""
    signature: str
    timestamp: int
    api_key: str
    cloud_name: str
    folder: str
    transformation: str
