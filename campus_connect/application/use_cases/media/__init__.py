from .sign_upload import SignUploadUseCase

__all__ = ["SignUploadUseCase"]
