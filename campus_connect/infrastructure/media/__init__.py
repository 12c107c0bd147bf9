from .cloudinary_signer import CloudinaryUploadSigner, UploadSignature

__all__ = ["CloudinaryUploadSigner", "UploadSignature"]
