# Standard library imports
import os
from typing import Final, List, Optional


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "campus_connect")
        self.mongo_max_pool_size: Final[int] = int(os.getenv("MONGO_MAX_POOL_SIZE", "10"))
        self.mongo_server_selection_timeout_ms: Final[int] = int(
            os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "5000")
        )
        self.mongo_socket_timeout_ms: Final[int] = int(
            os.getenv("MONGO_SOCKET_TIMEOUT_MS", "45000")
        )

        # Runtime Configuration
        self.environment: Final[str] = os.getenv("APP_ENV", "production").strip().lower()
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]

        # Media Upload Configuration (Cloudinary signed uploads)
        self.cloudinary_cloud_name: Final[str] = os.getenv("CLOUDINARY_CLOUD_NAME", "")
        self.cloudinary_api_key: Final[str] = os.getenv("CLOUDINARY_API_KEY", "")
        self.cloudinary_api_secret: Final[str] = os.getenv("CLOUDINARY_API_SECRET", "")
        self.upload_folder: Final[str] = os.getenv("UPLOAD_FOLDER", "campus_connect")
        self.upload_transformation: Final[str] = os.getenv(
            "UPLOAD_TRANSFORMATION",
            "w_800,q_auto,f_auto"
        )

    @property
    def is_development(self) -> bool:
        """Error details are only exposed to clients in development mode"""
        return self.environment == "development"


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
