# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import (
    clubs_router,
    events_router,
    listings_router,
    media_router,
    posts_router,
    register_exception_handlers,
    system_router,
    users_router,
)
from .core.config import get_settings
from .infrastructure.db.mongo_connection import close_connection, ensure_indexes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Ensures collection indexes on startup and closes the MongoDB client on shutdown.
    """
    try:
        await ensure_indexes()
        logger.info("MongoDB indexes ensured during application startup")
    except Exception as e:
        # Don't fail app startup if MongoDB is unreachable; requests will report it
        logger.error(f"Failed to ensure MongoDB indexes: {e}", exc_info=True)

    yield

    close_connection()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging and CORS configuration
    - Exception handlers and API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    application = FastAPI(
        title="Campus Connect API",
        version="1.0.0",
        description="Campus social and marketplace backend",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    # Register API routers
    application.include_router(system_router, prefix="/api/v1")
    application.include_router(users_router, prefix="/api/v1/users")
    application.include_router(events_router, prefix="/api/v1/events")
    application.include_router(clubs_router, prefix="/api/v1/clubs")
    application.include_router(listings_router, prefix="/api/v1/listings")
    application.include_router(posts_router, prefix="/api/v1/posts")
    application.include_router(media_router, prefix="/api/v1/media")

    return application


# Create application instance
app = create_application()
