from .users_controller import router as users_router
from .events_controller import router as events_router
from .clubs_controller import router as clubs_router
from .listings_controller import router as listings_router
from .posts_controller import router as posts_router
from .media_controller import router as media_router
from .system_controller import router as system_router
from .error_handlers import register_exception_handlers


__all__ = [
    "users_router",
    "events_router",
    "clubs_router",
    "listings_router",
    "posts_router",
    "media_router",
    "system_router",
    "register_exception_handlers",
]
