from .auth_controller import router as auth_router
from .users_controller import router as users_router
from .blogs_controller import router as blogs_router
from .health import router as health_router


__all__ = ["auth_router", "users_router", "blogs_router", "health_router"]
