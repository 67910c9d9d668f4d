# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.error_handlers import register_error_handlers
from .api.v1 import auth_router, users_router, blogs_router, health_router
from .core.config import get_settings
from .infrastructure.db.mongo_connection import ensure_indexes, close_connection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Ensures MongoDB indexes on startup and closes the shared client on shutdown.
    """
    try:
        await ensure_indexes()
    except Exception as e:
        # Don't fail app startup if MongoDB is unavailable; requests will surface the error
        logger.error(f"Failed to ensure MongoDB indexes: {e}", exc_info=True)

    yield

    close_connection()
    logger.info("Application shutdown complete")


def configure_logging(level: str) -> None:
    """Configure root logging once for the process"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] [%(name)s] %(message)s",
    )


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Global error handlers
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="Bloglist API",
        version="1.0.0",
        description="Shared blogging platform backend",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(application)

    # Register API routers
    application.include_router(auth_router, prefix="/api/login")
    application.include_router(users_router, prefix="/api/users")
    application.include_router(blogs_router, prefix="/api/blogs")
    application.include_router(health_router)

    return application


app = create_application()
