"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from .dependencies import get_container
from .errors import register_exception_handlers
from .routes import health
from modules.activity.routes import router as activity_router
from modules.auth.routes import router as auth_router
from modules.feedback.routes import router as feedback_router
from modules.notifications.routes import router as notifications_router
from modules.projects.routes import router as projects_router
from modules.verification.routes import router as verification_router

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic. A store that cannot be reached at
    startup aborts the process.
    """
    # Startup
    settings = get_settings()
    container = get_container()
    try:
        await container.startup()
    except Exception:
        logger.critical("Startup failed; refusing to serve requests", exc_info=True)
        raise
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    yield
    # Shutdown
    await container.shutdown()
    logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Project tracking with OTP-verified registration and activity logging",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes (served at the root for existing clients)
    app.include_router(health.router, tags=["health"])
    app.include_router(verification_router, tags=["verification"])
    app.include_router(auth_router, tags=["auth"])
    app.include_router(projects_router, tags=["projects"])
    app.include_router(activity_router, prefix="/activity", tags=["activity"])
    app.include_router(notifications_router, tags=["notifications"])
    app.include_router(feedback_router, prefix="/feedback", tags=["feedback"])

    return app


# Application instance for uvicorn
app = create_app()
