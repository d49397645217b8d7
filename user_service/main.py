# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from .api.v1 import health_router, user_router
from .api.v1.errors import error_body
from .core.config import Settings, get_settings
from .di.base_container import BaseContainer
from .di.container import DIContainer
from .domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Installs the store-side user constraints on startup and closes the
    MongoDB client on shutdown. An unreachable database is logged and does
    not stop the application; requests then fail with 500 until it returns.
    """
    container: BaseContainer = app.state.container

    error = await container.get(UserRepository).ensure_constraints()
    if error is not None:
        logger.error(f"User collection constraints not installed: {error.message}")

    yield

    if container.has("mongo_client"):
        try:
            container.get("mongo_client").close()
            logger.info("MongoDB client closed")
        except Exception as e:
            logger.error(f"Error closing MongoDB client: {e}", exc_info=True)

    logger.info("Application shutdown complete")


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Unparseable or missing request bodies are client errors"""
    messages = [
        f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("; ".join(messages) or "Invalid request"),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Keep framework errors (unknown route, wrong method) in the API's error shape"""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error"),
    )


def create_application(
    container: Optional[BaseContainer] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Dependency container (MongoDB-backed unless one is passed in)
    - Error handlers producing {"error": message} bodies
    - Optional CORS middleware
    - API route registration

    Args:
        container: Pre-built container, e.g. one holding a test repository
        settings: Settings to use instead of the environment

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = settings or get_settings()
    if container is None:
        container = DIContainer(settings)

    application = FastAPI(
        title="User Service API",
        version="1.0.0",
        description="CRUD service for user records backed by MongoDB",
        lifespan=lifespan
    )
    application.state.container = container

    if settings.cors_allow_origins:
        application.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_allow_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    application.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)

    # Register API routers
    application.include_router(user_router, prefix="/users")
    application.include_router(health_router, prefix="/health")

    return application


# Create application instance
app = create_application()
