"""
FastAPI application entry point for the Notification API.

This module initializes the FastAPI application with:
- CORS middleware configured from settings
- Exception handlers rendering {"error", "code", "details"?} bodies
- Lifespan handler creating SQLite tables for local runs
- Logging configuration
- Routers for users, email templates, notifications and attachments

Environment Variables:
    NOTIFY_DB_URL: SQLAlchemy database URL (default: sqlite:///./notifications.db)
    NOTIFY_ENV: Environment (development/production/test, default: development)
    NOTIFY_LOG_LEVEL: Log level (DEBUG/INFO/WARNING/ERROR/CRITICAL, default: INFO)
    NOTIFY_CORS_ORIGINS: Comma-separated allowed origins
"""

from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.src.api.request_body import InvalidJSONError, violation_messages
from backend.src.config.settings import get_settings
from backend.src.db.database import dispose_engine, init_db
from backend.src.services.exceptions import ServiceError
from backend.src.utils.logging_config import init_logging, get_logger


APP_VERSION = "1.0.0"


def error_response(
    status_code: int,
    message: str,
    details: Optional[List[str]] = None,
) -> JSONResponse:
    """Build the JSON error body shared by all handlers."""
    content: Dict[str, Any] = {"error": message, "code": status_code}
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Create tables when running on SQLite
    - Shutdown: Dispose of the database engine

    Args:
        app: FastAPI application instance

    Yields:
        Control to the application
    """
    # Startup
    logger = get_logger("api")
    settings = get_settings()
    logger.info(f"Starting notification API ({settings.environment})")

    if settings.is_sqlite:
        logger.info("Creating database tables (SQLite)")
        init_db()

    logger.info("Notification API started successfully")

    yield

    # Shutdown
    logger.info("Shutting down notification API")
    dispose_engine()


# Initialize logging before creating app
init_logging()

# Create FastAPI application
app = FastAPI(
    title="Notification API",
    description="CRUD API for users, email templates, notifications and "
                "notification attachments, with a pending to sent send workflow.",
    version=APP_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)


# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Exception handlers


@app.exception_handler(ServiceError)
async def service_exception_handler(
    request: Request, exc: ServiceError
) -> JSONResponse:
    """
    Handle domain errors raised by the service layer.

    The HTTP status comes from the error kind itself.

    Args:
        request: HTTP request
        exc: ServiceError subclass instance

    Returns:
        JSON response with error message, code and optional details
    """
    logger = get_logger("api")
    logger.warning(
        f"{exc.error_kind}: {exc.message}",
        extra={
            "path": request.url.path,
            "method": request.method,
            "error_kind": exc.error_kind,
        }
    )

    return error_response(
        exc.status_code,
        exc.message,
        details=getattr(exc, "details", None),
    )


@app.exception_handler(InvalidJSONError)
async def invalid_json_exception_handler(
    request: Request, exc: InvalidJSONError
) -> JSONResponse:
    """Handle missing or malformed JSON bodies on write endpoints."""
    logger = get_logger("api")
    logger.warning(
        "Invalid JSON body",
        extra={"path": request.url.path, "method": request.method}
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": exc.message},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors (path and query parameters).

    Args:
        request: HTTP request
        exc: FastAPI RequestValidationError

    Returns:
        400 JSON response with validation error details
    """
    logger = get_logger("api")
    details = violation_messages(exc.errors())
    logger.warning(
        "Validation error",
        extra={
            "path": request.url.path,
            "method": request.method,
            "errors": details,
        }
    )

    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "Validation failed",
        details=details,
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render framework HTTP errors (unknown route, wrong method) in the API error shape."""
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """
    Handle SQLAlchemy database errors.

    Args:
        request: HTTP request
        exc: SQLAlchemy exception

    Returns:
        JSON response with database error message
    """
    logger = get_logger("db")
    logger.error(
        "Database error",
        extra={
            "path": request.url.path,
            "method": request.method,
            "error": str(exc),
        }
    )

    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
    )


@app.exception_handler(Exception)
async def generic_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """
    Handle all other unhandled exceptions.

    Args:
        request: HTTP request
        exc: Unhandled exception

    Returns:
        JSON response with generic error message
    """
    logger = get_logger("api")
    logger.error(
        "Unhandled exception",
        extra={
            "path": request.url.path,
            "method": request.method,
            "error_type": type(exc).__name__,
            "error": str(exc),
        },
        exc_info=True,
    )

    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
    )


# Health check endpoint


@app.get("/health", tags=["Health"])
async def health_check() -> Dict[str, Any]:
    """
    Health check endpoint.

    Returns:
        Health status and application information
    """
    return {
        "status": "healthy",
        "service": "notification-api",
        "version": APP_VERSION,
    }


# API routers
from backend.src.api import (  # noqa: E402
    email_templates,
    notification_attachments,
    notifications,
    users,
)

app.include_router(users.router, prefix="/api")
app.include_router(email_templates.router, prefix="/api")
app.include_router(notifications.router, prefix="/api")
app.include_router(notification_attachments.router, prefix="/api")


# Root endpoint


@app.get("/", tags=["Root"])
async def root() -> Dict[str, str]:
    """
    Root endpoint with API information.

    Returns:
        API metadata and documentation links
    """
    return {
        "message": "Notification API",
        "version": APP_VERSION,
        "docs": "/docs",
        "redoc": "/redoc",
        "openapi": "/openapi.json",
    }
