"""
Campus Data Backend — FastAPI Application Factory
==================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes configuration, middleware, route mounting and lifecycle
       management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn campusdata.main:app).

Application Architecture:
    ┌──────────────────────────────────────────────────────┐
    │                    FastAPI App                       │
    │                                                      │
    │  Middleware:  Request ID → Access Log → GZip → CORS  │
    │                                                      │
    │  Routes:      8 resource controllers, currentUser,   │
    │               admin/users, systemInfo, /health       │
    │                                                      │
    │  Exception Handlers:                                 │
    │    ValidationError / RequestValidationError → 400    │
    │    UnauthenticatedError → 401   ForbiddenError → 403 │
    │    EntityNotFoundError → 404    ConflictError → 409  │
    │    DatabaseError → 500          Exception → 500      │
    └──────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, validate settings, log banner
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from campusdata import __version__
from campusdata.config import settings
from campusdata.database import dispose_engine
from campusdata.exceptions import CampusDataError, DatabaseError, ValidationError
from campusdata.middleware.logging import RequestLoggingMiddleware
from campusdata.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from campusdata.routes import (
    articles,
    dining_commons,
    dining_commons_menu,
    health,
    help_requests,
    menu_item_reviews,
    organizations,
    recommendation_requests,
    system_info,
    ucsb_dates,
    user_info,
    users,
)

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once, before anything else logs.

    Format: 2024-01-15T12:00:00 [INFO] campusdata.services.crud_service: ...
    Output goes to stdout so the container runtime collects it.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party libraries are noisy at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("=" * 60)
    logger.info("Campus Data Backend %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Not fatal: the API still serves reads and health checks
        logger.error("Configuration error: %s", str(e))
        logger.error("Fix the configuration and restart the server.")

    logger.info("Member domain: %s", settings.member_hosted_domain)
    logger.info("Configured admins: %d", len(settings.admin_emails_list))
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("Campus Data Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def error_response(exc: CampusDataError, include_details: bool = True) -> JSONResponse:
    """Build the standard error body for an application exception."""
    content = {
        "error": exc.error_code,
        "type": type(exc).__name__,
        "message": exc.message,
        "request_id": request_id_var.get(""),
    }
    if include_details and exc.context:
        content["details"] = exc.context
    return JSONResponse(status_code=exc.status_code, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to HTTP responses in one place.

    Every CampusDataError subclass carries its own status_code and error_code,
    so one handler covers 400/401/403/404/409. DatabaseError and unexpected
    exceptions never expose internals; details go to the server log only.
    """

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return error_response(exc, include_details=False)

    @app.exception_handler(CampusDataError)
    async def handle_campus_data_error(request: Request, exc: CampusDataError):
        rid = request_id_var.get("")
        logger.warning(
            "[%s] %s on %s %s: %s",
            rid,
            type(exc).__name__,
            request.method,
            request.url.path,
            exc.message,
        )
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Missing or malformed query parameters and bodies become 400, not 422."""
        errors = [
            {
                "field": ".".join(str(part) for part in err.get("loc", ())),
                "message": err.get("msg", ""),
            }
            for err in exc.errors()
        ]
        first = errors[0] if errors else {"field": "", "message": "Invalid request"}
        error = ValidationError(
            message=f"Invalid field '{first['field']}': {first['message']}",
            field=first["field"],
            context={"errors": errors},
        )
        return await handle_campus_data_error(request, error)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "type": type(exc).__name__,
                "message": "An unexpected error occurred. Please try again or contact support.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    app = FastAPI(
        title="Campus Data API",
        description=(
            "CRUD API for UCSB campus data: important dates, dining commons and "
            "their menus, menu item reviews, recommendation and help requests, "
            "student organizations and articles."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    for module in (
        ucsb_dates,
        dining_commons,
        dining_commons_menu,
        menu_item_reviews,
        recommendation_requests,
        organizations,
        help_requests,
        articles,
        user_info,
        users,
        system_info,
        health,
    ):
        app.include_router(module.router)

    return app


# uvicorn expects `campusdata.main:app` to be importable
app = create_app()
