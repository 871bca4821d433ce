"""FastAPI application setup."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from http import HTTPStatus
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from university import __version__
from university.api.dependencies import close_registry, init_registry
from university.api.models import ApiError
from university.api.routes import (
    courses,
    departments,
    enrollments,
    faculties,
    instructors,
    levels,
    students,
)
from university.registry import RegistryError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)


def error_response(
    request: Request, status_code: int, message: str, error_code: str
) -> JSONResponse:
    """Build the JSON error body shared by every handler."""
    body = ApiError(
        timestamp=datetime.now(timezone.utc),
        status=int(status_code),
        error=HTTPStatus(status_code).phrase,
        message=message,
        path=request.url.path,
        error_code=error_code,
    )
    return JSONResponse(
        status_code=status_code, content=body.model_dump(mode="json", by_alias=True)
    )


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts) or "Invalid request"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    db_path = app.state.db_path if hasattr(app.state, "db_path") else "university.db"
    init_registry(db_path)
    logger.info("Registry API started on %s", db_path)
    yield
    close_registry()
    logger.info("Registry API stopped")


def create_app(db_path: str = "university.db") -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="University Registry API",
        description="Faculties, departments, levels, courses, people and enrollments",
        version=__version__,
        lifespan=lifespan,
    )

    # Store config for lifespan manager
    app.state.db_path = db_path

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RegistryError)
    async def registry_error_handler(request: Request, exc: RegistryError) -> JSONResponse:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.error_code)
        return error_response(request, exc.status_code, exc.message, exc.error_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return error_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            _describe_validation_errors(exc),
            "VALIDATION_ERROR",
        )

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
        logger.warning("Integrity violation on %s: %s", request.url.path, exc.orig)
        return error_response(
            request,
            status.HTTP_409_CONFLICT,
            "The request conflicts with existing data",
            "DATA_INTEGRITY_VIOLATION",
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An unexpected error occurred",
            "GENERIC_ERROR",
        )

    app.include_router(faculties.router, prefix="/api")
    app.include_router(departments.router, prefix="/api")
    app.include_router(levels.router, prefix="/api")
    app.include_router(courses.router, prefix="/api")
    app.include_router(students.router, prefix="/api")
    app.include_router(instructors.router, prefix="/api")
    app.include_router(enrollments.router, prefix="/api")

    return app


# Default app instance
app = create_app()
