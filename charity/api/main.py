"""FastAPI application entrypoint for the charity back office."""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from charity.api.middleware.logging import LoggingMiddleware
from charity.api.routes import admin, audit, auth, dashboard, employees, forms
from charity.core.config import settings
from charity.core.exceptions import ApplicationError, ValidationError
from charity.storage import EmployeeDirectory, SubmissionRepository
from charity.utils.audit import AuditLog
from charity.utils.validators import DEFAULT_INVALID_MESSAGE

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Seed the president account before serving requests."""

    president = await asyncio.to_thread(app.state.directory.ensure_president)
    if president is not None:
        logger.info("Bootstrapped president account %s", president.id)
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.API_TITLE,
        version=settings.API_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    app.state.directory = EmployeeDirectory(settings.employees_path)
    app.state.audit_log = AuditLog(settings.audit_log_path, max_entries=settings.AUDIT_MAX_ENTRIES)
    app.state.submissions = SubmissionRepository(settings.DATA_DIR)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    # Routers
    app.include_router(forms.router, prefix="/api")
    app.include_router(auth.router, prefix="/api")
    app.include_router(employees.router, prefix="/api")
    app.include_router(audit.router, prefix="/api")
    app.include_router(dashboard.router, prefix="/api")
    app.include_router(admin.router, prefix="/api")

    app.add_exception_handler(ApplicationError, handle_application_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    return app


async def handle_application_error(_: Request, exc: ApplicationError) -> JSONResponse:
    """Return standardized responses for application layer exceptions."""

    return JSONResponse(status_code=exc.status_code, content={"message": exc.message, "code": exc.code})


async def handle_request_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Report only the first problem, the way the intake forms display it."""

    errors = exc.errors()
    first = errors[0] if errors else {}
    location = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path", "header")]
    return JSONResponse(
        status_code=ValidationError.status_code,
        content={
            "message": first.get("msg") or DEFAULT_INVALID_MESSAGE,
            "field": ".".join(location),
            "code": ValidationError.code,
        },
    )


app = create_app()
