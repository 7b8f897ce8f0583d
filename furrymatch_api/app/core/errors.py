"""
Alert exceptions and their HTTP translation.

Resources raise an ``AlertError`` subclass when a request is rejected
for an entity-level reason (missing or mismatching identifier, unknown
row, pre-assigned identifier).  ``register_exception_handlers`` installs
handlers that render these as ``application/problem+json`` bodies with
the entity name and error key, and add the error alert headers the
frontend reads to show a translated message.
"""

import logging
import sqlite3
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import settings
from .http_util import create_failure_alert

logger = logging.getLogger(__name__)

PROBLEM_BASE_URL = "https://www.jhipster.tech/problem"
PROBLEM_WITH_MESSAGE = f"{PROBLEM_BASE_URL}/problem-with-message"
CONSTRAINT_VIOLATION = f"{PROBLEM_BASE_URL}/constraint-violation"
PROBLEM_MEDIA_TYPE = "application/problem+json"


class AlertError(Exception):
    """Base class for errors reported to the client as an entity alert."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, title: str, entity_name: str, error_key: str) -> None:
        super().__init__(title)
        self.title = title
        self.entity_name = entity_name
        self.error_key = error_key

    def to_problem(self, path: str) -> Dict[str, Any]:
        return {
            "type": PROBLEM_WITH_MESSAGE,
            "title": self.title,
            "status": self.status_code,
            "detail": self.title,
            "path": path,
            "message": f"error.{self.error_key}",
            "params": self.entity_name,
            "entityName": self.entity_name,
            "errorKey": self.error_key,
        }


class BadRequestAlertError(AlertError):
    """Malformed or inconsistent identifier, or an update of an unknown row."""


class ConflictAlertError(BadRequestAlertError):
    """A new entity arrived with an identifier already set.

    Kept a 400 on the wire: clients of the generated frontend only
    distinguish alerts by ``errorKey``.
    """

    def __init__(self, title: str, entity_name: str, error_key: str = "idexists") -> None:
        super().__init__(title, entity_name, error_key)


class NotFoundAlertError(AlertError):
    """The referenced row does not exist."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity_name: str, error_key: str = "notfound", title: Optional[str] = None) -> None:
        super().__init__(title or "Entity not found", entity_name, error_key)


async def alert_error_handler(request: Request, exc: AlertError) -> JSONResponse:
    logger.warning(
        "Rejected %s %s: %s (%s.%s)",
        request.method,
        request.url.path,
        exc.title,
        exc.entity_name,
        exc.error_key,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_problem(request.url.path),
        headers=create_failure_alert(settings.client_app_name, exc.entity_name, exc.error_key),
        media_type=PROBLEM_MEDIA_TYPE,
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render body and parameter validation errors as a 400 problem."""
    errors = exc.errors()
    logger.warning("Validation error on %s: %s", request.url.path, errors)
    field_errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ())[1:]),
            "message": error.get("msg"),
        }
        for error in errors
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "type": CONSTRAINT_VIOLATION,
            "title": "Method argument not valid",
            "status": status.HTTP_400_BAD_REQUEST,
            "path": request.url.path,
            "message": "error.validation",
            "fieldErrors": field_errors,
        },
        media_type=PROBLEM_MEDIA_TYPE,
    )


async def integrity_error_handler(request: Request, exc: sqlite3.IntegrityError) -> JSONResponse:
    """Constraint violations, e.g. a reference to a row that does not exist."""
    logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "type": PROBLEM_WITH_MESSAGE,
            "title": "Data integrity violation",
            "status": status.HTTP_400_BAD_REQUEST,
            "detail": str(exc),
            "path": request.url.path,
            "message": "error.integrity",
        },
        media_type=PROBLEM_MEDIA_TYPE,
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the alert, validation and fallback handlers on ``app``."""
    app.add_exception_handler(AlertError, alert_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(sqlite3.IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
