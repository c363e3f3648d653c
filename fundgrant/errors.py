"""Structured error helpers for API responses."""

from __future__ import annotations

import logging
import traceback
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from fundgrant.core.config import settings

logger = logging.getLogger(__name__)


def build_error_payload(message: str, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"error": message}
    if details:
        payload.update(details)
    return payload


class AppError(Exception):
    """Application-scoped error for standardized API responses."""

    status_code = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, status_code: Optional[int] = None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code
        self.message = message
        self.payload = build_error_payload(message, details)


class ValidationError(AppError):
    """Missing required field or malformed identifier."""

    status_code = 400


class NotFoundError(AppError):
    """No document exists for the given identifier."""

    status_code = 404


class StoreError(AppError):
    """The document store could not complete an operation."""

    status_code = 500

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        details: Dict[str, Any] = {}
        if cause is not None:
            details["message"] = str(cause)
            if settings.DEBUG:
                details["stack"] = "".join(
                    traceback.format_exception(type(cause), cause, cause.__traceback__)
                )
        super().__init__(message, details)
        self.cause = cause


async def app_error_handler(_: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.payload)


async def request_validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    message = "; ".join(messages) or "Invalid request body"
    return JSONResponse(status_code=400, content=build_error_payload(message))


async def sqlalchemy_error_handler(_: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Unhandled document store error", exc_info=exc)
    error = StoreError("Document store operation failed", cause=exc)
    return JSONResponse(status_code=error.status_code, content=error.payload)
