"""JSON error envelopes for the chart API.

Every failure leaves the service as ``{"code", "message", "details"}`` so
clients can tell a bad chart payload apart from a server fault without
parsing prose.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from pydantic import BaseModel, Field, ValidationError

LOG = logging.getLogger(__name__)

VALIDATION_ERROR = "VALIDATION_ERROR"
INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorEnvelope(BaseModel):
    """Error payload returned by every endpoint."""

    code: str = Field(description="Machine readable error code.")
    message: str = Field(description="Human friendly summary of the error.")
    details: Any | None = Field(default=None, description="Structured context, if any.")


def _reply(status_code: int, envelope: ErrorEnvelope) -> ORJSONResponse:
    return ORJSONResponse(status_code=status_code, content=envelope.model_dump())


def envelope_for(status_code: int, detail: Any = None) -> ErrorEnvelope:
    """Wrap an ``HTTPException.detail`` value.

    Mappings may carry their own ``code``/``message``/``details``; strings
    become the message; the status name (``NOT_FOUND`` ...) is the default
    code.
    """

    try:
        status = HTTPStatus(status_code)
        code, message = status.name, status.phrase
    except ValueError:
        code, message = "ERROR", "Error"

    if isinstance(detail, ErrorEnvelope):
        return detail
    if isinstance(detail, str):
        return ErrorEnvelope(code=code, message=detail)
    if isinstance(detail, Mapping):
        extra = dict(detail)
        return ErrorEnvelope(
            code=str(extra.pop("code", None) or code),
            message=str(extra.pop("message", None) or message),
            details=extra.pop("details", None) or extra or None,
        )
    return ErrorEnvelope(code=code, message=message, details=detail)


def validation_error_detail(exc: ValidationError, message: str) -> dict[str, Any]:
    """``HTTPException`` detail for a model that failed inside a handler."""

    return {
        "code": VALIDATION_ERROR,
        "message": message,
        "details": jsonable_encoder(exc.errors(include_url=False, include_context=False)),
    }


async def http_exception_handler(_: Request, exc: HTTPException) -> ORJSONResponse:
    return _reply(exc.status_code, envelope_for(exc.status_code, exc.detail))


async def validation_exception_handler(_: Request, exc: RequestValidationError) -> ORJSONResponse:
    envelope = ErrorEnvelope(
        code=VALIDATION_ERROR,
        message="Request validation failed.",
        details=jsonable_encoder(exc.errors()),
    )
    return _reply(422, envelope)


async def unhandled_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    LOG.exception("Unhandled error while rendering %s", request.url.path)
    envelope = ErrorEnvelope(
        code=INTERNAL_ERROR,
        message="The chart could not be rendered.",
        details={"type": type(exc).__name__},
    )
    return _reply(500, envelope)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = [
    "ErrorEnvelope",
    "INTERNAL_ERROR",
    "VALIDATION_ERROR",
    "envelope_for",
    "http_exception_handler",
    "install_error_handlers",
    "unhandled_exception_handler",
    "validation_error_detail",
    "validation_exception_handler",
]
