from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_500_INTERNAL_SERVER_ERROR,
    HTTP_503_SERVICE_UNAVAILABLE,
)

from app.core.exceptions import ContentSourceUnavailableError, InvalidInputError

ERROR_CODE_BY_STATUS: dict[int, str] = {
    400: "bad_request",
    404: "not_found",
    422: "validation_error",
    429: "rate_limited",
    500: "internal_error",
    503: "service_unavailable",
}

CONTENT_UNAVAILABLE_MESSAGE = "Content is temporarily unavailable. Try again later."


class ErrorResponse(BaseModel):
    """Standardized error response payload."""

    error: str
    message: str
    details: Any | None = None


def build_http_error(
    status_code: int,
    error: str,
    message: str,
    details: Any | None = None,
    headers: dict[str, str] | None = None,
) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail=ErrorResponse(error=error, message=message, details=details).model_dump(
            exclude_none=True
        ),
        headers=headers,
    )


def _map_status_to_error(status_code: int) -> str:
    return ERROR_CODE_BY_STATUS.get(status_code, "error")


def _status_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def _internal_error_response() -> JSONResponse:
    payload = ErrorResponse(
        error=_map_status_to_error(HTTP_500_INTERNAL_SERVER_ERROR),
        message=_status_phrase(HTTP_500_INTERNAL_SERVER_ERROR),
    ).model_dump(exclude_none=True)
    return JSONResponse(status_code=HTTP_500_INTERNAL_SERVER_ERROR, content=payload)


def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, StarletteHTTPException):
        return _internal_error_response()
    detail = exc.detail
    if isinstance(detail, dict) and "error" in detail and "message" in detail:
        payload = ErrorResponse.model_validate(detail).model_dump(exclude_none=True)
    else:
        payload = ErrorResponse(
            error=_map_status_to_error(exc.status_code),
            message=str(detail) if detail else _status_phrase(exc.status_code),
        ).model_dump(exclude_none=True)
    return JSONResponse(
        status_code=exc.status_code,
        content=payload,
        headers=getattr(exc, "headers", None),
    )


def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logging.exception("Unhandled exception", exc_info=exc)
    return _internal_error_response()


def request_validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, RequestValidationError):
        return _internal_error_response()

    payload = ErrorResponse(
        error=_map_status_to_error(422),
        message="Request validation failed",
        details=exc.errors(),
    ).model_dump(exclude_none=True)
    return JSONResponse(status_code=422, content=payload)


def rate_limit_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    payload = ErrorResponse(
        error=_map_status_to_error(429),
        message="Too many requests",
    ).model_dump(exclude_none=True)
    return JSONResponse(status_code=429, content=payload, headers=getattr(exc, "headers", None))


def invalid_input_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, InvalidInputError):
        return _internal_error_response()
    payload = ErrorResponse(error=exc.error_code, message=str(exc)).model_dump(exclude_none=True)
    return JSONResponse(status_code=HTTP_400_BAD_REQUEST, content=payload)


def content_unavailable_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, ContentSourceUnavailableError):
        return _internal_error_response()
    # Internal detail stays in the log; clients get a generic message.
    logging.error(f"Content source unavailable. Error: {exc}")
    payload = ErrorResponse(
        error=_map_status_to_error(HTTP_503_SERVICE_UNAVAILABLE),
        message=CONTENT_UNAVAILABLE_MESSAGE,
    ).model_dump(exclude_none=True)
    return JSONResponse(status_code=HTTP_503_SERVICE_UNAVAILABLE, content=payload)
