"""Error taxonomy and the exception handlers that render it."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from enum import Enum
from functools import wraps
from http import HTTPStatus
from typing import Any, TypeVar

from fastapi import FastAPI, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from .core.context import REQUEST_ID_HEADER, bind_request_id, reset_request_id
from .core.result import Err, Ok, Result
from .schemas.system import ErrorResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Every validation or business failure the core can report."""

    MISSING_FIELDS = "missing_fields"
    INVALID_EMAIL = "invalid_email"
    PASSWORD_MISMATCH = "password_mismatch"
    WEAK_PASSWORD = "weak_password"
    EMAIL_TAKEN = "email_taken"
    INVALID_CREDENTIALS = "invalid_credentials"
    WRONG_PASSWORD = "wrong_password"
    UNAUTHORIZED = "unauthorized"
    EMPTY_TITLE = "empty_title"
    NOT_FOUND = "not_found"
    INVALID_STATUS = "invalid_status"

    @property
    def message(self) -> str:
        return _MESSAGES[self]

    @property
    def status_code(self) -> int:
        return _STATUS_CODES.get(self, status.HTTP_400_BAD_REQUEST)


_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.MISSING_FIELDS: "All fields are required.",
    ErrorKind.INVALID_EMAIL: "Invalid email address.",
    ErrorKind.PASSWORD_MISMATCH: "Passwords do not match.",
    ErrorKind.WEAK_PASSWORD: "Password must be at least 6 characters long.",
    ErrorKind.EMAIL_TAKEN: "Email is already registered.",
    ErrorKind.INVALID_CREDENTIALS: "Invalid email or password.",
    ErrorKind.WRONG_PASSWORD: "Incorrect password.",
    ErrorKind.UNAUTHORIZED: "Unauthorized access.",
    ErrorKind.EMPTY_TITLE: "Title is required.",
    ErrorKind.NOT_FOUND: "Task not found.",
    ErrorKind.INVALID_STATUS: "Invalid status.",
}

_STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.WRONG_PASSWORD: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


class ApplicationError(Exception):
    """Base class for domain-specific errors."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "application_error",
        status_code: int = status.HTTP_400_BAD_REQUEST,
        details: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details


class DomainError(ApplicationError):
    """Raised at the HTTP boundary for a failed core ``Result``."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.message, code=kind.value, status_code=kind.status_code)
        self.kind = kind


def unwrap(result: Result[T]) -> T:
    """Return the value of ``result`` or raise ``DomainError`` for its kind."""

    if isinstance(result, Err):
        raise DomainError(result.kind)
    assert isinstance(result, Ok)
    return result.value


_HTTP_STATUS_CODES: dict[int, str] = {
    status.HTTP_400_BAD_REQUEST: "bad_request",
    status.HTTP_401_UNAUTHORIZED: "unauthorized",
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
    status.HTTP_409_CONFLICT: "conflict",
}

Handler = Callable[[Request, Any], Awaitable[JSONResponse]]


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def _with_request_context(handler: Handler) -> Handler:
    """Re-bind the request id while ``handler`` logs and renders.

    Exception handlers can run after the middleware has reset its binding.
    """

    @wraps(handler)
    async def wrapper(request: Request, exc: Any) -> JSONResponse:
        request_id = _request_id(request)
        if not request_id:
            return await handler(request, exc)
        token = bind_request_id(request_id)
        try:
            return await handler(request, exc)
        finally:
            reset_request_id(token)

    return wrapper


def _error_response(
    request: Request,
    *,
    status_code: int,
    code: str,
    message: str,
    details: Any | None = None,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    """Render the ``{code, message, details}`` envelope with the request id folded into ``details``."""

    request_id = _request_id(request)
    if request_id:
        if details is None:
            details = {"request_id": request_id}
        elif isinstance(details, dict):
            details = {"request_id": request_id, **details}
        else:
            details = {"request_id": request_id, "detail": details}

    body = ErrorResponse(code=code, message=message, details=details)
    response = JSONResponse(status_code=status_code, content=body.model_dump(mode="json"), headers=headers)
    if request_id:
        response.headers.setdefault(REQUEST_ID_HEADER, request_id)
    return response


def _describe_http_exception(exc: StarletteHTTPException) -> tuple[str, Any | None]:
    if isinstance(exc.detail, str):
        return exc.detail, None
    try:
        phrase = HTTPStatus(exc.status_code).phrase
    except ValueError:
        phrase = "Error"
    if isinstance(exc.detail, list):
        return phrase, {"errors": exc.detail}
    return phrase, exc.detail


@_with_request_context
async def _handle_application_error(request: Request, exc: ApplicationError) -> JSONResponse:
    level = logging.ERROR if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR else logging.WARNING
    logger.log(
        level,
        "Request failed",
        extra={"code": exc.code, "status_code": exc.status_code, "path": request.url.path},
    )
    return _error_response(
        request,
        status_code=exc.status_code,
        code=exc.code,
        message=exc.message,
        details=exc.details,
    )


@_with_request_context
async def _handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = jsonable_encoder(exc.errors())
    logger.warning("Request validation failed", extra={"errors": errors, "path": request.url.path})
    return _error_response(
        request,
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        code="validation_error",
        message="Request validation failed.",
        details={"errors": errors},
    )


@_with_request_context
async def _handle_integrity_error(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.error("Storage constraint violated", exc_info=exc)
    return _error_response(
        request,
        status_code=status.HTTP_409_CONFLICT,
        code="db_integrity_error",
        message="Database integrity violation.",
    )


@_with_request_context
async def _handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = _HTTP_STATUS_CODES.get(exc.status_code, "http_error")
    message, details = _describe_http_exception(exc)
    logger.warning(
        "HTTP exception raised",
        extra={"code": code, "status_code": exc.status_code, "path": request.url.path},
    )
    return _error_response(
        request,
        status_code=exc.status_code,
        code=code,
        message=message,
        details=details,
        headers=exc.headers or None,
    )


@_with_request_context
async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error", exc_info=exc, extra={"path": request.url.path})
    return _error_response(
        request,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        code="server_error",
        message="Internal server error.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Render every failure raised while serving ``app`` as an error envelope."""

    app.add_exception_handler(ApplicationError, _handle_application_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation_error)
    app.add_exception_handler(IntegrityError, _handle_integrity_error)
    app.add_exception_handler(StarletteHTTPException, _handle_http_exception)
    app.add_exception_handler(Exception, _handle_unexpected_error)


__all__ = [
    "ApplicationError",
    "DomainError",
    "ErrorKind",
    "register_exception_handlers",
    "unwrap",
]
