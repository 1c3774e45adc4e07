"""
Exception types and FastAPI exception handlers.

Domain errors derive from ``DemoApiException`` and carry the HTTP
status they map to.  Handlers registered by ``register_exception_handlers``
translate them, request validation failures and unexpected errors into
responses.  A missing user is answered with an empty 404 body so that
existing clients keep working.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class DemoApiException(Exception):
    """Base exception for the service."""

    def __init__(
        self,
        message: str,
        code: str = "DEMO_API_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        return {"detail": self.message, "code": self.code}


class UserNotFoundError(DemoApiException):
    """Raised when no user exists with the requested id."""

    def __init__(self, user_id: int) -> None:
        super().__init__(
            message=f"User {user_id} not found",
            code="USER_NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND,
        )
        self.user_id = user_id


class DatabaseConfigError(DemoApiException):
    """Raised at startup when the configured store cannot be used."""

    def __init__(self, message: str) -> None:
        super().__init__(message=message, code="DATABASE_CONFIG_ERROR")


def _request_id(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None)


async def user_not_found_handler(request: Request, exc: UserNotFoundError) -> Response:
    return Response(status_code=exc.status_code)


async def demo_api_exception_handler(request: Request, exc: DemoApiException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("[%s] %s", _request_id(request), exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed JSON and invalid fields with 400 rather than 422."""
    errors = exc.errors()
    malformed = any(error.get("type") == "json_invalid" for error in errors)
    detail = "Malformed JSON in request body" if malformed else "Request validation failed"
    # ``input`` and ``ctx`` may hold raw bytes or exception objects.
    summary = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in errors
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": detail, "code": "BAD_REQUEST", "errors": jsonable_encoder(summary)},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    request_id = _request_id(request)
    logger.exception("[%s] Unexpected error on %s %s: %s", request_id, request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
            "request_id": request_id,
        },
        headers={"X-Request-ID": request_id} if request_id else None,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers to ``app``.  More specific types come first."""
    app.add_exception_handler(UserNotFoundError, user_not_found_handler)
    app.add_exception_handler(DemoApiException, demo_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
