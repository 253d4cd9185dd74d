import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

logger = logging.getLogger(__name__)

_INVALID_RANGE_MESSAGE = "Both dates are required, must be valid calendar dates, and end must not precede start"


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str
    detail: str | None = None
    status_code: int


class AppError(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class InvalidDateRangeError(AppError):
    """Start or end date missing, malformed, or out of order."""

    def __init__(self, message: str = _INVALID_RANGE_MESSAGE) -> None:
        super().__init__(message, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)


class DateRangeTooLongError(AppError):
    """Range spans more days than a single request may cover."""

    def __init__(self, days: int, max_days: int) -> None:
        super().__init__(
            f"Date range spans {days} days; at most {max_days} are allowed per request",
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )


def _error_response(error: str, detail: str | None, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, detail=detail, status_code=status_code).model_dump(),
    )


async def _app_exception_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message)
    return _error_response(type(exc).__name__, exc.message, exc.status_code)


async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error_response("ValidationError", str(exc.errors()), status.HTTP_422_UNPROCESSABLE_ENTITY)


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application."""
    app.add_exception_handler(AppError, _app_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)  # type: ignore[arg-type]
