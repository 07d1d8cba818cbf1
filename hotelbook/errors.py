import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base for errors that map onto a JSON ``{"error": ...}`` response."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class Unauthenticated(ApiError):
    status_code = 401
    message = "Invalid email or password"


class Unauthorized(ApiError):
    status_code = 401
    message = "Unauthorized"


class RoomNotFound(ApiError):
    status_code = 404
    message = "Room not found"


class InsufficientAvailability(ApiError):
    status_code = 400
    message = "Not enough rooms available"


class StorageError(ApiError):
    status_code = 500
    message = "Internal server error"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _api_error_handler(request: Request, exc: ApiError):
    return error_response(exc.status_code, exc.message)


def _validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "Invalid request body"
    if errors:
        loc = ".".join(str(p) for p in errors[0].get("loc", ()) if p != "body")
        msg = errors[0].get("msg", "")
        message = f"{loc}: {msg}" if loc else msg or message
    logger.debug("Rejected request to %s: %s", request.url.path, message)
    return error_response(400, message)


def _storage_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Storage failure on %s", request.url.path, exc_info=exc)
    return error_response(500, StorageError.message)


def _unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(500, StorageError.message)


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, _storage_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
