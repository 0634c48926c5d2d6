"""Custom exceptions and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class UserDirectoryError(Exception):
    """Base exception with HTTP status code."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class ValidationError(UserDirectoryError):
    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class DuplicateNameError(UserDirectoryError):
    def __init__(self, name: str):
        super().__init__(f"A user named {name!r} already exists", status_code=409)
        self.name = name


class NotFoundError(UserDirectoryError):
    def __init__(self, user_id: int):
        super().__init__(f"User {user_id} not found", status_code=404)
        self.user_id = user_id


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(UserDirectoryError)
    async def handle_user_directory_error(_request: Request, exc: UserDirectoryError):
        return JSONResponse({"error": str(exc)}, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        return JSONResponse(
            {"error": "Internal server error"},
            status_code=500,
        )
