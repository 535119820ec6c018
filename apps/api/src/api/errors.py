"""Mapping of user directory errors to HTTP responses."""

import logging

from common.exceptions import (
    EmailTaken,
    InvalidCredentials,
    UserDirectoryError,
    UsernameTaken,
    UserNotFound,
    ValidationFailed,
)
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES: dict[type[UserDirectoryError], int] = {
    ValidationFailed: status.HTTP_400_BAD_REQUEST,
    EmailTaken: status.HTTP_400_BAD_REQUEST,
    UsernameTaken: status.HTTP_400_BAD_REQUEST,
    InvalidCredentials: status.HTTP_401_UNAUTHORIZED,
    UserNotFound: status.HTTP_404_NOT_FOUND,
}


def status_code_for(exc: UserDirectoryError) -> int:
    for error_type, status_code in ERROR_STATUS_CODES.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


async def user_directory_error_handler(request: Request, exc: UserDirectoryError) -> JSONResponse:
    status_code = status_code_for(exc)
    logger.info("%s %s -> %d %s", request.method, request.url.path, status_code, exc.message)
    return JSONResponse(status_code=status_code, content={"error": exc.message})


def register_error_handlers(app: FastAPI) -> None:
    """Register the user directory error handler on the application."""
    app.add_exception_handler(UserDirectoryError, user_directory_error_handler)
