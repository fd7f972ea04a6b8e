import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from app.utils.response import error_response

logger = logging.getLogger(__name__)


class AppException(Exception):
    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code


class MissingCredentials(AppException):
    def __init__(self, message: str = "Username and password are required"):
        super().__init__(message, status_code=400)


class AlreadyExists(AppException):
    def __init__(self, message: str = "User already exists!"):
        super().__init__(message, status_code=409)


class InvalidCredentials(AppException):
    def __init__(self, status_code: int = 208):
        super().__init__("Invalid Login. Check username and password", status_code=status_code)


class NotLoggedIn(AppException):
    def __init__(self):
        super().__init__("User not logged in", status_code=403)


class InvalidToken(AppException):
    def __init__(self):
        super().__init__("User not authenticated - Invalid token", status_code=403)


class BookNotFound(AppException):
    def __init__(self, message: str = "Book not found"):
        super().__init__(message, status_code=404)


class ReviewNotFound(AppException):
    def __init__(self, isbn: str, username: str):
        super().__init__(f"No review found for ISBN {isbn} by {username}.", status_code=404)


class EmptyReview(AppException):
    def __init__(self):
        super().__init__("Review content cannot be empty.", status_code=400)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content=error_response(
                "Invalid request - required fields are missing or malformed",
                data=jsonable_encoder(exc.errors()),
            ),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=error_response("Internal server error"),
        )
