# health_care/exceptions.py

import logging
from typing import Iterable
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from health_care.schemas.app_schemas import ErrorResponse

logger = logging.getLogger(__name__)

class AppError(Exception):
    """Base class for errors that are reported to API clients."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Something went wrong"

    def __init__(self, error: str, message: str = None):
        super().__init__(error)
        self.error = error
        if message is not None:
            self.message = message

class InvalidFilterFieldError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid filter field"

    def __init__(self, fields: Iterable[str]):
        self.fields = sorted(fields)
        super().__init__(f"Unknown filter field(s): {', '.join(self.fields)}")

class DuplicateRecordError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Duplicate record"

class InternalServerError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__("Internal server error", message=message)

def error_response(status_code: int, message: str, error=None) -> JSONResponse:
    body = ErrorResponse(message=message, error=error)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))

async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.error}")
    return error_response(exc.status_code, exc.message, exc.error)

async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"{request.method} {request.url.path} has an invalid payload: {exc.errors()}")
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    return error_response(status.HTTP_400_BAD_REQUEST, "Validation Error", errors)

async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail), None)

def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
