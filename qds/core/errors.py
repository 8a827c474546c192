"""
Error taxonomy and the JSON handlers that render it
Every error response has the shape {"error": str, "details"?: any}
"""
import logging
from typing import Any, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationFailed(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class AuthorizationError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT


class StoreError(AppError):
    """Persistence failure; the cause is logged, never sent to the client"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(message: str, details: Optional[Any] = None) -> dict:
    body = {"error": message}
    if details is not None:
        body["details"] = details
    return body


def field_errors(errors: List[dict]) -> List[dict]:
    """Flatten pydantic errors into [{"field": "email", "message": "..."}]"""
    result = []
    for err in errors:
        if err.get("type") == "json_invalid":
            # loc holds a character offset into the body, not a field
            loc = []
        else:
            # Drop the "body" / "query" location prefix FastAPI adds
            loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        result.append({
            "field": ".".join(loc) or "body",
            "message": err.get("msg", "Invalid value"),
        })
    return result


async def app_error_handler(request: Request, exc: AppError):
    if isinstance(exc, StoreError):
        logger.error("Store error on %s %s: %s", request.method, request.url.path,
                     exc.message, exc_info=exc.__cause__ or exc)
        return JSONResponse(status_code=exc.status_code, content=error_body("Internal server error"))
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message, exc.details))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Validation failed", field_errors(exc.errors())),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error"),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
