# ============================================================================
# FILE: ytclone/core/exceptions.py
# Error taxonomy and the FastAPI handlers that render it as JSON
# ============================================================================
from typing import Any, Optional
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base exception for API errors"""
    status_code = 500
    default_message = "Something went wrong!"

    def __init__(self, message: Optional[str] = None, details: Any = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_dict(self, include_details: bool = True) -> dict:
        body = {"error": self.message}
        if include_details and self.details is not None:
            body["details"] = self.details
        return body


class BadRequest(AppError):
    """Missing or invalid input"""
    status_code = 400
    default_message = "Invalid request"


class Unauthorized(AppError):
    """No session token was supplied"""
    status_code = 401
    default_message = "Access token required"


class InvalidCredentials(Unauthorized):
    """Login failure; reported as a plain 400 like other form errors"""
    status_code = 400
    default_message = "Invalid credentials"


class Forbidden(AppError):
    """Session token present but invalid or expired"""
    status_code = 403
    default_message = "Invalid token"


class NotFound(AppError):
    status_code = 404
    default_message = "Resource not found"


class Conflict(AppError):
    """Uniqueness violation"""
    status_code = 400
    default_message = "Resource already exists"


class UpstreamError(AppError):
    """The YouTube Data API call failed"""
    status_code = 500
    default_message = "Upstream request failed"


class Misconfigured(AppError):
    status_code = 500
    default_message = "YouTube API key not configured"


class InternalError(AppError):
    status_code = 500
    default_message = "Something went wrong!"


def register_exception_handlers(app: FastAPI, production: bool = False):
    """Register JSON error handlers on the FastAPI app"""

    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message} ({exc.details})")
        # Internal detail is never exposed in production
        include_details = not (production and exc.status_code >= 500)
        return JSONResponse(
            status_code=exc.status_code,
            content=jsonable_encoder(exc.to_dict(include_details)),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        errors = [
            {"field": ".".join(str(p) for p in err.get("loc", ())), "message": err.get("msg")}
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request", "details": errors},
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        message = "Endpoint not found" if exc.status_code == 404 else exc.detail
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": message},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
        body = {"error": InternalError.default_message}
        if not production:
            body["details"] = str(exc)
        return JSONResponse(status_code=500, content=body)
