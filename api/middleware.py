"""
Consolidated middleware for the NorthWind extension API
"""

import time
import logging
import secrets
from datetime import datetime, timezone
from uuid import uuid4

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.exceptions import AppError, ForbiddenError

logger = logging.getLogger("northwind.middleware")

CSRF_HEADER = "X-CSRF-Token"
SAFE_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})


# ============================================================================
# Helper Functions
# ============================================================================


def error_content(code: str, message, details=None) -> dict:
    """Build the JSON error envelope shared by all handlers"""
    error = {"code": code, "message": message}
    if details:
        error["details"] = details
    return {
        "success": False,
        "error": error,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all HTTP requests and responses"""

    async def dispatch(self, request: Request, call_next):
        # Generate unique request ID
        request_id = str(uuid4())
        request.state.request_id = request_id

        logger.info(
            "Request started",
            extra={
                "request_id": request_id,
                "method": request.method,
                "url": str(request.url),
                "client": request.client.host if request.client else None,
            },
        )

        start_time = time.time()

        try:
            response: Response = await call_next(request)
            process_time = time.time() - start_time

            logger.info(
                "Request completed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "url": str(request.url),
                    "status_code": response.status_code,
                    "process_time": f"{process_time:.4f}s",
                },
            )

            response.headers["X-Request-ID"] = request_id
            response.headers["X-Process-Time"] = f"{process_time:.4f}"

            return response

        except Exception as exc:
            process_time = time.time() - start_time
            logger.error(
                "Request failed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "url": str(request.url),
                    "error": str(exc),
                    "process_time": f"{process_time:.4f}s",
                },
                exc_info=True,
            )
            raise


# ============================================================================
# CSRF Token Middleware
# ============================================================================


class CSRFTokenMiddleware(BaseHTTPMiddleware):
    """
    Token-based CSRF protection in the OData style.

    A client sends ``X-CSRF-Token: Fetch`` on a safe request and receives the
    token in the same response header. Every modifying request must echo it.
    Only installed when ``csrf_protection_enabled`` is set.
    """

    def __init__(self, app, token: str = None):
        super().__init__(app)
        self.token = token or secrets.token_urlsafe(32)

    async def dispatch(self, request: Request, call_next):
        sent = request.headers.get(CSRF_HEADER)

        if request.method in SAFE_METHODS:
            response = await call_next(request)
            if sent is not None and sent.lower() == "fetch":
                response.headers[CSRF_HEADER] = self.token
            return response

        if sent is None or not secrets.compare_digest(sent.encode(), self.token.encode()):
            logger.warning(
                f"CSRF token missing or invalid for {request.method} {request.url}"
            )
            exc = ForbiddenError("CSRF token validation failed", code="CSRF_TOKEN_INVALID")
            response = JSONResponse(
                status_code=exc.http_status,
                content=error_content(exc.code, exc.message),
            )
            response.headers[CSRF_HEADER] = "Required"
            return response

        return await call_next(request)


# ============================================================================
# Error Handlers
# ============================================================================


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors"""
    logger.warning(f"Validation error on {request.url}: {exc.errors()}")

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        content=error_content(
            "VALIDATION_ERROR",
            "Request validation failed",
            [
                {"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")}
                for e in exc.errors()
            ],
        ),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    logger.warning(f"HTTP {exc.status_code} on {request.url}: {exc.detail}")

    return JSONResponse(
        status_code=exc.status_code,
        content=error_content(f"HTTP_{exc.status_code}", exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def app_exception_handler(request: Request, exc: AppError):
    """Handle application errors (validation, not found, conflicts, auth)"""
    logger.warning(f"{exc.code} on {request.url}: {exc}")

    headers = None
    if exc.http_status == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Basic"}

    return JSONResponse(
        status_code=exc.http_status,
        content=error_content(exc.code, exc.message, exc.details),
        headers=headers,
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception(f"Unexpected error on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_content("INTERNAL_SERVER_ERROR", "An unexpected error occurred"),
    )
