import logging
from typing import Any, Dict, Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from seo_analyzer.platform.response import error_response

logger = logging.getLogger(__name__)


class AnalysisError(Exception):
    """Base for every failure the analysis service reports to callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"
    hint: Optional[str] = None

    def __init__(self, message: Optional[str] = None, hint: Optional[str] = None):
        if message is not None:
            self.message = message
        if hint is not None:
            self.hint = hint
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"success": False, "error": self.message}
        if self.hint:
            payload["hint"] = self.hint
        return payload


class InvalidUrl(AnalysisError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid URL format"
    hint = "Please provide a valid URL starting with http:// or https://"


class MissingUrl(AnalysisError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "URL parameter is required"
    hint = 'Send {"url": "https://example.com"} or {"urls": ["https://example.com"]} for batch'


class TooManyUrls(AnalysisError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Maximum {limit} URLs allowed per batch request")


class RateLimited(AnalysisError):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    message = "Rate limit exceeded. Please try again in a minute."

    def __init__(self, retry_after: int):
        self.retry_after = retry_after
        super().__init__()

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["retryAfter"] = self.retry_after
        return payload


class FetchFailed(AnalysisError):
    status_code = status.HTTP_502_BAD_GATEWAY
    message = "Failed to fetch the website. The site may be blocking requests or experiencing issues."
    hint = "Try a different URL or check if the website is accessible"

    def __init__(self, upstream_status: Optional[int] = None, reason: Optional[str] = None):
        self.upstream_status = upstream_status
        self.reason = reason
        super().__init__()

    def __str__(self) -> str:
        if self.upstream_status is not None:
            return f"Failed to fetch: {self.upstream_status}"
        return f"Failed to fetch: {self.reason or 'unknown error'}"


class InternalError(AnalysisError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"


def add_exception_handlers(app):
    @app.exception_handler(AnalysisError)
    async def analysis_error_handler(request: Request, exc: AnalysisError):
        headers = None
        if isinstance(exc, RateLimited):
            headers = {"Retry-After": str(exc.retry_after)}
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(
            error=str(exc.detail) or "Error",
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return error_response(
            error="Invalid request body",
            hint='Send {"url": "https://example.com"} or {"urls": ["https://example.com"]} for batch',
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception: {exc}")
        return error_response(
            error=InternalError.message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
