# seo_analyzer/middlewares/rate_limit.py
import logging
from typing import Iterable, Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from seo_analyzer.platform.exceptions import RateLimited
from seo_analyzer.platform.utils.client_identity import get_client_identity
from seo_analyzer.platform.utils.rate_limit import RateLimiter

logger = logging.getLogger(__name__)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Gates whole requests to the listed paths by client identity, before the
    body is read. CORS preflights are never counted.
    """

    def __init__(
        self,
        app,
        limiter: RateLimiter,
        paths: Iterable[str],
        identity_header: str = "x-forwarded-for",
        whitelist: Optional[Iterable[str]] = None,
    ):
        super().__init__(app)
        self.limiter = limiter
        self.paths = {path.rstrip("/") or "/" for path in paths}
        self.identity_header = identity_header
        self.whitelist = set(whitelist or ())

    async def dispatch(self, request: Request, call_next):
        path = request.url.path.rstrip("/") or "/"

        # If endpoint is not rate-limited, continue
        if request.method == "OPTIONS" or path not in self.paths:
            return await call_next(request)

        identity = get_client_identity(request, self.identity_header)

        # Skip limit if whitelisted
        if identity in self.whitelist:
            return await call_next(request)

        if not self.limiter.admit(identity):
            exc = RateLimited(retry_after=self.limiter.retry_after(identity))
            logger.warning(f"Rate limit exceeded for {identity} on {path}")
            return JSONResponse(
                status_code=exc.status_code,
                content=exc.to_dict(),
                headers={"Retry-After": str(exc.retry_after)},
            )

        return await call_next(request)
