import logging
from contextlib import asynccontextmanager
from time import monotonic
from typing import Callable, Optional

from fastapi import FastAPI

from seo_analyzer import __version__
from seo_analyzer.api_routers.v1 import api_router
from seo_analyzer.core.config import Settings, get_settings
from seo_analyzer.features.health.routes.health import router as health_router
from seo_analyzer.features.seo_analysis.routes.analysis import ANALYZE_PATH
from seo_analyzer.features.seo_analysis.services.analysis_service import AnalysisService
from seo_analyzer.features.seo_analysis.services.page_fetcher import HttpxPageFetcher, PageFetcher
from seo_analyzer.middlewares.cors import EmptyPreflightCORSMiddleware
from seo_analyzer.middlewares.rate_limit import RateLimitMiddleware
from seo_analyzer.platform.cache.memory import InMemoryResultCache, ResultCache
from seo_analyzer.platform.exceptions import add_exception_handlers
from seo_analyzer.platform.logger import LOG_FORMAT
from seo_analyzer.platform.utils.rate_limit import RateLimiter, SlidingWindowRateLimiter

# Configure logging to show INFO level messages
logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)


def create_app(
    settings: Optional[Settings] = None,
    *,
    fetcher: Optional[PageFetcher] = None,
    cache: Optional[ResultCache] = None,
    rate_limiter: Optional[RateLimiter] = None,
    clock: Callable[[], float] = monotonic,
) -> FastAPI:
    """
    Build the API. Cache, rate limiter and page fetcher live for the life of
    the app; pass your own to share or fake them.
    """
    settings = settings or get_settings()

    if fetcher is None:
        fetcher = HttpxPageFetcher(
            timeout=settings.FETCH_TIMEOUT_SECONDS,
            user_agent=settings.FETCH_USER_AGENT,
            max_redirects=settings.FETCH_MAX_REDIRECTS,
        )
    if cache is None:
        cache = InMemoryResultCache(
            ttl_seconds=settings.CACHE_TTL_SECONDS,
            sweep_threshold=settings.CACHE_SWEEP_THRESHOLD,
            clock=clock,
        )
    if rate_limiter is None:
        rate_limiter = SlidingWindowRateLimiter(
            max_requests=settings.RATE_LIMIT_REQUESTS,
            window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
            clock=clock,
            sweep_threshold=settings.RATE_LIMIT_SWEEP_THRESHOLD,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        aclose = getattr(fetcher, "aclose", None)
        if aclose is not None:
            await aclose()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Fetch a page, extract its SEO metadata and score it",
        version=__version__,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.rate_limiter = rate_limiter
    app.state.analysis_service = AnalysisService(
        fetcher=fetcher,
        cache=cache,
        max_batch_urls=settings.MAX_BATCH_URLS,
    )

    # Root endpoint for basic info
    @app.get("/", tags=["Info"])
    def root():
        return {
            "app_name": settings.APP_NAME,
            "description": "SEO metadata extraction and scoring API.",
            "version": __version__,
            "docs_url": "/docs",
            "api_base": settings.API_V1_PREFIX,
        }

    add_exception_handlers(app)

    # last added runs first: CORS must wrap the limiter
    app.add_middleware(
        RateLimitMiddleware,
        limiter=rate_limiter,
        paths=[settings.API_V1_PREFIX + ANALYZE_PATH],
        identity_header=settings.FORWARDED_FOR_HEADER,
        whitelist=settings.RATE_LIMIT_WHITELIST,
    )
    app.add_middleware(
        EmptyPreflightCORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(api_router, prefix=settings.API_V1_PREFIX)

    return app


app = create_app()
