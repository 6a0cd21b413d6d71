from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ── App ─────────────────────────────────────
    APP_NAME: str = "SEO Analyzer API"
    DEBUG: bool = False
    API_V1_PREFIX: str = "/api/v1"
    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    # ── Cache ───────────────────────────────────
    CACHE_TTL_SECONDS: float = 3600
    CACHE_SWEEP_THRESHOLD: int = 1024  # purge expired entries once the store grows past this

    # ── Rate limiting ───────────────────────────
    RATE_LIMIT_REQUESTS: int = 10
    RATE_LIMIT_WINDOW_SECONDS: float = 60
    RATE_LIMIT_WHITELIST: List[str] = []
    RATE_LIMIT_SWEEP_THRESHOLD: int = 1024  # forget idle identities once this many are tracked
    FORWARDED_FOR_HEADER: str = "x-forwarded-for"

    # ── Analysis ────────────────────────────────
    MAX_BATCH_URLS: int = 5
    FETCH_TIMEOUT_SECONDS: float = 10.0
    FETCH_MAX_REDIRECTS: int = 5
    FETCH_USER_AGENT: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/122.0.0.0 Safari/537.36"
    )

    # ── Logging ─────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
