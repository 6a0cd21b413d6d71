"""
Test configuration and fixtures for the SEO Analyzer API.

Every app built here gets an in-memory fetcher and a fake clock, so no test
touches the network or waits on real time.
"""

import asyncio
import os
from typing import Dict, Generator, List, Optional, Union

os.environ["LOG_TO_FILE"] = "false"

import pytest
from fastapi.testclient import TestClient

from seo_analyzer.core.config import Settings
from seo_analyzer.platform.exceptions import FetchFailed


FULL_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>Example Domain - Fast, Friendly Widgets</title>
  <meta name="description" content="Widgets for every occasion, shipped worldwide.">
  <meta name="keywords" content="widgets, gadgets">
  <meta name="robots" content="index, follow">
  <link rel="canonical" href="https://example.com/">
  <meta property="og:title" content="Example Widgets">
  <meta property="og:description" content="The friendliest widgets on the web.">
  <meta property="og:image" content="https://example.com/og.png">
  <meta property="og:type" content="website">
  <meta name="twitter:card" content="summary_large_image">
  <meta name="twitter:title" content="Example Widgets on Twitter">
  <meta property="twitter:description" content="Widgets, tweeted.">
  <meta name="twitter:image" content="https://example.com/tw.png">
</head>
<body>
  <h1>Welcome to Example</h1>
  <h1>Second heading</h1>
</body>
</html>
"""

BARE_PAGE = "<html><body><p>Nothing to see here.</p></body></html>"


class FakeClock:
    """Monotonic clock the tests move by hand."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeFetcher:
    """
    PageFetcher double. `pages` maps URL -> markup or an exception to raise;
    unknown URLs fail like a 404. `delays` lets a URL finish later than others.
    """

    def __init__(
        self,
        pages: Optional[Dict[str, Union[str, Exception]]] = None,
        delays: Optional[Dict[str, float]] = None,
    ):
        self.pages = dict(pages or {})
        self.delays = dict(delays or {})
        self.calls: List[str] = []
        self.completed: List[str] = []

    async def fetch(self, url: str) -> str:
        self.calls.append(url)
        if url in self.delays:
            await asyncio.sleep(self.delays[url])
        page = self.pages.get(url, FetchFailed(upstream_status=404, reason="Not Found"))
        self.completed.append(url)
        if isinstance(page, Exception):
            raise page
        return page


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher(
        pages={
            "https://example.com": FULL_PAGE,
            "https://bare.example.com": BARE_PAGE,
        }
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(LOG_TO_FILE=False, _env_file=None)


@pytest.fixture
def test_app(settings, fetcher, clock):
    """Create FastAPI test application."""
    from seo_analyzer.main import create_app

    return create_app(settings, fetcher=fetcher, clock=clock)


@pytest.fixture(scope="function")
def client(test_app) -> Generator[TestClient, None, None]:
    """
    Create a test client for making HTTP requests.
    Each test gets a fresh app, so cache and rate-limit state never leak
    between tests.
    """
    with TestClient(test_app) as test_client:
        yield test_client


@pytest.fixture
def full_page() -> str:
    return FULL_PAGE


@pytest.fixture
def bare_page() -> str:
    return BARE_PAGE
