import logging
from typing import Optional, Protocol

import httpx

from seo_analyzer.platform.exceptions import FetchFailed

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}


class PageFetcher(Protocol):
    async def fetch(self, url: str) -> str:
        """Return the raw markup at `url` or raise FetchFailed."""
        ...


class HttpxPageFetcher:
    """
    Fetches pages with a shared httpx.AsyncClient.
    No retries: a failure is reported straight back to the caller.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        user_agent: Optional[str] = None,
        max_redirects: int = 5,
        client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        headers = dict(DEFAULT_HEADERS)
        if user_agent:
            headers["User-Agent"] = user_agent

        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            timeout=timeout,
            headers=headers,
            follow_redirects=True,
            max_redirects=max_redirects,
            transport=transport,
        )

    async def fetch(self, url: str) -> str:
        try:
            response = await self.client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Fetch of {url} failed: {e!r}")
            raise FetchFailed(reason=str(e) or e.__class__.__name__) from e

        if not response.is_success:
            logger.warning(f"Fetch of {url} returned HTTP {response.status_code}")
            raise FetchFailed(upstream_status=response.status_code, reason=response.reason_phrase)

        html = response.text
        if not html.strip():
            logger.warning(f"Fetch of {url} returned an empty body")
            raise FetchFailed(reason="No content received from the website")

        return html

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()
