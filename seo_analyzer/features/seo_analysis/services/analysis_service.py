"""
Analysis pipeline.

Single URL:  validate -> cache check -> fetch -> extract -> score -> cache write
Batch:       the same pipeline for every URL, run concurrently, one result
             slot per input URL in input order.
"""
import asyncio
from typing import List, Optional, Sequence

from seo_analyzer.features.seo_analysis.schemas.analysis import (
    AnalysisResult,
    BatchItemResult,
    CachedAnalysis,
)
from seo_analyzer.features.seo_analysis.services.extractor_service import ExtractorService
from seo_analyzer.features.seo_analysis.services.page_fetcher import PageFetcher
from seo_analyzer.features.seo_analysis.services.scoring_service import ScoringService
from seo_analyzer.platform.cache.memory import ResultCache
from seo_analyzer.platform.exceptions import AnalysisError, InternalError, InvalidUrl, TooManyUrls
from seo_analyzer.platform.logger import get_logger
from seo_analyzer.platform.utils.url_validator import validate_url

logger = get_logger(__name__)

MAX_BATCH_URLS = 5


class AnalysisService:
    def __init__(
        self,
        fetcher: PageFetcher,
        cache: ResultCache,
        extractor: Optional[ExtractorService] = None,
        max_batch_urls: int = MAX_BATCH_URLS,
    ):
        self.fetcher = fetcher
        self.cache = cache
        self.extractor = extractor or ExtractorService()
        self.max_batch_urls = max_batch_urls

    async def analyze(self, url: str) -> AnalysisResult:
        """
        Analyze one URL.

        Raises:
            InvalidUrl: url is not an absolute http(s) URL (nothing is fetched)
            FetchFailed: the page could not be retrieved
        """
        is_valid, url, error = validate_url(url)
        if not is_valid:
            logger.info(f"Rejected URL {url!r}: {error}")
            raise InvalidUrl()

        entry = self.cache.get(url)
        if entry is not None:
            logger.info(f"Returning cached result for: {url}")
            cached: CachedAnalysis = entry.value
            return AnalysisResult(metadata=cached.metadata, score=cached.score, cached=True)

        logger.info(f"Analyzing SEO for URL: {url}")
        html = await self.fetcher.fetch(url)

        metadata = self.extractor.extract(html, url)
        score = ScoringService.score(metadata)

        self.cache.put(url, CachedAnalysis(metadata=metadata, score=score))

        logger.info(f"SEO analysis completed for {url}: score {score.total}/100")
        return AnalysisResult(metadata=metadata, score=score, cached=False)

    async def _analyze_isolated(self, url: str) -> BatchItemResult:
        try:
            result = await self.analyze(url)
        except AnalysisError as e:
            logger.info(f"Batch item {url!r} failed: {e}")
            return BatchItemResult(url=url, error=e.message, hint=e.hint)
        except Exception as e:
            logger.exception(f"Unexpected error analyzing batch item {url!r}: {e}")
            return BatchItemResult(url=url, error=InternalError.message)
        return BatchItemResult(url=url, result=result)

    async def analyze_batch(self, urls: Sequence[str]) -> List[BatchItemResult]:
        """
        Analyze up to `max_batch_urls` URLs concurrently.

        A failing URL only fills its own slot with an error; the batch as a
        whole fails only when it is over the size cap, before any fetch.
        """
        if len(urls) > self.max_batch_urls:
            raise TooManyUrls(self.max_batch_urls)

        logger.info(f"Analyzing batch of {len(urls)} URLs")
        # gather preserves input order regardless of completion order
        return list(await asyncio.gather(*(self._analyze_isolated(url) for url in urls)))
