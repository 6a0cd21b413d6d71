"""
SEO Analysis Services

Organized by responsibility:

1. document.py - ParsedDocument capability (BeautifulSoup backed)
2. extractor_service.py - raw HTML -> MetadataRecord
3. scoring_service.py - MetadataRecord -> ScoreBreakdown (pure)
4. page_fetcher.py - httpx page fetch, failures become FetchFailed
5. analysis_service.py - single URL pipeline and batch fan-out

Cache and rate limiter stores live in seo_analyzer/platform.
"""
