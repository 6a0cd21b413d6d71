from typing import Optional

from fastapi import APIRouter, Body, Depends, Request, Response, status

from seo_analyzer.features.seo_analysis.schemas.analysis import AnalyzeRequest
from seo_analyzer.features.seo_analysis.services.analysis_service import AnalysisService
from seo_analyzer.platform.exceptions import MissingUrl
from seo_analyzer.platform.response import success_response

ANALYZE_PATH = "/analyze-seo"

router = APIRouter(tags=["seo-analysis"])


def get_analysis_service(request: Request) -> AnalysisService:
    return request.app.state.analysis_service


@router.post(ANALYZE_PATH, summary="Analyze the SEO metadata of one or more pages")
async def analyze_seo(
    data: Optional[AnalyzeRequest] = Body(None),
    service: AnalysisService = Depends(get_analysis_service),
):
    """
    Fetch a page, extract its SEO metadata and score it.

    - `{"url": "..."}` returns `{success, data, score, cached}`
    - `{"urls": [...]}` (at most 5) returns `{success, results}` where each
      slot succeeded or failed on its own
    """
    if data is None:
        raise MissingUrl()

    if data.urls is not None:
        items = await service.analyze_batch(data.urls)
        return success_response({"results": [item.to_payload() for item in items]})

    if not data.url:
        raise MissingUrl()

    result = await service.analyze(data.url)
    return success_response(result.to_payload())


@router.options(ANALYZE_PATH, include_in_schema=False)
async def analyze_seo_options():
    return Response(status_code=status.HTTP_200_OK)
