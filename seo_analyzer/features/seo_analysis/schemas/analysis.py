"""
SEO Analysis Schemas

Request, result and response models for the analyze-seo endpoint.
Field aliases are the camelCase keys the API has always returned.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ============================================================================
# Extraction / Scoring
# ============================================================================

class MetadataRecord(BaseModel):
    """SEO-relevant tag values of one document. "" means the tag was not found."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    url: str
    title: str = ""
    description: str = ""
    keywords: str = ""
    h1: str = ""
    canonical: str = ""
    lang: str = ""
    viewport: str = ""
    charset: str = ""
    meta_robots: str = Field("", alias="metaRobots")
    og_title: str = Field("", alias="ogTitle")
    og_description: str = Field("", alias="ogDescription")
    og_image: str = Field("", alias="ogImage")
    og_type: str = Field("", alias="ogType")
    twitter_card: str = Field("", alias="twitterCard")
    twitter_title: str = Field("", alias="twitterTitle")
    twitter_description: str = Field("", alias="twitterDescription")
    twitter_image: str = Field("", alias="twitterImage")

    @model_validator(mode="before")
    @classmethod
    def _none_is_absent(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: ("" if value is None else value) for key, value in data.items()}
        return data


class ScoreBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: int = Field(..., ge=0, le=100)
    basic: int = Field(..., ge=0, le=40)
    social: int = Field(..., ge=0, le=30)
    technical: int = Field(..., ge=0, le=30)

    @model_validator(mode="after")
    def _total_is_sum_of_bands(self) -> "ScoreBreakdown":
        if self.total != self.basic + self.social + self.technical:
            raise ValueError("total must equal basic + social + technical")
        return self


class CachedAnalysis(BaseModel):
    """What the result cache stores for a URL."""
    model_config = ConfigDict(frozen=True)

    metadata: MetadataRecord
    score: ScoreBreakdown


class AnalysisResult(BaseModel):
    metadata: MetadataRecord
    score: ScoreBreakdown
    cached: bool = False

    def to_payload(self) -> Dict[str, Any]:
        return {
            "data": self.metadata.model_dump(by_alias=True),
            "score": self.score.model_dump(),
            "cached": self.cached,
        }


class BatchItemResult(BaseModel):
    """One slot of a batch response: either a result or an error, never both."""
    url: str
    result: Optional[AnalysisResult] = None
    error: Optional[str] = None
    hint: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.result is not None

    def to_payload(self) -> Dict[str, Any]:
        if self.result is not None:
            return {"url": self.url, "success": True, **self.result.to_payload()}
        payload: Dict[str, Any] = {"url": self.url, "success": False, "error": self.error}
        if self.hint:
            payload["hint"] = self.hint
        return payload


# ============================================================================
# Request
# ============================================================================

class AnalyzeRequest(BaseModel):
    """Exactly one of `url` / `urls` is expected; `urls` wins when both are sent."""
    url: Optional[str] = None
    urls: Optional[List[str]] = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"url": "https://example.com"},
                {"urls": ["https://example.com", "https://example.org"]},
            ]
        }
    )
