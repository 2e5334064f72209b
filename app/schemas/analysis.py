from pydantic import Field, field_validator
from typing import List, Optional, Union
from datetime import datetime
from app.core.constants import CheckStatus
from app.core.models import CamelCaseModel


def clamp_score(score: float) -> float:
    """Clamp a metric score into [0, 100]."""
    return max(0, min(100, score))


class PageMetadata(CamelCaseModel):
    """Page metadata supplied by the scraping collaborator."""
    title: Optional[str] = None
    description: Optional[str] = None
    og_title: Optional[str] = None
    og_description: Optional[str] = None
    author: Optional[str] = None


class AnalyzeRequest(CamelCaseModel):
    url: Optional[str] = None
    html: Optional[str] = None
    metadata: Optional[PageMetadata] = None


class Recommendation(CamelCaseModel):
    recommendation: str
    action_items: List[str] = []


class CheckResult(CamelCaseModel):
    id: str
    label: str
    status: CheckStatus
    score: Union[int, float]
    details: str
    recommendation: str
    action_items: List[str] = []

    @field_validator("score", mode="before")
    @classmethod
    def clamp(cls, value):
        if isinstance(value, (int, float)):
            return clamp_score(value)
        return value

    class Config:
        use_enum_values = True
        json_schema_extra = {
            "example": {
                "id": "heading-structure",
                "label": "Heading Hierarchy",
                "status": "pass",
                "score": 100,
                "details": "Perfect hierarchy with 1 H1 and logical structure",
                "recommendation": "Fix heading hierarchy gaps to help AI understand your content structure",
                "actionItems": ["Don't skip heading levels (e.g., H1 → H3)"]
            }
        }


class ReportMetadata(CamelCaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    analyzed_at: datetime


class AnalysisReport(CamelCaseModel):
    success: bool = True
    url: str
    overall_score: int = Field(..., ge=0, le=100)
    checks: List[CheckResult]
    metadata: ReportMetadata
    summary: str

    class Config:
        json_schema_extra = {
            "example": {
                "success": True,
                "url": "https://example.com",
                "overallScore": 72,
                "checks": [
                    {
                        "id": "llms-txt",
                        "label": "LLMs.txt",
                        "status": "fail",
                        "score": 0,
                        "details": "No llms.txt file found",
                        "recommendation": "Add an llms.txt file to explicitly define how AI should interact with your content",
                        "actionItems": ["Create /llms.txt in your website root"]
                    }
                ],
                "metadata": {
                    "title": "Example Domain",
                    "description": None,
                    "analyzedAt": "2025-07-10T14:23:56.123Z"
                },
                "summary": "Good foundation with room for improvement in key areas."
            }
        }


class CrawlerFileChecks(CamelCaseModel):
    """Results of the robots.txt, sitemap and llms.txt probes."""
    robots: CheckResult
    sitemap: CheckResult
    llms: CheckResult
