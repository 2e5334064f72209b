from pydantic import Field, StrictFloat, StrictInt
from typing import Any, Dict, List, Optional, Union
from datetime import datetime
from app.core.models import CamelCaseModel


class ReportCreate(CamelCaseModel):
    url: str = Field(..., min_length=1)
    analysis_data: Dict[str, Any]
    overall_score: Union[StrictInt, StrictFloat]
    brand_id: Optional[str] = None


class ReportCreateResponse(CamelCaseModel):
    success: bool = True
    report_id: str
    share_url: str

    class Config:
        json_schema_extra = {
            "example": {
                "success": True,
                "reportId": "k3v9x0q2m8ab",
                "shareUrl": "http://localhost:3000/report/k3v9x0q2m8ab"
            }
        }


class ReportSummary(CamelCaseModel):
    id: str
    url: str
    overall_score: Union[int, float]
    brand_id: Optional[str] = None
    created_at: datetime


class Report(ReportSummary):
    analysis_data: Dict[str, Any]


class ReportResponse(CamelCaseModel):
    success: bool = True
    report: Report


class Pagination(CamelCaseModel):
    page: int
    limit: int
    total: int
    pages: int


class ReportListResponse(CamelCaseModel):
    success: bool = True
    reports: List[ReportSummary]
    pagination: Pagination


class ReportDeleteResponse(CamelCaseModel):
    success: bool = True
    message: str = "Report deleted successfully"
