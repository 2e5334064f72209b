from pydantic import Field
from typing import Any, Dict, List, Optional
from app.core.models import CamelCaseModel


class AnalyticsEventCreate(CamelCaseModel):
    report_id: str = Field(..., min_length=1)
    visitor_id: Optional[str] = None
    lead_id: Optional[str] = None
    event_type: str = Field(..., min_length=1)
    event_data: Optional[Dict[str, Any]] = None


class AnalyticsTrackResponse(CamelCaseModel):
    success: bool = True


class EventCount(CamelCaseModel):
    event_type: str
    count: int


class AnalyticsSummary(CamelCaseModel):
    timeframe: str
    total_views: int
    total_leads: int
    event_breakdown: List[EventCount]
    conversion_rate: str

    class Config:
        json_schema_extra = {
            "example": {
                "timeframe": "7d",
                "totalViews": 40,
                "totalLeads": 3,
                "eventBreakdown": [
                    {"eventType": "report_view", "count": 40},
                    {"eventType": "lead_captured", "count": 3}
                ],
                "conversionRate": "7.50"
            }
        }


class AnalyticsSummaryResponse(CamelCaseModel):
    success: bool = True
    analytics: AnalyticsSummary
