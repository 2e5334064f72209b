import logging
from fastapi import APIRouter, Depends, HTTPException, Query, status
from app.api.deps import get_client_info
from app.schemas.analytics import AnalyticsEventCreate, AnalyticsSummaryResponse, AnalyticsTrackResponse
from app.services import AnalyticsService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/analytics",
    tags=["analytics"]
)

@router.post("", response_model=AnalyticsTrackResponse)
async def track_event(event: AnalyticsEventCreate, client=Depends(get_client_info)):
    """
    Record an engagement event for a report
    """
    if not AnalyticsService.is_trackable(event.event_type):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid event type"
        )

    try:
        await AnalyticsService.track_event(
            report_id=event.report_id,
            event_type=event.event_type,
            event_data=event.event_data,
            visitor_id=event.visitor_id,
            lead_id=event.lead_id,
            **client
        )
    except Exception:
        logger.exception("Error tracking %s for report %s", event.event_type, event.report_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to track analytics"
        )

    return AnalyticsTrackResponse()

@router.get("", response_model=AnalyticsSummaryResponse)
async def get_analytics(report_id: str = Query(..., alias="reportId", min_length=1), timeframe: str = "7d"):
    """
    Views, leads and event breakdown of a report over 7d, 30d or 90d
    """
    try:
        summary = await AnalyticsService.get_summary(report_id, timeframe)
    except Exception:
        logger.exception("Error fetching analytics for report %s", report_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch analytics"
        )

    return AnalyticsSummaryResponse(analytics=summary)
