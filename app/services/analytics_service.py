import logging
import uuid
from collections import Counter
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from app.core.constants import ANALYTICS_TIMEFRAMES, TRACKABLE_EVENTS, AnalyticsEvent, Collections
from app.core.storage import get_store
from app.schemas.analytics import AnalyticsSummary, EventCount

logger = logging.getLogger(__name__)

DEFAULT_TIMEFRAME = "7d"


class AnalyticsService:
    """Service for recording and summarizing report engagement events"""

    @staticmethod
    def is_trackable(event_type: str) -> bool:
        """Whether clients may record ``event_type`` directly."""
        return event_type in TRACKABLE_EVENTS

    @staticmethod
    async def track_event(
        report_id: str,
        event_type: str,
        event_data: Optional[Dict[str, Any]] = None,
        visitor_id: Optional[str] = None,
        lead_id: Optional[str] = None,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> str:
        """
        Store one analytics event and return its id.
        """
        event_id = str(uuid.uuid4())

        get_store().set(Collections.ANALYTICS, event_id, {
            "id": event_id,
            "report_id": report_id,
            "visitor_id": visitor_id,
            "lead_id": lead_id,
            "event_type": event_type,
            "event_data": event_data,
            "ip_address": ip_address,
            "user_agent": user_agent,
            "timestamp": datetime.now(timezone.utc),
        })

        logger.debug("Tracked %s for report %s", event_type, report_id)
        return event_id

    @staticmethod
    async def get_summary(report_id: str, timeframe: str = DEFAULT_TIMEFRAME) -> AnalyticsSummary:
        """
        Summarize the events of a report over the last 7, 30 or 90 days.
        Unknown timeframes fall back to 7 days.
        """
        days_back = ANALYTICS_TIMEFRAMES.get(timeframe, ANALYTICS_TIMEFRAMES[DEFAULT_TIMEFRAME])
        start_date = datetime.now(timezone.utc) - timedelta(days=days_back)

        events = [
            event for event in get_store().find(Collections.ANALYTICS, {"report_id": report_id})
            if event.get("timestamp") and event["timestamp"] >= start_date
        ]

        counts = Counter(event["event_type"] for event in events)
        views = counts.get(AnalyticsEvent.REPORT_VIEW, 0)
        leads = counts.get(AnalyticsEvent.LEAD_CAPTURED, 0)

        breakdown = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        conversion_rate = f"{leads / views * 100:.2f}" if views > 0 else "0.00"

        return AnalyticsSummary(
            timeframe=timeframe,
            total_views=views,
            total_leads=leads,
            event_breakdown=[EventCount(event_type=event_type, count=count) for event_type, count in breakdown],
            conversion_rate=conversion_rate,
        )
