from __future__ import annotations
import logging
import math
import secrets
import string
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from app.core.config import settings
from app.core.constants import AnalyticsEvent, Collections
from app.core.storage import get_store
from app.schemas.report import Pagination, Report, ReportCreate, ReportListResponse, ReportSummary
from app.services.analytics_service import AnalyticsService

logger = logging.getLogger(__name__)

REPORT_ID_ALPHABET = string.ascii_lowercase + string.digits
REPORT_ID_LENGTH = 12


class ReportService:
    """Service for managing stored analysis reports"""

    @staticmethod
    def generate_report_id() -> str:
        return "".join(secrets.choice(REPORT_ID_ALPHABET) for _ in range(REPORT_ID_LENGTH))

    @staticmethod
    def build_share_url(report_id: str) -> str:
        return f"{settings.FRONTEND_URL.rstrip('/')}/report/{report_id}"

    @staticmethod
    async def create_report(report_data: ReportCreate, ip_address: Optional[str] = None, user_agent: Optional[str] = None) -> Dict[str, Any]:
        """
        Store a report under a fresh id and record a report_created event.
        Stored reports are never updated; a new analysis gets a new id.
        """
        store = get_store()

        report_id = ReportService.generate_report_id()
        while store.get(Collections.REPORTS, report_id) is not None:
            report_id = ReportService.generate_report_id()

        store.set(Collections.REPORTS, report_id, {
            "id": report_id,
            "url": report_data.url,
            "analysis_data": report_data.analysis_data,
            "overall_score": report_data.overall_score,
            "brand_id": report_data.brand_id,
            "created_at": datetime.now(timezone.utc),
        })

        await AnalyticsService.track_event(
            report_id=report_id,
            event_type=AnalyticsEvent.REPORT_CREATED,
            event_data={"url": report_data.url, "overallScore": report_data.overall_score},
            ip_address=ip_address,
            user_agent=user_agent,
        )

        logger.info("Created report %s for %s", report_id, report_data.url)
        return {"report_id": report_id, "share_url": ReportService.build_share_url(report_id)}

    @staticmethod
    async def get_report(report_id: str) -> Optional[Report]:
        data = get_store().get(Collections.REPORTS, report_id)
        if data is None:
            return None
        return Report(**data)

    @staticmethod
    async def list_reports(page: int = 1, limit: int = 20) -> ReportListResponse:
        """
        List reports newest first, without their analysis data.
        """
        store = get_store()
        offset = (page - 1) * limit

        docs = store.find(Collections.REPORTS, order_by="created_at", descending=True, limit=limit, offset=offset)
        total = store.count(Collections.REPORTS)

        return ReportListResponse(
            reports=[ReportSummary(**{k: v for k, v in doc.items() if k != "analysis_data"}) for doc in docs],
            pagination=Pagination(
                page=page,
                limit=limit,
                total=total,
                pages=math.ceil(total / limit),
            ),
        )

    @staticmethod
    async def delete_report(report_id: str) -> bool:
        """
        Delete a report together with its leads and analytics events.
        Returns False when the report does not exist.
        """
        store = get_store()
        if store.get(Collections.REPORTS, report_id) is None:
            return False

        removed_events = store.delete_where(Collections.ANALYTICS, {"report_id": report_id})
        removed_leads = store.delete_where(Collections.LEADS, {"report_id": report_id})
        deleted = store.delete(Collections.REPORTS, report_id)

        logger.info("Deleted report %s (%s leads, %s events)", report_id, removed_leads, removed_events)
        return deleted
