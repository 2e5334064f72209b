import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from app.core.constants import AnalyticsEvent, Collections
from app.core.storage import get_store
from app.schemas.lead import LeadCreate
from app.services.analytics_service import AnalyticsService

logger = logging.getLogger(__name__)


class LeadService:
    """Service for capturing contact details of report visitors"""

    @staticmethod
    async def get_lead(email: str, report_id: str) -> Optional[Dict[str, Any]]:
        leads = get_store().find(Collections.LEADS, {"email": email, "report_id": report_id}, limit=1)
        return leads[0] if leads else None

    @staticmethod
    async def capture_lead(lead_data: LeadCreate, ip_address: Optional[str] = None, user_agent: Optional[str] = None) -> Dict[str, Any]:
        """
        Save a lead for a report, or return the existing one for the same email.

        Returns:
            Dict with ``lead_id`` and ``existing`` (True for a returning visitor)
        """
        existing = await LeadService.get_lead(lead_data.email, lead_data.report_id)
        if existing:
            return {"lead_id": existing["id"], "existing": True}

        lead_id = str(uuid.uuid4())
        get_store().set(Collections.LEADS, lead_id, {
            "id": lead_id,
            "report_id": lead_data.report_id,
            "email": lead_data.email,
            "name": lead_data.name,
            "company": lead_data.company,
            "captured_at": datetime.now(timezone.utc),
        })

        await AnalyticsService.track_event(
            report_id=lead_data.report_id,
            lead_id=lead_id,
            event_type=AnalyticsEvent.LEAD_CAPTURED,
            event_data={"email": lead_data.email, "name": lead_data.name, "company": lead_data.company},
            ip_address=ip_address,
            user_agent=user_agent,
        )

        logger.info("Captured lead %s for report %s", lead_id, lead_data.report_id)
        return {"lead_id": lead_id, "existing": False}
