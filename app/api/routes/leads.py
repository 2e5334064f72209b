import logging
from fastapi import APIRouter, Depends, HTTPException, Query, status
from app.api.deps import get_client_info
from app.schemas.lead import LeadCaptureResponse, LeadCreate, LeadInfo, LeadLookupResponse
from app.services import LeadService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/leads",
    tags=["leads"]
)

@router.post("", response_model=LeadCaptureResponse)
async def capture_lead(lead_data: LeadCreate, client=Depends(get_client_info)):
    """
    Capture contact details of a report visitor
    """
    try:
        result = await LeadService.capture_lead(lead_data, **client)
    except Exception:
        logger.exception("Error capturing lead for report %s", lead_data.report_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to capture lead information"
        )

    return LeadCaptureResponse(
        lead_id=result["lead_id"],
        message="Welcome back!" if result["existing"] else "Thank you for your interest!"
    )

@router.get("", response_model=LeadLookupResponse)
async def check_lead(email: str = Query(..., min_length=1), report_id: str = Query(..., alias="reportId", min_length=1)):
    """
    Check whether a returning visitor already left their details for a report
    """
    try:
        lead = await LeadService.get_lead(email, report_id)
    except Exception:
        logger.exception("Error checking lead for report %s", report_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to check lead status"
        )

    if lead is None:
        return LeadLookupResponse(exists=False)

    return LeadLookupResponse(
        exists=True,
        lead=LeadInfo(id=lead["id"], name=lead.get("name"), company=lead.get("company"))
    )
