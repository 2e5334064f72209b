import logging
from fastapi import APIRouter, Depends, HTTPException, Query, status
from app.api.deps import get_client_info
from app.schemas.report import (
    ReportCreate,
    ReportCreateResponse,
    ReportDeleteResponse,
    ReportListResponse,
    ReportResponse,
)
from app.services import ReportService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/reports",
    tags=["reports"]
)

@router.post("", response_model=ReportCreateResponse)
async def create_report(report_data: ReportCreate, client=Depends(get_client_info)):
    """
    Store an analysis report and return its share link
    """
    try:
        result = await ReportService.create_report(report_data, **client)
    except Exception:
        logger.exception("Error creating report for %s", report_data.url)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create report"
        )

    return ReportCreateResponse(**result)

@router.get("", response_model=ReportListResponse)
async def list_reports(page: int = Query(1, ge=1), limit: int = Query(20, ge=1, le=100)):
    """
    List stored reports, newest first
    """
    try:
        return await ReportService.list_reports(page=page, limit=limit)
    except Exception:
        logger.exception("Error fetching reports")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch reports"
        )

@router.get("/{report_id}", response_model=ReportResponse)
async def get_report(report_id: str):
    """
    Get a stored report with its full analysis data
    """
    try:
        report = await ReportService.get_report(report_id)
    except Exception:
        logger.exception("Error fetching report %s", report_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch report"
        )

    if report is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Report not found"
        )

    return ReportResponse(report=report)

@router.delete("/{report_id}", response_model=ReportDeleteResponse)
async def delete_report(report_id: str):
    """
    Delete a report along with its leads and analytics events
    """
    try:
        deleted = await ReportService.delete_report(report_id)
    except Exception:
        logger.exception("Error deleting report %s", report_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete report"
        )

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Report not found"
        )

    return ReportDeleteResponse()
