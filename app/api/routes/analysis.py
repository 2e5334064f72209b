import logging
from fastapi import APIRouter, HTTPException, status
from app.schemas.analysis import AnalyzeRequest, AnalysisReport
from app.services import AnalysisService
from app.core.exceptions import InvalidURLError, NoContentError, ScrapeError

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/analysis",
    tags=["analysis"]
)

@router.post("/analyze", response_model=AnalysisReport)
async def analyze_site(request: AnalyzeRequest):
    """
    Analyze a website and return its AI readiness report
    """
    if not request.url or not request.url.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="URL is required"
        )

    try:
        return await AnalysisService.analyze_website(
            url=request.url,
            html=request.html,
            metadata=request.metadata
        )
    except InvalidURLError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid URL format"
        )
    except ScrapeError as e:
        logger.error("Scrape error for %s: %s", request.url, e)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to scrape website. Please check the URL."
        )
    except NoContentError:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Failed to extract content from website"
        )
    except Exception:
        logger.exception("AI readiness analysis error for %s", request.url)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to analyze website"
        )
