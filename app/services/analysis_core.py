import logging
import time
from datetime import datetime, timezone
from typing import Optional

from app.core.exceptions import NoContentError
from app.schemas.analysis import AnalysisReport, PageMetadata, ReportMetadata
from app.services.analysis.crawler_files import probe_files
from app.services.analysis.readiness import analyze_html
from app.services.analysis.scoring import ScoringConfig, aggregate
from app.services.analysis.utils.response import generate_report_summary
from app.services.analysis.utils.scrape_utils import normalize_url, scrape_page

logger = logging.getLogger(__name__)


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


class AnalysisService:
    """Service for analyzing websites and building readiness reports"""

    scoring_config: ScoringConfig = ScoringConfig.from_settings()

    @classmethod
    async def analyze_website(cls, url: str, html: Optional[str] = None, metadata: Optional[PageMetadata] = None) -> AnalysisReport:
        """
        Analyze a page and return its AI readiness report.

        When ``html`` is given the page is not fetched again and ``metadata`` is used as is.

        Raises:
            InvalidURLError: the URL cannot be normalized.
            ScrapeError: the page could not be fetched.
            NoContentError: the page has no HTML.
        """
        url = normalize_url(url)
        started = time.perf_counter()

        if html is None:
            logger.info("Step 1/4: Scraping %s", url)
            page = await scrape_page(url)
            html, metadata = page.html, page.metadata
            logger.info("Step 1/4: Scrape completed in %sms", _elapsed_ms(started))
        metadata = metadata or PageMetadata()

        if not html or not html.strip():
            logger.error("No HTML content found for %s", url)
            raise NoContentError(f"No HTML content for {url}")

        step_start = time.perf_counter()
        logger.info("Step 2/4: Analyzing HTML content")
        html_checks = analyze_html(html, metadata)
        logger.info("Step 2/4: HTML analysis completed in %sms", _elapsed_ms(step_start))

        step_start = time.perf_counter()
        logger.info("Step 3/4: Checking robots.txt, sitemap.xml, llms.txt")
        file_checks = await probe_files(url)
        logger.info("Step 3/4: File checks completed in %sms", _elapsed_ms(step_start))

        checks = [file_checks.llms, file_checks.robots, file_checks.sitemap, *html_checks]

        logger.info("Step 4/4: Calculating final scores")
        overall_score = aggregate(checks, url, cls.scoring_config)
        logger.info("Total analysis time for %s: %sms", url, _elapsed_ms(started))

        return AnalysisReport(
            url=url,
            overall_score=overall_score,
            checks=checks,
            metadata=ReportMetadata(
                title=metadata.title,
                description=metadata.description,
                analyzed_at=datetime.now(timezone.utc),
            ),
            summary=generate_report_summary(overall_score),
        )
