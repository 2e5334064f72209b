"""
HTML readiness analysis.
Runs every HTML metric analyzer over one page and returns their checks in report order.
"""

import logging
from typing import List, Optional

from app.core.config import settings
from app.schemas.analysis import CheckResult, PageMetadata
from app.services.analysis.accessibility import AccessibilityAnalyzer
from app.services.analysis.base import BaseAnalyzer
from app.services.analysis.content_structure import ContentStructureAnalyzer
from app.services.analysis.faq_structure import FaqStructureAnalyzer
from app.services.analysis.headings import HeadingStructureAnalyzer
from app.services.analysis.metadata import MetadataAnalyzer
from app.services.analysis.readability import ReadabilityAnalyzer
from app.services.analysis.semantic_html import SemanticHtmlAnalyzer
from app.services.analysis.topical_authority import TopicalAuthorityAnalyzer
from app.services.analysis.utils.text_utils import extract_text

logger = logging.getLogger(__name__)

HTML_ANALYZERS: List[BaseAnalyzer] = [
    HeadingStructureAnalyzer(),
    ReadabilityAnalyzer(),
    MetadataAnalyzer(),
    SemanticHtmlAnalyzer(),
    AccessibilityAnalyzer(),
    FaqStructureAnalyzer(),
    ContentStructureAnalyzer(),
    TopicalAuthorityAnalyzer(),
]


def analyze_html(html: str, metadata: Optional[PageMetadata] = None, isolate_faults: Optional[bool] = None) -> List[CheckResult]:
    """
    Run the HTML analyzers over ``html``.

    Args:
        html: Raw page markup.
        metadata: Page metadata from the scraper.
        isolate_faults: When true, an analyzer that raises is replaced by a failed
            placeholder check. When false the exception propagates. Defaults to
            ISOLATE_ANALYZER_FAULTS.
    """
    if isolate_faults is None:
        isolate_faults = settings.ISOLATE_ANALYZER_FAULTS
    metadata = metadata or PageMetadata()

    text = extract_text(html)

    results = []
    for step, analyzer in enumerate(HTML_ANALYZERS, start=1):
        logger.debug("HTML check %s/%s: %s", step, len(HTML_ANALYZERS), analyzer.metric_id)
        try:
            results.append(analyzer.analyze(html, text, metadata))
        except Exception:
            if not isolate_faults:
                raise
            logger.exception("Analyzer %s failed, substituting a failed check", analyzer.metric_id)
            results.append(analyzer.failed_result())

    return results
