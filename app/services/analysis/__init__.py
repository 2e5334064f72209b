"""
Analysis modules for the different AI readiness metrics.
This package contains the HTML metric analyzers, the crawler file probes and the score aggregation.
"""

from app.services.analysis.accessibility import AccessibilityAnalyzer
from app.services.analysis.content_structure import ContentStructureAnalyzer
from app.services.analysis.faq_structure import FaqStructureAnalyzer
from app.services.analysis.headings import HeadingStructureAnalyzer
from app.services.analysis.metadata import MetadataAnalyzer
from app.services.analysis.readability import ReadabilityAnalyzer
from app.services.analysis.semantic_html import SemanticHtmlAnalyzer
from app.services.analysis.topical_authority import TopicalAuthorityAnalyzer

__all__ = [
    "AccessibilityAnalyzer",
    "ContentStructureAnalyzer",
    "FaqStructureAnalyzer",
    "HeadingStructureAnalyzer",
    "MetadataAnalyzer",
    "ReadabilityAnalyzer",
    "SemanticHtmlAnalyzer",
    "TopicalAuthorityAnalyzer",
]
