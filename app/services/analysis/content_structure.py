"""
Content Organization Analyzer module.
"""

import re

from app.core.constants import MetricId
from app.services.analysis.base import BaseAnalyzer
from app.services.analysis.utils.recommendations import get_recommendation

TOC_PATTERNS = [
    re.compile(r'table\s+of\s+contents', re.IGNORECASE),
    re.compile(r'<nav[^>]*class[^>]*toc', re.IGNORECASE),
    re.compile(r'<ol[^>]*class[^>]*contents', re.IGNORECASE),
    re.compile(r'<ul[^>]*class[^>]*contents', re.IGNORECASE),
]

BREADCRUMB_PATTERNS = [
    re.compile(r'breadcrumb', re.IGNORECASE),
    re.compile(r'<nav[^>]*aria-label[^>]*breadcrumb', re.IGNORECASE),
    re.compile(r'schema\.org/BreadcrumbList', re.IGNORECASE),
]

ANCHOR_LINK = re.compile(r'<a[^>]+href=["\'][^"\']*#[^"\']*["\'][^>]*>', re.IGNORECASE)

RELATED_PATTERNS = [
    re.compile(r'related\s+(?:articles?|posts?|content|links?)', re.IGNORECASE),
    re.compile(r'see\s+also', re.IGNORECASE),
    re.compile(r'further\s+reading', re.IGNORECASE),
    re.compile(r'more\s+resources?', re.IGNORECASE),
]

HEADING_TAG = re.compile(r'<h[1-6][^>]*>', re.IGNORECASE)


class ContentStructureAnalyzer(BaseAnalyzer):
    """Analyzer for navigation aids and content organization."""

    metric_id = MetricId.CONTENT_STRUCTURE
    label = "Content Organization"

    def analyze(self, html, text, metadata=None):
        score = 0
        details = []

        if any(pattern.search(html) for pattern in TOC_PATTERNS):
            score += 25
            details.append("Table of contents found")

        if any(pattern.search(html) for pattern in BREADCRUMB_PATTERNS):
            score += 20
            details.append("Breadcrumb navigation found")

        anchor_links = len(ANCHOR_LINK.findall(html))
        if anchor_links > 0:
            score += min(20, anchor_links * 2)
            details.append(f"{anchor_links} internal anchor links found")

        if any(pattern.search(text) for pattern in RELATED_PATTERNS):
            score += 15
            details.append("Related content sections found")

        heading_count = len(HEADING_TAG.findall(html))
        if heading_count >= 3:
            score += min(20, heading_count * 2)
            details.append(f"{heading_count} section headings for structure")

        score = min(100, score)

        recommendation = get_recommendation(self.metric_id, {}, {"score": score})
        return self.build_result(score, ", ".join(details) if details else "Limited content organization detected", recommendation)
