"""
Topical Authority Analyzer module.
This module scores author, date, citation, depth and expertise signals of a page.
"""

import re

from app.core.constants import MetricId
from app.services.analysis.base import BaseAnalyzer
from app.services.analysis.utils.recommendations import get_recommendation
from app.services.analysis.utils.text_utils import WHITESPACE

AUTHOR_PATTERNS = [
    re.compile(r'author|by\s+[A-Z][a-z]+\s+[A-Z][a-z]+', re.IGNORECASE),
    re.compile(r'<meta[^>]+name=["\']author["\'][^>]*>', re.IGNORECASE),
    re.compile(r'rel=["\']author["\']', re.IGNORECASE),
    re.compile(r'itemprop=["\']author["\']', re.IGNORECASE),
]

DATE_PATTERNS = [
    re.compile(r'<time[^>]*datetime', re.IGNORECASE),
    re.compile(r'published|updated|modified', re.IGNORECASE),
    re.compile(r'<meta[^>]+property=["\']article:(?:published_time|modified_time)["\'][^>]*>', re.IGNORECASE),
]

CITATION_PATTERNS = [
    re.compile(r'references?|sources?|citations?', re.IGNORECASE),
    re.compile(r'according\s+to', re.IGNORECASE),
    re.compile(r'research\s+(?:shows?|indicates?)', re.IGNORECASE),
]

EXPERTISE_PATTERNS = [
    re.compile(r'certified|expert|specialist|professional', re.IGNORECASE),
    re.compile(r'years?\s+of\s+experience', re.IGNORECASE),
    re.compile(r"PhD|doctorate|master's|bachelor's", re.IGNORECASE),
    re.compile(r'industry\s+(?:leader|expert|veteran)', re.IGNORECASE),
]


class TopicalAuthorityAnalyzer(BaseAnalyzer):
    """Analyzer for expertise and authority signals."""

    metric_id = MetricId.TOPICAL_AUTHORITY
    label = "Topical Authority"

    def analyze(self, html, text, metadata=None):
        score = 0
        details = []

        has_author = (
            any(pattern.search(html) for pattern in AUTHOR_PATTERNS)
            or bool(metadata and metadata.author)
            or 'schema.org/Person' in html
        )
        if has_author:
            score += 25
            details.append("Author information found")

        if any(pattern.search(html) for pattern in DATE_PATTERNS):
            score += 20
            details.append("Publication dates found")

        citation_count = sum(len(pattern.findall(text)) for pattern in CITATION_PATTERNS)
        if citation_count > 0:
            score += min(25, citation_count * 3)
            details.append(f"{citation_count} citations/references found")

        # Empty text still splits into one fragment
        word_count = len(WHITESPACE.split(text))
        if word_count > 1500:
            score += 15
            details.append(f"In-depth content ({word_count} words)")
        elif word_count > 800:
            score += 10
            details.append(f"Good content length ({word_count} words)")

        if any(pattern.search(text) for pattern in EXPERTISE_PATTERNS):
            score += 15
            details.append("Expertise indicators found")

        score = min(100, score)

        recommendation = get_recommendation(self.metric_id, {}, {"score": score})
        return self.build_result(score, ", ".join(details) if details else "Limited authority signals detected", recommendation)
