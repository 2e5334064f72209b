"""
Metadata Quality Analyzer module.
Scores title, description, author and publication-date metadata.
"""

import re

from app.core.constants import MetricId
from app.services.analysis.base import BaseAnalyzer
from app.services.analysis.utils.recommendations import get_recommendation

CONTENT_ATTRIBUTE = re.compile(r'content="([^"]*)"', re.IGNORECASE)


class MetadataAnalyzer(BaseAnalyzer):
    """Analyzer for page metadata quality."""

    metric_id = MetricId.META_TAGS
    label = "Metadata Quality"

    def analyze(self, html, text, metadata=None):
        og_title = metadata.og_title if metadata else None
        page_title = metadata.title if metadata else None
        og_description = metadata.og_description if metadata else None
        page_description = metadata.description if metadata else None

        has_title = bool(og_title or page_title or 'og:title' in html or '<title' in html)
        has_description = bool(
            og_description or page_description
            or 'og:description' in html or 'name="description"' in html
        )

        # Length of the first content="..." attribute on the page
        match = CONTENT_ATTRIBUTE.search(html)
        description_length = len(match.group(1)) if match else 0
        has_good_description_length = 70 <= description_length <= 160

        has_author = 'name="author"' in html or 'property="article:author"' in html
        has_publish_date = (
            'property="article:published_time"' in html
            or 'property="article:modified_time"' in html
        )

        score = 30
        details = []

        if has_title:
            score += 30
            details.append("Title ✓")
        elif '<title' in html:
            score += 20
            details.append("Basic title")

        if has_description:
            score += 25
            if has_good_description_length:
                score += 10
                details.append("Description ✓")
            else:
                details.append("Description")

        if has_author:
            score += 10
            details.append("Author ✓")

        if has_publish_date:
            score += 10
            details.append("Date ✓")

        score = min(100, score)

        recommendation = get_recommendation(
            self.metric_id,
            {"meta_score": score},
            {"has_title": has_title, "has_description": has_description, "has_author": has_author},
        )
        return self.build_result(score, ", ".join(details) if details else "Missing critical metadata", recommendation)
