"""
FAQ Structure Analyzer module.
Looks for FAQ schema, expandable details elements, question phrasing and FAQ headings.
"""

import re

from app.core.constants import MetricId
from app.services.analysis.base import BaseAnalyzer
from app.services.analysis.utils.recommendations import get_recommendation

DETAILS_TAG = re.compile(r'<details[^>]*>', re.IGNORECASE)

QUESTION_PATTERNS = [
    re.compile(r'what\s+is\s+[^.?]+\?', re.IGNORECASE),
    re.compile(r'how\s+to\s+[^.?]+\?', re.IGNORECASE),
    re.compile(r'why\s+does\s+[^.?]+\?', re.IGNORECASE),
    re.compile(r'when\s+should\s+[^.?]+\?', re.IGNORECASE),
    re.compile(r'where\s+can\s+[^.?]+\?', re.IGNORECASE),
    re.compile(r'frequently\s+asked\s+questions?', re.IGNORECASE),
    re.compile(r'common\s+questions?', re.IGNORECASE),
    re.compile(r'q&a|q\s*&\s*a', re.IGNORECASE),
]

FAQ_HEADING = re.compile(r'<h[1-6][^>]*>.*?(faq|question|help|support).*?</h[1-6]>', re.IGNORECASE)


class FaqStructureAnalyzer(BaseAnalyzer):
    """Analyzer for FAQ and Q&A content."""

    metric_id = MetricId.FAQ_STRUCTURE
    label = "FAQ & Q&A Structure"

    def analyze(self, html, text, metadata=None):
        score = 0
        details = []

        if 'schema.org/FAQPage' in html or 'schema.org/Question' in html:
            score += 30
            details.append("FAQ schema markup found")

        details_count = len(DETAILS_TAG.findall(html))
        if details_count > 0:
            score += min(25, details_count * 5)
            details.append(f"{details_count} expandable FAQ items found")

        question_count = sum(len(pattern.findall(text)) for pattern in QUESTION_PATTERNS)
        if question_count > 0:
            score += min(35, question_count * 3)
            details.append(f"{question_count} question-answer patterns detected")

        if FAQ_HEADING.search(html):
            score += 10
            details.append("FAQ section headers found")

        score = min(100, score)

        recommendation = get_recommendation(self.metric_id, {}, {"score": score})
        return self.build_result(score, ", ".join(details) if details else "No FAQ structure detected", recommendation)
