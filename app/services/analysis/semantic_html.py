"""
Semantic HTML Analyzer module.
"""

from app.core.constants import MetricId
from app.services.analysis.base import BaseAnalyzer
from app.services.analysis.utils.recommendations import get_recommendation

SEMANTIC_TAGS = ('<article', '<nav', '<main', '<section', '<header', '<footer', '<aside')

# Client-rendered apps often rely on ARIA roles on divs instead of HTML5 elements
FRAMEWORK_MARKERS = ('__next', '_app', 'react', 'vue', 'svelte')


class SemanticHtmlAnalyzer(BaseAnalyzer):
    """Analyzer for HTML5 semantic element usage."""

    metric_id = MetricId.SEMANTIC_HTML
    label = "Semantic HTML"

    def analyze(self, html, text, metadata=None):
        semantic_count = sum(1 for tag in SEMANTIC_TAGS if tag in html)
        has_aria_roles = 'role="' in html or 'aria-' in html
        is_modern_framework = any(marker in html for marker in FRAMEWORK_MARKERS)

        score = min(
            100,
            semantic_count * 60 // 5
            + (20 if has_aria_roles else 0)
            + (20 if is_modern_framework else 0),
        )

        recommendation = get_recommendation(self.metric_id, {"semantic_count": semantic_count}, {"score": score})
        return self.build_result(score, f"Found {semantic_count} semantic HTML5 elements", recommendation)
