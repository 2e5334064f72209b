"""
Accessibility Analyzer module.
Image alt text coverage plus ARIA, role and lang attribute signals.
"""

from app.core.constants import MetricId
from app.services.analysis.base import BaseAnalyzer, round_half_up, status_for
from app.services.analysis.utils.recommendations import get_recommendation


class AccessibilityAnalyzer(BaseAnalyzer):
    """Analyzer for accessibility markup."""

    metric_id = MetricId.ACCESSIBILITY
    label = "Accessibility"

    def analyze(self, html, text, metadata=None):
        alt_count = html.count('alt="')
        img_count = html.count('<img')
        alt_text_ratio = (alt_count / img_count) * 100 if img_count > 0 else 100

        has_aria_labels = 'aria-label' in html
        has_aria_described_by = 'aria-describedby' in html
        has_role = 'role="' in html
        has_lang = 'lang="' in html

        # Pages without images are not penalized
        image_score = 40 if img_count == 0 else alt_text_ratio * 0.4

        raw_score = min(
            100,
            image_score
            + (20 if has_aria_labels else 0)
            + (10 if has_aria_described_by else 0)
            + (15 if has_role else 0)
            + (15 if has_lang else 0),
        )

        details = (
            f"{round_half_up(alt_text_ratio)}% images have alt text, "
            f"ARIA labels: {'Yes' if has_aria_labels else 'No'}"
        )

        recommendation = get_recommendation(
            self.metric_id,
            {"accessibility_score": raw_score},
            {"img_count": img_count, "alt_text_ratio": alt_text_ratio, "has_aria_labels": has_aria_labels},
        )
        # Status is judged on the unrounded score, the stored score is rounded
        return self.build_result(round_half_up(raw_score), details, recommendation, status=status_for(self.metric_id, raw_score))
