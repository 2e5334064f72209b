"""
Readability Analyzer module.
Buckets the approximate Flesch Reading Ease of the page text into a normalized score.
"""

from app.core.constants import CheckStatus, MetricId
from app.services.analysis.base import BaseAnalyzer, round_half_up
from app.services.analysis.utils.recommendations import get_recommendation
from app.services.analysis.utils.text_utils import calculate_readability

# (minimum raw Flesch score, normalized score, status, description)
READABILITY_BUCKETS = (
    (70, 100, CheckStatus.PASS, "Very readable"),
    (50, 80, CheckStatus.PASS, "Good readability"),
    (30, 50, CheckStatus.WARNING, "Difficult to read"),
)
LOWEST_BUCKET = (20, CheckStatus.FAIL, "Very difficult")


def bucket_readability(flesch: float):
    """Return (normalized score, status, description) for a raw Flesch score."""
    for minimum, normalized, status, description in READABILITY_BUCKETS:
        if flesch >= minimum:
            return normalized, status, description
    return LOWEST_BUCKET


class ReadabilityAnalyzer(BaseAnalyzer):
    """Analyzer for content readability."""

    metric_id = MetricId.READABILITY
    label = "Content Readability"

    def analyze(self, html, text, metadata=None):
        flesch = calculate_readability(text)
        score, status, description = bucket_readability(flesch)

        details = f"{description} (Flesch: {round_half_up(flesch)})"

        recommendation = get_recommendation(self.metric_id, {"readability_score": flesch}, {"score": flesch})
        return self.build_result(score, details, recommendation, status=status)
