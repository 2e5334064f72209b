"""
Base analyzer class for page readiness analysis.
This module contains the base analyzer class that all HTML metric analyzers inherit from.
"""

import math
from abc import ABC, abstractmethod
from typing import Optional

from app.core.constants import CheckStatus, STATUS_THRESHOLDS
from app.schemas.analysis import CheckResult, PageMetadata, Recommendation, clamp_score


def round_half_up(value: float) -> int:
    """Round .5 upwards (2.5 -> 3), unlike the built-in banker's round."""
    return int(math.floor(value + 0.5))


def status_for(metric_id: str, score: float) -> CheckStatus:
    """Map a score to a status using the metric's own pass/warning thresholds."""
    pass_at, warn_at = STATUS_THRESHOLDS[metric_id]
    if score >= pass_at:
        return CheckStatus.PASS
    if score >= warn_at:
        return CheckStatus.WARNING
    return CheckStatus.FAIL


class BaseAnalyzer(ABC):
    """Base class for all HTML metric analyzers."""

    metric_id: str = ""
    label: str = ""

    @abstractmethod
    def analyze(self, html: str, text: str, metadata: Optional[PageMetadata] = None) -> CheckResult:
        """
        Analyze a page and return its check result.

        Args:
            html: The raw page markup.
            text: Plain text extracted from the markup.
            metadata: Page metadata from the scraper, when available.

        Returns:
            CheckResult with a score in [0, 100], status, details and recommendation.
        """
        pass

    def build_result(self, score: float, details: str, recommendation: Recommendation, status: Optional[CheckStatus] = None) -> CheckResult:
        if status is None:
            status = status_for(self.metric_id, score)
        return CheckResult(
            id=self.metric_id,
            label=self.label,
            status=status,
            score=clamp_score(score),
            details=details,
            recommendation=recommendation.recommendation,
            action_items=recommendation.action_items,
        )

    def failed_result(self) -> CheckResult:
        """Placeholder used when this analyzer raised unexpectedly."""
        return CheckResult(
            id=self.metric_id,
            label=self.label,
            status=CheckStatus.FAIL,
            score=0,
            details="This check could not be completed for this page",
            recommendation="Re-run the analysis; if the problem persists the page markup may be malformed",
            action_items=[],
        )
