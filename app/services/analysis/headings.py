"""
Heading Structure Analyzer module.
Checks for a single H1 and a heading hierarchy that does not skip levels.
"""

import re

from app.core.constants import MetricId
from app.services.analysis.base import BaseAnalyzer
from app.services.analysis.utils.recommendations import get_recommendation

H1_TAG = re.compile(r'<h1[^>]*>', re.IGNORECASE)
HEADING_LEVEL = re.compile(r'<h([1-6])[^>]*>', re.IGNORECASE)


class HeadingStructureAnalyzer(BaseAnalyzer):
    """Analyzer for heading hierarchy."""

    metric_id = MetricId.HEADING_STRUCTURE
    label = "Heading Hierarchy"

    def analyze(self, html, text, metadata=None):
        h1_count = len(H1_TAG.findall(html))
        levels = [int(level) for level in HEADING_LEVEL.findall(html)]

        score = 100
        issues = []

        if h1_count == 0:
            score -= 40
            issues.append("No H1 found")
        elif h1_count > 1:
            score -= 30
            issues.append(f"Multiple H1s ({h1_count}) create topic ambiguity")

        for previous, current in zip(levels, levels[1:]):
            if current - previous > 1:
                score -= 15
                issues.append(f"Skipped heading level (H{previous} → H{current})")

        score = max(0, score)

        if issues:
            details = ", ".join(issues)
        else:
            details = f"Perfect hierarchy with {h1_count} H1 and logical structure"

        recommendation = get_recommendation(self.metric_id, {"h1_count": h1_count, "heading_issues": issues}, {"score": score})
        return self.build_result(score, details, recommendation)
