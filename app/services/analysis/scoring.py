"""
Overall score aggregation.
Combines check results into a single 0-100 AI readiness score.
"""

import logging
from typing import List, Optional, Tuple
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict

from app.core import constants
from app.core.config import settings
from app.schemas.analysis import CheckResult
from app.services.analysis.base import round_half_up

logger = logging.getLogger(__name__)


class ScoringConfig(BaseModel):
    """Immutable weights, bonuses and reputation lists used by the aggregator."""

    model_config = ConfigDict(frozen=True)

    weights: Tuple[Tuple[str, float], ...] = tuple(constants.METRIC_WEIGHTS.items())
    default_weight: float = constants.DEFAULT_METRIC_WEIGHT
    content_signal_metrics: Tuple[str, ...] = constants.CONTENT_SIGNAL_METRICS
    content_signal_min_score: int = constants.CONTENT_SIGNAL_MIN_SCORE
    minimum_viable_score: int = constants.MINIMUM_VIABLE_SCORE
    excellent_metric_score: int = constants.EXCELLENT_METRIC_SCORE
    documentation_host_markers: Tuple[str, ...] = constants.DOCUMENTATION_HOST_MARKERS
    top_tier_domains: Tuple[str, ...] = constants.TOP_TIER_DOMAINS
    second_tier_domains: Tuple[str, ...] = constants.SECOND_TIER_DOMAINS

    def weight_for(self, metric_id: str) -> float:
        return dict(self.weights).get(metric_id, self.default_weight)

    @classmethod
    def from_settings(cls) -> "ScoringConfig":
        return cls(
            documentation_host_markers=tuple(settings.DOCUMENTATION_HOST_MARKERS),
            top_tier_domains=tuple(settings.TOP_TIER_DOMAINS),
            second_tier_domains=tuple(settings.SECOND_TIER_DOMAINS),
        )


DEFAULT_SCORING_CONFIG = ScoringConfig()


def _matches_domain(host: str, domains) -> bool:
    return any(host == domain or host.endswith(f".{domain}") for domain in domains)


def get_domain_reputation_bonus(hostname: str, config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> int:
    """
    Bonus for documentation hosts and well-known developer platforms.

    Documentation markers are checked before the tier lists.
    """
    host = hostname.lower().replace("www.", "", 1)

    if any(marker in host for marker in config.documentation_host_markers):
        return constants.DOCUMENTATION_BONUS

    if _matches_domain(host, config.top_tier_domains):
        return constants.TOP_TIER_BONUS

    if _matches_domain(host, config.second_tier_domains):
        return constants.SECOND_TIER_BONUS

    return 0


def calculate_base_score(checks: List[CheckResult], config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> int:
    """Weighted mean of check scores, plus the content-signal bonus and minimum-score floor."""
    weighted_sum = 0.0
    total_weight = 0.0
    for check in checks:
        weight = config.weight_for(check.id)
        weighted_sum += check.score * weight
        total_weight += weight

    base_score = round_half_up(weighted_sum / total_weight) if total_weight else 0

    content_signals = sum(
        1 for check in checks
        if check.id in config.content_signal_metrics and check.score >= config.content_signal_min_score
    )
    if content_signals >= 3:
        base_score += 15
    elif content_signals >= 2:
        base_score += 10

    if base_score < config.minimum_viable_score and any(check.score >= config.excellent_metric_score for check in checks):
        base_score = config.minimum_viable_score

    return base_score


def aggregate(checks: List[CheckResult], url: str, config: Optional[ScoringConfig] = None) -> int:
    """
    Compute the overall score for ``checks`` of the page at ``url``.

    Returns:
        int in [0, 100]
    """
    config = config or DEFAULT_SCORING_CONFIG

    base_score = calculate_base_score(checks, config)
    hostname = urlparse(url).hostname or ""
    reputation_bonus = get_domain_reputation_bonus(hostname, config)

    overall_score = max(0, min(100, base_score + reputation_bonus))
    logger.info("Final scoring for %s: base=%s, bonus=%s, final=%s", hostname, base_score, reputation_bonus, overall_score)
    return overall_score
