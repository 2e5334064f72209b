import pytest

from app.core.constants import MetricId
from app.schemas.analysis import CheckResult
from app.services.analysis.base import round_half_up
from app.services.analysis.scoring import (
    DEFAULT_SCORING_CONFIG,
    ScoringConfig,
    aggregate,
    calculate_base_score,
    get_domain_reputation_bonus,
)

ALL_METRICS = [
    MetricId.LLMS_TXT,
    MetricId.ROBOTS_TXT,
    MetricId.SITEMAP,
    MetricId.HEADING_STRUCTURE,
    MetricId.READABILITY,
    MetricId.META_TAGS,
    MetricId.SEMANTIC_HTML,
    MetricId.ACCESSIBILITY,
    MetricId.FAQ_STRUCTURE,
    MetricId.CONTENT_STRUCTURE,
    MetricId.TOPICAL_AUTHORITY,
]


def make_checks(scores):
    return [
        CheckResult(id=metric_id, label=metric_id, status="warning", score=score, details="", recommendation="")
        for metric_id, score in scores.items()
    ]


def uniform_checks(score):
    return make_checks({metric_id: score for metric_id in ALL_METRICS})


class TestDomainReputation:
    """Test cases for the domain reputation bonus"""

    @pytest.mark.parametrize("hostname,bonus", [
        ("docs.example.com", 20),
        ("developer.mozilla.org", 20),
        ("api.randomsite.io", 20),
        ("docs.github.com", 20),
        ("vercel.com", 18),
        ("www.vercel.com", 18),
        ("blog.stripe.com", 18),
        ("netlify.com", 12),
        ("app.netlify.com", 12),
        ("randomsite.io", 0),
        ("notvercel.com", 0),
    ])
    def test_bonus(self, hostname, bonus):
        assert get_domain_reputation_bonus(hostname) == bonus

    def test_lists_can_be_injected(self):
        config = ScoringConfig(top_tier_domains=("example.org",), second_tier_domains=(), documentation_host_markers=())
        assert get_domain_reputation_bonus("example.org", config) == 18
        assert get_domain_reputation_bonus("vercel.com", config) == 0

    def test_config_is_frozen(self):
        with pytest.raises(Exception):
            DEFAULT_SCORING_CONFIG.minimum_viable_score = 0


class TestBaseScore:
    """Test cases for the weighted base score"""

    def test_all_fifty(self):
        assert calculate_base_score(uniform_checks(50)) == 50

    def test_content_signal_bonus(self):
        scores = {metric_id: 50 for metric_id in ALL_METRICS}
        scores[MetricId.READABILITY] = 60
        scores[MetricId.HEADING_STRUCTURE] = 60
        base_two = calculate_base_score(make_checks(scores))

        scores[MetricId.META_TAGS] = 60
        base_three = calculate_base_score(make_checks(scores))

        # weighted means round to 53 and 54
        assert base_two == 53 + 10
        assert base_three == 54 + 15

    def test_floor_applies_with_one_excellent_metric(self):
        scores = {metric_id: 0 for metric_id in ALL_METRICS}
        scores[MetricId.LLMS_TXT] = 100
        assert calculate_base_score(make_checks(scores)) == 35

    def test_floor_needs_an_excellent_metric(self):
        scores = {metric_id: 10 for metric_id in ALL_METRICS}
        assert calculate_base_score(make_checks(scores)) == 10

    def test_unknown_metric_uses_default_weight(self):
        checks = make_checks({"custom-metric": 100, MetricId.LLMS_TXT: 0})
        # (100 * 1.0 + 0 * 0.3) / 1.3 = 76.9
        assert calculate_base_score(checks) == 77

    def test_empty_checks(self):
        assert calculate_base_score([]) == 0


class TestAggregate:
    """Test cases for the overall score"""

    def test_all_fifty_plus_reputation(self):
        checks = uniform_checks(50)
        assert aggregate(checks, "https://randomsite.io/") == 50
        assert aggregate(checks, "https://docs.example.com/guide") == 70
        assert aggregate(checks, "https://vercel.com") == 68
        assert aggregate(checks, "https://netlify.com") == 62

    def test_capped_at_100(self):
        assert aggregate(uniform_checks(100), "https://docs.example.com") == 100

    def test_result_in_range(self):
        assert aggregate(uniform_checks(0), "https://example.com") == 0

    def test_is_deterministic(self):
        checks = uniform_checks(73)
        assert aggregate(checks, "https://vercel.com") == aggregate(checks, "https://vercel.com")


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.4999) == 2
    assert round_half_up(0) == 0


def test_weights_table_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_SCORING_CONFIG.weights[0] = (MetricId.READABILITY, 99)
    assert DEFAULT_SCORING_CONFIG.weight_for(MetricId.READABILITY) == 1.5
    assert DEFAULT_SCORING_CONFIG.weight_for("custom-metric") == 1.0
