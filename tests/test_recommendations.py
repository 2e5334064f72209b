from app.core.constants import MetricId
from app.services.analysis.utils.recommendations import get_recommendation


class TestRecommendations:
    """Test cases for the metric recommendation lookup"""

    def test_unknown_metric_gets_generic_recommendation(self):
        rec = get_recommendation("made-up-metric")
        assert rec.recommendation == "Improve this aspect for better AI compatibility"
        assert rec.action_items == ["Review and optimize this metric"]

    def test_missing_h1(self):
        rec = get_recommendation(MetricId.HEADING_STRUCTURE, {"h1_count": 0})
        assert rec.recommendation.startswith("Add exactly one H1 tag")

    def test_multiple_h1_mentions_extra_count(self):
        rec = get_recommendation(MetricId.HEADING_STRUCTURE, {"h1_count": 3})
        assert rec.action_items[0] == "Convert 2 extra H1 tags to H2 or H3"

    def test_meta_tags_only_lists_missing_items(self):
        rec = get_recommendation(
            MetricId.META_TAGS, {}, {"has_title": True, "has_description": False, "has_author": True}
        )
        assert "Add a descriptive <title> tag (50-60 characters)" not in rec.action_items
        assert "Add a meta description (120-160 characters)" in rec.action_items
        assert "Add author information for content attribution" not in rec.action_items

    def test_accessibility_without_images_skips_alt_text_item(self):
        rec = get_recommendation(MetricId.ACCESSIBILITY, {}, {"img_count": 0})
        assert "Add descriptive alt text to all images" not in rec.action_items

        rec = get_recommendation(MetricId.ACCESSIBILITY, {}, {"img_count": 2})
        assert "Add descriptive alt text to all images" in rec.action_items

    def test_well_configured_robots(self):
        rec = get_recommendation(MetricId.ROBOTS_TXT, {}, {"score": 100})
        assert rec.recommendation == "Robots.txt properly configured for AI crawlers"

        rec = get_recommendation(MetricId.ROBOTS_TXT, {}, {"score": 60})
        assert rec.recommendation == "Create a robots.txt file to guide AI crawlers and search engines"

    def test_found_and_missing_llms_txt(self):
        assert get_recommendation(MetricId.LLMS_TXT, {}, {"found": True}).recommendation == (
            "Great! You have defined AI usage permissions"
        )
        assert get_recommendation(MetricId.LLMS_TXT).recommendation.startswith("Add an llms.txt file")

    def test_score_bands(self):
        assert get_recommendation(MetricId.FAQ_STRUCTURE, {}, {"score": 10}).recommendation.startswith("Add a comprehensive FAQ")
        assert get_recommendation(MetricId.FAQ_STRUCTURE, {}, {"score": 30}).recommendation.startswith("Enhance your existing FAQ")
        assert get_recommendation(MetricId.CONTENT_STRUCTURE, {}, {"score": 49}).recommendation.startswith("Improve content organization")
        assert get_recommendation(MetricId.TOPICAL_AUTHORITY, {}, {"score": 60}).recommendation.startswith("Strong authority signals")
