"""
Recommendation lookup for readiness metrics.
Maps a metric id and its diagnostic values to a recommendation and ordered action items.
"""

from typing import Any, Dict, Optional

from app.core.constants import MetricId
from app.schemas.analysis import Recommendation


def _conditional(*items) -> list:
    """Drop action items whose condition evaluated to an empty string."""
    return [item for item in items if item]


def get_recommendation(metric_id: str, issues: Optional[Dict[str, Any]] = None, data: Optional[Dict[str, Any]] = None) -> Recommendation:
    """
    Build the recommendation for a metric.

    Args:
        metric_id: Stable metric id such as ``heading-structure``.
        issues: Issue flags found by the analyzer (e.g. ``h1_count``).
        data: Diagnostic values, usually including ``score``.

    Returns:
        A Recommendation. Unknown ids get a generic recommendation, never an error.
    """
    issues = issues or {}
    data = data or {}
    score = data.get("score") or 0

    if metric_id == MetricId.HEADING_STRUCTURE:
        h1_count = issues.get("h1_count", 1)
        if h1_count == 0:
            return Recommendation(
                recommendation="Add exactly one H1 tag to clearly define your main topic for AI systems",
                action_items=[
                    "Add a single <h1> tag with your primary page topic",
                    "Use H2 tags for main sections, H3 for subsections",
                    "Ensure logical hierarchy: H1 → H2 → H3 (don't skip levels)",
                    "Keep headings descriptive and keyword-rich",
                ],
            )
        if h1_count > 1:
            return Recommendation(
                recommendation="Reduce to exactly one H1 tag to avoid confusing AI about your main topic",
                action_items=[
                    f"Convert {h1_count - 1} extra H1 tags to H2 or H3",
                    "Keep the most important topic as your single H1",
                    "Use H2 tags for equal-weight sections",
                    "Maintain logical heading hierarchy",
                ],
            )
        return Recommendation(
            recommendation="Fix heading hierarchy gaps to help AI understand your content structure",
            action_items=[
                "Don't skip heading levels (e.g., H1 → H3)",
                "Use sequential heading levels (H1 → H2 → H3)",
                "Group related content under appropriate heading levels",
                "Make headings descriptive of the content that follows",
            ],
        )

    elif metric_id == MetricId.READABILITY:
        # score here is the raw Flesch value, not the bucket
        if score < 30:
            return Recommendation(
                recommendation="Significantly simplify your writing to make it more accessible to AI and users",
                action_items=[
                    "Break long sentences into shorter ones (aim for 15-20 words)",
                    "Replace complex words with simpler alternatives",
                    "Use active voice instead of passive voice",
                    "Add bullet points and numbered lists",
                    "Include more white space and paragraph breaks",
                ],
            )
        return Recommendation(
            recommendation="Improve readability with clearer structure and simpler language",
            action_items=[
                "Shorten sentences where possible",
                "Use more common words when available",
                "Add subheadings to break up long sections",
                "Include bullet points for lists",
                "Use shorter paragraphs (3-4 sentences max)",
            ],
        )

    elif metric_id == MetricId.META_TAGS:
        return Recommendation(
            recommendation="Add essential metadata to help AI understand your page context and purpose",
            action_items=_conditional(
                "" if data.get("has_title") else "Add a descriptive <title> tag (50-60 characters)",
                "" if data.get("has_description") else "Add a meta description (120-160 characters)",
                "" if data.get("has_author") else "Add author information for content attribution",
                "Include Open Graph tags for better social sharing",
                "Add structured data (JSON-LD) for rich snippets",
            ),
        )

    elif metric_id == MetricId.SEMANTIC_HTML:
        return Recommendation(
            recommendation="Use semantic HTML5 elements to help AI understand your content structure and meaning",
            action_items=[
                'Replace <div class="header"> with <header>',
                "Use <main> for primary content area",
                "Wrap navigation in <nav> elements",
                "Use <article> for standalone content pieces",
                "Add <section> for distinct content areas",
                "Include <aside> for sidebar content",
            ],
        )

    elif metric_id == MetricId.ACCESSIBILITY:
        return Recommendation(
            recommendation="Improve accessibility to help both users and AI systems understand your content",
            action_items=_conditional(
                "Add descriptive alt text to all images" if data.get("img_count", 0) > 0 else "",
                "Add ARIA labels to interactive elements",
                "Include proper heading hierarchy",
                "Ensure sufficient color contrast",
                "Add lang attribute to html tag",
                "Use semantic HTML elements",
            ),
        )

    elif metric_id == MetricId.ROBOTS_TXT:
        if score >= 80:
            return Recommendation(
                recommendation="Robots.txt properly configured for AI crawlers",
                action_items=["Monitor crawler behavior and update as needed"],
            )
        return Recommendation(
            recommendation="Create a robots.txt file to guide AI crawlers and search engines",
            action_items=[
                "Create /robots.txt in your website root",
                "Allow access for AI crawlers (GPTBot, CCBot, etc.)",
                "Include sitemap location",
                "Block sensitive directories if needed",
            ],
        )

    elif metric_id == MetricId.SITEMAP:
        if data.get("found"):
            return Recommendation(
                recommendation="Sitemap is properly configured for discoverability",
                action_items=[
                    "Keep sitemap updated with new content",
                    "Monitor crawl statistics in search console",
                    "Include priority and lastmod dates",
                ],
            )
        return Recommendation(
            recommendation="Generate an XML sitemap to help AI systems discover and index your content",
            action_items=[
                "Create an XML sitemap with all important pages",
                "Include lastmod dates for content freshness",
                "Add priority values for important pages",
                "Submit sitemap to search engines",
                "Reference sitemap in robots.txt",
            ],
        )

    elif metric_id == MetricId.LLMS_TXT:
        if data.get("found"):
            return Recommendation(
                recommendation="Great! You have defined AI usage permissions",
                action_items=[
                    "Review and update AI usage guidelines periodically",
                    "Monitor for compliance with AI training policies",
                ],
            )
        return Recommendation(
            recommendation="Add an llms.txt file to explicitly define how AI should interact with your content",
            action_items=[
                "Create /llms.txt in your website root",
                "Specify which content AI can use",
                "Include usage permissions and restrictions",
                "Add contact information for questions",
                "Reference your terms of service",
            ],
        )

    elif metric_id == MetricId.FAQ_STRUCTURE:
        if score < 30:
            return Recommendation(
                recommendation="Add a comprehensive FAQ section to provide clear question-answer pairs for AI training",
                action_items=[
                    "Create a dedicated FAQ page or section",
                    "Structure questions with clear, descriptive headings",
                    "Use HTML details/summary elements for expandable FAQs",
                    "Add FAQ schema markup for better search visibility",
                    "Include 10+ commonly asked questions about your topic",
                ],
            )
        return Recommendation(
            recommendation="Enhance your existing FAQ structure with schema markup and more comprehensive questions",
            action_items=[
                "Add FAQ schema markup to existing questions",
                "Expand FAQ with more detailed answers",
                "Group related questions into categories",
                "Add search functionality for large FAQ sections",
            ],
        )

    elif metric_id == MetricId.CONTENT_STRUCTURE:
        if score < 50:
            return Recommendation(
                recommendation="Improve content organization to help AI understand your knowledge structure",
                action_items=[
                    "Add a table of contents for long articles",
                    "Create logical section hierarchies with proper headings",
                    "Implement breadcrumb navigation",
                    'Add "Related Articles" sections with internal links',
                    "Use clear section dividers and navigation aids",
                ],
            )
        return Recommendation(
            recommendation="Your content structure is good - consider adding advanced organization features",
            action_items=[
                "Add jump-to-section navigation for very long content",
                "Implement content categorization and tagging",
                "Consider adding a site-wide content index",
            ],
        )

    elif metric_id == MetricId.TOPICAL_AUTHORITY:
        if score < 60:
            return Recommendation(
                recommendation="Establish stronger topical authority and expertise signals",
                action_items=[
                    "Add detailed author bios with credentials",
                    "Include publication and last-updated dates",
                    "Add citations and references to external sources",
                    "Create comprehensive, in-depth content",
                    "Show expertise through detailed explanations and examples",
                ],
            )
        return Recommendation(
            recommendation="Strong authority signals detected - maintain and expand your expertise",
            action_items=[
                "Keep content updated with latest industry changes",
                "Continue building author credibility",
                "Add more comprehensive references and citations",
            ],
        )

    return Recommendation(
        recommendation="Improve this aspect for better AI compatibility",
        action_items=["Review and optimize this metric"],
    )
