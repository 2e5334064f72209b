"""
Constants module for the AI Readiness application.

This module contains constant values used throughout the application.
"""
from enum import Enum

class CheckStatus(str, Enum):
    """Status of a single readiness check"""
    PASS = "pass"
    WARNING = "warning"
    FAIL = "fail"

class MetricId:
    """Stable metric identifiers"""
    LLMS_TXT = "llms-txt"
    ROBOTS_TXT = "robots-txt"
    SITEMAP = "sitemap"
    HEADING_STRUCTURE = "heading-structure"
    READABILITY = "readability"
    META_TAGS = "meta-tags"
    SEMANTIC_HTML = "semantic-html"
    ACCESSIBILITY = "accessibility"
    FAQ_STRUCTURE = "faq-structure"
    CONTENT_STRUCTURE = "content-structure"
    TOPICAL_AUTHORITY = "topical-authority"

METRIC_WEIGHTS = {
    # Content quality
    MetricId.READABILITY: 1.5,
    MetricId.HEADING_STRUCTURE: 1.4,
    MetricId.FAQ_STRUCTURE: 1.3,
    MetricId.META_TAGS: 1.2,
    # Authority and organization
    MetricId.TOPICAL_AUTHORITY: 1.2,
    MetricId.CONTENT_STRUCTURE: 1.1,
    # Technical foundation
    MetricId.SEMANTIC_HTML: 1.0,
    MetricId.ACCESSIBILITY: 0.9,
    # Domain-level files
    MetricId.ROBOTS_TXT: 0.8,
    MetricId.SITEMAP: 0.7,
    MetricId.LLMS_TXT: 0.3,
}

DEFAULT_METRIC_WEIGHT = 1.0

# (pass at or above, warning at or above)
STATUS_THRESHOLDS = {
    MetricId.HEADING_STRUCTURE: (80, 50),
    MetricId.META_TAGS: (70, 40),
    MetricId.SEMANTIC_HTML: (80, 40),
    MetricId.ACCESSIBILITY: (80, 50),
    MetricId.FAQ_STRUCTURE: (70, 40),
    MetricId.CONTENT_STRUCTURE: (70, 50),
    MetricId.TOPICAL_AUTHORITY: (80, 60),
    MetricId.ROBOTS_TXT: (80, 40),
}

CONTENT_SIGNAL_METRICS = (
    MetricId.READABILITY,
    MetricId.HEADING_STRUCTURE,
    MetricId.META_TAGS,
    MetricId.FAQ_STRUCTURE,
    MetricId.TOPICAL_AUTHORITY,
)
CONTENT_SIGNAL_MIN_SCORE = 60
MINIMUM_VIABLE_SCORE = 35
EXCELLENT_METRIC_SCORE = 80

DOCUMENTATION_HOST_MARKERS = ("docs.", "developer.", "api.")

TOP_TIER_DOMAINS = (
    "vercel.com", "stripe.com", "github.com", "openai.com",
    "anthropic.com", "google.com", "microsoft.com", "apple.com",
    "aws.amazon.com", "cloud.google.com", "azure.microsoft.com",
    "react.dev", "nextjs.org", "tailwindcss.com",
)

SECOND_TIER_DOMAINS = (
    "netlify.com", "heroku.com", "digitalocean.com", "cloudflare.com",
    "twilio.com", "slack.com", "notion.so", "linear.app", "figma.com",
)

DOCUMENTATION_BONUS = 20
TOP_TIER_BONUS = 18
SECOND_TIER_BONUS = 12

LLMS_TXT_VARIANTS = ("llms.txt", "LLMs.txt", "llms-full.txt")

SITEMAP_WELL_KNOWN_PATHS = (
    "/sitemap.xml",
    "/sitemap_index.xml",
    "/sitemap-index.xml",
    "/sitemaps/sitemap.xml",
    "/sitemap/sitemap.xml",
)

class AnalyticsEvent:
    """Analytics event types"""
    REPORT_CREATED = "report_created"
    LEAD_CAPTURED = "lead_captured"
    REPORT_VIEW = "report_view"

TRACKABLE_EVENTS = (
    "report_view",
    "section_view",
    "recommendation_click",
    "code_copy",
    "pdf_download",
    "time_spent",
    "scroll_depth",
)

ANALYTICS_TIMEFRAMES = {"7d": 7, "30d": 30, "90d": 90}

class Collections:
    """Document store collection names"""
    REPORTS = "reports"
    LEADS = "leads"
    ANALYTICS = "analytics"
