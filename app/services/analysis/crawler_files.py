"""
Crawler file probes.
This module checks a site's robots.txt, XML sitemap and llms.txt files.

Every fetch has its own timeout. A timeout or network error only affects the probe
that hit it; that file is then reported as not found.
"""

import asyncio
import logging
import re
from typing import List, Optional, Tuple
from urllib.parse import urljoin, urlparse

import httpx

from app.core.config import settings
from app.core.constants import (
    CheckStatus,
    LLMS_TXT_VARIANTS,
    MetricId,
    SITEMAP_WELL_KNOWN_PATHS,
)
from app.schemas.analysis import CheckResult, CrawlerFileChecks
from app.services.analysis.base import status_for
from app.services.analysis.utils.recommendations import get_recommendation

logger = logging.getLogger(__name__)

CRAWLER_HEADERS = {
    'User-Agent': 'Mozilla/5.0 (compatible; AIReadinessBot/1.0)'
}

SITEMAP_DIRECTIVE = re.compile(r'Sitemap:\s*(.+)', re.IGNORECASE)

SITEMAP_MARKERS = ('<?xml', '<urlset', '<sitemapindex', '<url>', '<sitemap>')

NOT_LLMS_MARKERS = ('<!doctype', '<html', '404 not found', 'page not found', 'cannot be found')


def get_origin(url: str) -> str:
    """Return scheme://host[:port] of ``url``, defaulting to https."""
    if not url.startswith(('http://', 'https://')):
        url = f"https://{url}"
    parsed = urlparse(url)
    return f"{parsed.scheme}://{parsed.netloc}"


def _not_found(metric_id: str, label: str, details: str) -> CheckResult:
    recommendation = get_recommendation(metric_id)
    return CheckResult(
        id=metric_id,
        label=label,
        status=CheckStatus.FAIL,
        score=0,
        details=details,
        recommendation=recommendation.recommendation,
        action_items=recommendation.action_items,
    )


def default_robots_check() -> CheckResult:
    return _not_found(MetricId.ROBOTS_TXT, "Robots.txt", "No robots.txt file found")


def default_sitemap_check() -> CheckResult:
    return _not_found(MetricId.SITEMAP, "Sitemap", "No sitemap.xml found")


def default_llms_check() -> CheckResult:
    return _not_found(MetricId.LLMS_TXT, "LLMs.txt", "No llms.txt file found")


def is_valid_llms_txt(body: str) -> bool:
    """An llms.txt hit must have some content and must not be an HTML or 404 page."""
    if len(body) <= 10:
        return False
    lowered = body.lower()
    return not any(marker in lowered for marker in NOT_LLMS_MARKERS)


def is_valid_sitemap_body(body: str) -> bool:
    return any(marker in body for marker in SITEMAP_MARKERS) and '<!doctype html' not in body.lower()


def extract_sitemap_directives(robots_text: str, origin: str) -> List[str]:
    """Return the values of all ``Sitemap:`` lines, resolved against the site origin."""
    urls = []
    for value in SITEMAP_DIRECTIVE.findall(robots_text):
        value = value.strip()
        if value:
            try:
                urls.append(urljoin(f"{origin}/", value))
            except ValueError:
                logger.debug("Skipping malformed sitemap directive: %s", value)
    return urls


async def fetch_text(client: httpx.AsyncClient, url: str, timeout: float) -> Optional[str]:
    """
    GET ``url`` and return the body of a 2xx response.

    Returns None on non-2xx responses, timeouts and network errors.
    """
    try:
        response = await asyncio.wait_for(client.get(url), timeout=timeout)
    except asyncio.TimeoutError:
        logger.debug("Probe timed out after %ss: %s", timeout, url)
        return None
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.debug("Probe failed for %s: %s", url, e)
        return None

    if not response.is_success:
        return None
    return response.text


async def check_robots_txt(client: httpx.AsyncClient, origin: str, timeout: float) -> Tuple[CheckResult, List[str]]:
    """
    Probe ``/robots.txt``.

    Returns:
        Tuple containing:
        - CheckResult scored 60 for a User-agent line plus 40 for a Sitemap directive
        - the sitemap URLs listed in the file
    """
    robots_text = await fetch_text(client, f"{origin}/robots.txt", timeout)
    if robots_text is None:
        return default_robots_check(), []

    sitemap_urls = extract_sitemap_directives(robots_text, origin)
    has_user_agent = 'user-agent' in robots_text.lower()
    has_sitemap = len(sitemap_urls) > 0

    score = (60 if has_user_agent else 0) + (40 if has_sitemap else 0)
    details = "Robots.txt found"
    if has_sitemap:
        details += f" with {len(sitemap_urls)} sitemap reference(s)"

    recommendation = get_recommendation(MetricId.ROBOTS_TXT, {}, {"score": score})
    check = CheckResult(
        id=MetricId.ROBOTS_TXT,
        label="Robots.txt",
        status=status_for(MetricId.ROBOTS_TXT, score),
        score=score,
        details=details,
        recommendation=recommendation.recommendation,
        action_items=recommendation.action_items,
    )
    return check, sitemap_urls


async def check_llms_txt(client: httpx.AsyncClient, origin: str, timeout: float) -> CheckResult:
    """
    Probe every llms.txt variant concurrently.

    The winner is the first variant in LLMS_TXT_VARIANTS order whose body validates,
    regardless of which request finished first.
    """
    bodies = await asyncio.gather(
        *(fetch_text(client, f"{origin}/{filename}", timeout) for filename in LLMS_TXT_VARIANTS)
    )

    for filename, body in zip(LLMS_TXT_VARIANTS, bodies):
        if body is not None and is_valid_llms_txt(body):
            recommendation = get_recommendation(MetricId.LLMS_TXT, {}, {"found": True})
            return CheckResult(
                id=MetricId.LLMS_TXT,
                label="LLMs.txt",
                status=CheckStatus.PASS,
                score=100,
                details=f"{filename} file found with AI usage guidelines",
                recommendation=recommendation.recommendation,
                action_items=recommendation.action_items,
            )

    return default_llms_check()


def sitemap_candidates(origin: str, robots_sitemaps: List[str]) -> List[str]:
    """Sitemaps from robots.txt first, then the well-known locations, without duplicates."""
    candidates = []
    for url in list(robots_sitemaps) + [f"{origin}{path}" for path in SITEMAP_WELL_KNOWN_PATHS]:
        if url not in candidates:
            candidates.append(url)
    return candidates


async def check_sitemap(client: httpx.AsyncClient, origin: str, robots_sitemaps: List[str], timeout: float) -> CheckResult:
    """Probe sitemap candidates one at a time and stop at the first valid XML sitemap."""
    for sitemap_url in sitemap_candidates(origin, robots_sitemaps):
        body = await fetch_text(client, sitemap_url, timeout)
        if body is None or not is_valid_sitemap_body(body):
            continue

        if sitemap_url in robots_sitemaps:
            details = "Valid XML sitemap found (referenced in robots.txt)"
        else:
            details = f"Valid XML sitemap found at {sitemap_url.replace(origin, '')}"

        recommendation = get_recommendation(MetricId.SITEMAP, {}, {"found": True})
        return CheckResult(
            id=MetricId.SITEMAP,
            label="Sitemap",
            status=CheckStatus.PASS,
            score=100,
            details=details,
            recommendation=recommendation.recommendation,
            action_items=recommendation.action_items,
        )

    return default_sitemap_check()


async def probe_files(url: str, client: Optional[httpx.AsyncClient] = None, timeout: Optional[float] = None) -> CrawlerFileChecks:
    """
    Check robots.txt, sitemap and llms.txt for the site hosting ``url``.

    robots.txt and the llms.txt variants are fetched concurrently; sitemap candidates
    are tried afterwards so that sitemaps declared in robots.txt go first.

    Args:
        url: Any URL on the site.
        client: Optional shared client (tests pass one with a mock transport).
        timeout: Per-request timeout in seconds, defaults to PROBE_TIMEOUT_SECONDS.
    """
    timeout = timeout if timeout is not None else settings.PROBE_TIMEOUT_SECONDS
    origin = get_origin(url)

    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient(headers=CRAWLER_HEADERS, follow_redirects=True, timeout=timeout)

    try:
        (robots, robots_sitemaps), llms = await asyncio.gather(
            check_robots_txt(client, origin, timeout),
            check_llms_txt(client, origin, timeout),
        )
        sitemap = await check_sitemap(client, origin, robots_sitemaps, timeout)
    finally:
        if owns_client:
            await client.aclose()

    return CrawlerFileChecks(robots=robots, sitemap=sitemap, llms=llms)
