"""
Scraping utility functions.
This module fetches the page to analyze and reads its metadata.
"""

import logging
import random
from typing import Dict, Optional
from urllib.parse import urlparse

import httpx
from bs4 import BeautifulSoup
from pydantic import BaseModel

from app.core.config import settings
from app.core.exceptions import InvalidURLError, ScrapeError
from app.schemas.analysis import PageMetadata

logger = logging.getLogger(__name__)


class ScrapedPage(BaseModel):
    url: str
    html: str
    metadata: PageMetadata


def _get_random_headers() -> Dict[str, str]:
    """
    Generate browser-like headers so the page is served as to a regular visitor.
    """
    user_agents = [
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36",
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36",
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.2.1 Safari/605.1.15",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:121.0) Gecko/20100101 Firefox/121.0",
    ]

    return {
        "User-Agent": random.choice(user_agents),
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
        "Accept-Encoding": "gzip, deflate",
        "Connection": "keep-alive",
        "Upgrade-Insecure-Requests": "1",
    }


def normalize_url(url: Optional[str]) -> str:
    """
    Prefix ``https://`` when the URL has no http(s) scheme and check it parses.

    Raises:
        InvalidURLError: when the URL is empty or has no host after normalization.
    """
    url = (url or "").strip()
    if not url:
        raise InvalidURLError("URL is required")

    if not url.startswith(('http://', 'https://')):
        url = f"https://{url}"

    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
        # Out-of-range ports raise here
        parsed.port
    except ValueError as e:
        raise InvalidURLError(f"Invalid URL format: {url}") from e

    if not parsed.netloc or not hostname or any(ch.isspace() for ch in url):
        raise InvalidURLError(f"Invalid URL format: {url}")

    return url


def _meta_content(soup: BeautifulSoup, **attrs) -> Optional[str]:
    tag = soup.find("meta", attrs=attrs)
    if tag and tag.get("content"):
        return tag["content"].strip() or None
    return None


def extract_page_metadata(html: str) -> PageMetadata:
    """Read title, description, Open Graph and author metadata from the page head."""
    soup = BeautifulSoup(html, "html.parser")

    title = None
    if soup.title and soup.title.string:
        title = soup.title.string.strip() or None

    return PageMetadata(
        title=title,
        description=_meta_content(soup, name="description"),
        og_title=_meta_content(soup, property="og:title"),
        og_description=_meta_content(soup, property="og:description"),
        author=_meta_content(soup, name="author"),
    )


async def scrape_page(url: str, client: Optional[httpx.AsyncClient] = None) -> ScrapedPage:
    """
    Fetch ``url`` and return its HTML with the page metadata.

    Raises:
        ScrapeError: on transport errors, timeouts and non-2xx responses.
    """
    timeout_config = httpx.Timeout(settings.SCRAPE_TIMEOUT_SECONDS)

    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient(timeout=timeout_config, follow_redirects=True)

    try:
        response = await client.get(url, headers=_get_random_headers())
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.warning("Scrape of %s returned HTTP %s", url, e.response.status_code)
        raise ScrapeError(f"HTTP {e.response.status_code} while fetching {url}") from e
    except httpx.HTTPError as e:
        logger.warning("Scrape of %s failed: %s", url, e)
        raise ScrapeError(f"Failed to fetch {url}: {e}") from e
    finally:
        if owns_client:
            await client.aclose()

    html = response.text
    metadata = extract_page_metadata(html) if html else PageMetadata()
    return ScrapedPage(url=str(response.url), html=html, metadata=metadata)
