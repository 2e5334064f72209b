import asyncio

import httpx
import pytest

from app.services.analysis.crawler_files import (
    extract_sitemap_directives,
    get_origin,
    is_valid_llms_txt,
    is_valid_sitemap_body,
    probe_files,
    sitemap_candidates,
)

SITEMAP_XML = '<?xml version="1.0" encoding="UTF-8"?><urlset><url><loc>https://x.com/</loc></url></urlset>'
LLMS_TXT = "# Example\n\n> Guidelines for language models using this site.\n"


def mock_client(routes, requested=None):
    """AsyncClient whose responses come from a {path: (status, body)} table; other paths 404."""

    def handler(request: httpx.Request) -> httpx.Response:
        if requested is not None:
            requested.append(str(request.url))
        status, body = routes.get(request.url.path, (404, "Not Found"))
        return httpx.Response(status, text=body)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestHelpers:
    """Test cases for crawler file helpers"""

    def test_get_origin(self):
        assert get_origin("https://www.example.com/blog/post?id=1") == "https://www.example.com"
        assert get_origin("example.com/path") == "https://example.com"
        assert get_origin("http://localhost:8000/x") == "http://localhost:8000"

    def test_extract_sitemap_directives(self):
        robots = "User-agent: *\nDisallow: /admin\nsitemap: https://x.com/a.xml\nSitemap: /b.xml\n"
        assert extract_sitemap_directives(robots, "https://x.com") == ["https://x.com/a.xml", "https://x.com/b.xml"]

    def test_malformed_sitemap_directive_is_skipped(self):
        robots = "User-agent: *\nSitemap: http://[broken\nSitemap: /ok.xml\n"
        assert extract_sitemap_directives(robots, "https://x.com") == ["https://x.com/ok.xml"]

    def test_sitemap_candidates_put_robots_first_without_duplicates(self):
        candidates = sitemap_candidates("https://x.com", ["https://x.com/sitemap.xml", "https://cdn.x.com/map.xml"])
        assert candidates == [
            "https://x.com/sitemap.xml",
            "https://cdn.x.com/map.xml",
            "https://x.com/sitemap_index.xml",
            "https://x.com/sitemap-index.xml",
            "https://x.com/sitemaps/sitemap.xml",
            "https://x.com/sitemap/sitemap.xml",
        ]

    def test_llms_txt_validation(self):
        assert is_valid_llms_txt(LLMS_TXT)
        assert not is_valid_llms_txt("short")
        assert not is_valid_llms_txt("<html><body>404 Not Found</body></html>")
        assert not is_valid_llms_txt("<!DOCTYPE html><html><body>Hello there friend</body></html>")
        assert not is_valid_llms_txt("Sorry, that page cannot be found on this server")

    def test_sitemap_body_validation(self):
        assert is_valid_sitemap_body(SITEMAP_XML)
        assert is_valid_sitemap_body("<sitemapindex><sitemap></sitemap></sitemapindex>")
        assert not is_valid_sitemap_body("<!DOCTYPE html><html><body><url></url></body></html>")
        assert not is_valid_sitemap_body("plain text")


class TestProbeFiles:
    """Test cases for the robots.txt, sitemap and llms.txt probes"""

    @pytest.mark.asyncio
    async def test_nothing_found(self):
        async with mock_client({}) as client:
            checks = await probe_files("https://x.com/page", client=client)

        assert checks.robots.score == 0
        assert checks.robots.status == "fail"
        assert checks.robots.details == "No robots.txt file found"
        assert checks.sitemap.details == "No sitemap.xml found"
        assert checks.llms.details == "No llms.txt file found"

    @pytest.mark.asyncio
    async def test_robots_with_sitemap_scores_100(self):
        routes = {
            "/robots.txt": (200, "User-agent: *\nSitemap: https://x.com/sitemap.xml"),
            "/sitemap.xml": (200, SITEMAP_XML),
        }
        async with mock_client(routes) as client:
            checks = await probe_files("https://x.com", client=client)

        assert checks.robots.score == 100
        assert checks.robots.status == "pass"
        assert checks.robots.details == "Robots.txt found with 1 sitemap reference(s)"
        assert checks.robots.recommendation == "Robots.txt properly configured for AI crawlers"
        assert checks.sitemap.score == 100
        assert checks.sitemap.details == "Valid XML sitemap found (referenced in robots.txt)"

    @pytest.mark.asyncio
    async def test_robots_without_sitemap_is_a_warning(self):
        async with mock_client({"/robots.txt": (200, "User-agent: *\nDisallow:")}) as client:
            checks = await probe_files("https://x.com", client=client)

        assert checks.robots.score == 60
        assert checks.robots.status == "warning"
        assert checks.robots.details == "Robots.txt found"

    @pytest.mark.asyncio
    async def test_robots_sitemap_is_probed_before_fallbacks(self):
        requested = []
        routes = {
            "/robots.txt": (200, "User-agent: *\nSitemap: https://x.com/custom-map.xml"),
            "/sitemap_index.xml": (200, SITEMAP_XML),
        }
        async with mock_client(routes, requested) as client:
            checks = await probe_files("https://x.com", client=client)

        sitemap_requests = [url for url in requested if "map" in url]
        assert sitemap_requests == [
            "https://x.com/custom-map.xml",
            "https://x.com/sitemap.xml",
            "https://x.com/sitemap_index.xml",
        ]
        assert checks.sitemap.details == "Valid XML sitemap found at /sitemap_index.xml"

    @pytest.mark.asyncio
    async def test_html_sitemap_is_rejected(self):
        routes = {"/sitemap.xml": (200, "<!DOCTYPE html><html><body><url>nope</url></body></html>")}
        async with mock_client(routes) as client:
            checks = await probe_files("https://x.com", client=client)

        assert checks.sitemap.score == 0

    @pytest.mark.asyncio
    async def test_soft_404_llms_txt_is_rejected(self):
        body = "<html><body>404 Not Found</body></html>"
        routes = {"/llms.txt": (200, body), "/LLMs.txt": (200, body), "/llms-full.txt": (200, body)}
        async with mock_client(routes) as client:
            checks = await probe_files("https://x.com", client=client)

        assert checks.llms.score == 0
        assert checks.llms.status == "fail"

    @pytest.mark.asyncio
    async def test_llms_txt_variant_order_decides(self):
        routes = {"/LLMs.txt": (200, LLMS_TXT), "/llms-full.txt": (200, LLMS_TXT)}
        async with mock_client(routes) as client:
            checks = await probe_files("https://x.com", client=client)

        assert checks.llms.score == 100
        assert checks.llms.status == "pass"
        assert checks.llms.details == "LLMs.txt file found with AI usage guidelines"
        assert checks.llms.recommendation == "Great! You have defined AI usage permissions"

    @pytest.mark.asyncio
    async def test_network_errors_degrade_to_not_found(self):
        def handler(request):
            if request.url.path == "/robots.txt":
                raise httpx.ConnectError("connection refused", request=request)
            if request.url.path == "/llms.txt":
                return httpx.Response(200, text=LLMS_TXT)
            return httpx.Response(404)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            checks = await probe_files("https://x.com", client=client)

        assert checks.robots.details == "No robots.txt file found"
        assert checks.llms.score == 100

    @pytest.mark.asyncio
    async def test_slow_probe_times_out(self):
        async def handler(request):
            if request.url.path == "/robots.txt":
                await asyncio.sleep(1)
                return httpx.Response(200, text="User-agent: *")
            return httpx.Response(404)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            checks = await probe_files("https://x.com", client=client, timeout=0.05)

        assert checks.robots.score == 0
        assert checks.robots.details == "No robots.txt file found"

    @pytest.mark.asyncio
    async def test_malformed_robots_does_not_abort_other_checks(self):
        routes = {
            "/robots.txt": (200, "User-agent: *\nSitemap: http://[broken\n"),
            "/llms.txt": (200, LLMS_TXT),
        }
        async with mock_client(routes) as client:
            checks = await probe_files("https://x.com", client=client, timeout=1)

        assert checks.robots.score == 60
        assert checks.robots.status == "warning"
        assert checks.llms.score == 100
        assert checks.sitemap.details == "No sitemap.xml found"
