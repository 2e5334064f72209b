import httpx
import pytest

from app.core.exceptions import InvalidURLError, ScrapeError
from app.services.analysis.utils.scrape_utils import extract_page_metadata, normalize_url, scrape_page


class TestNormalizeUrl:
    """Test cases for URL normalization"""

    @pytest.mark.parametrize("url,expected", [
        ("example.com", "https://example.com"),
        ("  example.com/path  ", "https://example.com/path"),
        ("http://example.com", "http://example.com"),
        ("https://docs.example.com/a?b=c", "https://docs.example.com/a?b=c"),
    ])
    def test_valid(self, url, expected):
        assert normalize_url(url) == expected

    @pytest.mark.parametrize("url", ["", "   ", None, "https://", "exa mple.com", "https://[::1", "example.com:99999"])
    def test_invalid(self, url):
        with pytest.raises(InvalidURLError):
            normalize_url(url)


class TestExtractPageMetadata:
    """Test cases for page metadata extraction"""

    def test_full_metadata(self):
        html = """<html><head>
            <title> Coffee Guide </title>
            <meta name="description" content="How to brew.">
            <meta property="og:title" content="Coffee">
            <meta property="og:description" content="Brewing at home">
            <meta name="author" content="Jane Smith">
        </head></html>"""
        metadata = extract_page_metadata(html)
        assert metadata.title == "Coffee Guide"
        assert metadata.description == "How to brew."
        assert metadata.og_title == "Coffee"
        assert metadata.og_description == "Brewing at home"
        assert metadata.author == "Jane Smith"

    def test_missing_metadata(self):
        metadata = extract_page_metadata("<html><body><p>Hi</p></body></html>")
        assert metadata.title is None
        assert metadata.description is None
        assert metadata.author is None


class TestScrapePage:
    """Test cases for fetching the page to analyze"""

    @pytest.mark.asyncio
    async def test_scrape_page(self):
        def handler(request):
            assert "Mozilla" in request.headers["User-Agent"]
            return httpx.Response(200, text="<html><head><title>Home</title></head><body>Hi</body></html>")

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            page = await scrape_page("https://example.com", client=client)

        assert "<title>Home</title>" in page.html
        assert page.metadata.title == "Home"

    @pytest.mark.asyncio
    async def test_http_error(self):
        async with httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(503))) as client:
            with pytest.raises(ScrapeError):
                await scrape_page("https://example.com", client=client)

    @pytest.mark.asyncio
    async def test_network_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(ScrapeError):
                await scrape_page("https://example.com", client=client)
