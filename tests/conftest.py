"""
Test configuration and fixtures for the AI Readiness API.

Tests always run against the in-memory document store, which is emptied
between tests.
"""

import os
from typing import Generator

os.environ["STORAGE_BACKEND"] = "memory"

import pytest
from fastapi.testclient import TestClient

from app.core.storage import get_store
from app.schemas.analysis import PageMetadata


@pytest.fixture(scope="session")
def test_app():
    """Create FastAPI test application."""
    from app.main import app

    return app


@pytest.fixture(scope="function")
def client(test_app) -> Generator[TestClient, None, None]:
    """
    Create a test client for making HTTP requests.
    """
    with TestClient(test_app) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def clean_store():
    """Start every test with an empty document store."""
    store = get_store()
    store.clear()
    yield store
    store.clear()


@pytest.fixture
def blog_html() -> str:
    """A reasonably well structured article page."""
    return """<!DOCTYPE html>
<html lang="en">
<head>
  <title>How to Brew Coffee at Home</title>
  <meta name="description" content="A practical guide to brewing coffee at home with simple tools, good beans and a little patience for better results.">
  <meta name="author" content="Jane Smith">
  <meta property="article:published_time" content="2024-03-01T09:00:00Z">
</head>
<body>
  <header><nav aria-label="Main" role="navigation"><a href="#steps">Steps</a></nav></header>
  <main>
    <article>
      <h1>How to Brew Coffee at Home</h1>
      <p>By Jane Smith. Published March 2024.</p>
      <h2>What you need</h2>
      <p>You need fresh beans. You need a grinder. You need hot water.</p>
      <h2 id="steps">Steps</h2>
      <h3>Grind the beans</h3>
      <p>Grind them well. Then wait a bit.</p>
      <img src="cup.jpg" alt="A cup of coffee">
      <section>
        <h2>Frequently Asked Questions</h2>
        <details><summary>What is the best grind size?</summary><p>Medium works for most.</p></details>
      </section>
    </article>
  </main>
  <footer><p>See also our tea guide.</p></footer>
</body>
</html>"""


@pytest.fixture
def blog_metadata() -> PageMetadata:
    return PageMetadata(
        title="How to Brew Coffee at Home",
        description="A practical guide to brewing coffee at home.",
        author="Jane Smith",
    )
