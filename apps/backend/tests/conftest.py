"""
Shared fixtures for backend tests.
"""
import pytest
from pathlib import Path

from core.selector_config import reset_selector_config_cache
from crawler.browser_crawler import RenderError
from crawler.plugins.registry import reset_plugin_registry

FIXTURES_DIR = Path(__file__).parent / 'fixtures'


class FakeCrawler:
    """Stands in for BrowserCrawler; returns canned HTML or raises."""

    def __init__(self, html: str = "", error: Exception = None):
        self.html = html
        self.error = error
        self.calls = []

    async def render(self, url, timeout_ms=None):
        self.calls.append((url, timeout_ms))
        if self.error is not None:
            raise self.error
        return self.html


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Every test starts from the built-in selectors and a new registry."""
    monkeypatch.delenv("JOBFETCH_SELECTORS_PATH", raising=False)
    reset_selector_config_cache()
    reset_plugin_registry()
    yield
    reset_selector_config_cache()
    reset_plugin_registry()


@pytest.fixture
def load_fixture():
    def _load(name: str) -> str:
        return (FIXTURES_DIR / name).read_text(encoding='utf-8')
    return _load


@pytest.fixture
def failing_crawler():
    return FakeCrawler(error=RenderError("https://example.com", "Navigation timed out after 30000ms"))
