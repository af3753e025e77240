"""
Unit tests for the Playwright rendering client.

Playwright is mocked out; no browser is launched.
"""
import asyncio
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from playwright.async_api import Error as PlaywrightError, TimeoutError as PlaywrightTimeoutError

from crawler.browser_crawler import (
    BrowserCrawler, BrowserLaunchConfig, RenderError, DEFAULT_USER_AGENT
)

URL = "https://www.linkedin.com/jobs/view/senior-backend-engineer"


def mock_playwright(html="<html><body><h1>Role</h1></body></html>", launch_error=None):
    """Build an async_playwright() stand-in and return (factory, browser, page)."""
    page = AsyncMock()
    page.content.return_value = html

    context = AsyncMock()
    context.new_page.return_value = page

    browser = AsyncMock()
    browser.new_context.return_value = context

    playwright = MagicMock()
    playwright.chromium.launch = AsyncMock(return_value=browser, side_effect=launch_error)

    manager = MagicMock()
    manager.__aenter__ = AsyncMock(return_value=playwright)
    manager.__aexit__ = AsyncMock(return_value=False)

    return MagicMock(return_value=manager), browser, page


class TestBrowserLaunchConfig:
    def test_default_args(self):
        args = BrowserLaunchConfig().launch_args()
        for flag in ('--no-sandbox', '--disable-setuid-sandbox', '--disable-dev-shm-usage',
                     '--disable-gpu', '--no-first-run'):
            assert flag in args

    def test_sandbox_kept_when_not_disabled(self):
        args = BrowserLaunchConfig(disable_sandbox=False, disable_gpu=False,
                                   extra_args=['--lang=en-US']).launch_args()
        assert '--no-sandbox' not in args
        assert '--disable-gpu' not in args
        assert args[-1] == '--lang=en-US'

    def test_from_env(self):
        env = {
            'JOBFETCH_HEADLESS': 'false',
            'JOBFETCH_DISABLE_SANDBOX': '0',
            'JOBFETCH_NAV_TIMEOUT_MS': '15000',
            'JOBFETCH_SETTLE_DELAY_MS': '500',
            'JOBFETCH_BROWSER_ARGS': '--lang=de-DE --mute-audio',
            'JOBFETCH_USER_AGENT': 'TestAgent/1.0',
        }
        with patch.dict('os.environ', env, clear=True):
            config = BrowserLaunchConfig.from_env()
        assert config.headless is False
        assert config.disable_sandbox is False
        assert config.disable_gpu is True
        assert config.navigation_timeout_ms == 15000
        assert config.settle_delay_ms == 500
        assert config.extra_args == ['--lang=de-DE', '--mute-audio']
        assert config.user_agent == 'TestAgent/1.0'

    def test_from_env_defaults_and_bad_values(self):
        with patch.dict('os.environ', {'JOBFETCH_NAV_TIMEOUT_MS': 'soon'}, clear=True):
            config = BrowserLaunchConfig.from_env()
        assert config.navigation_timeout_ms == 30000
        assert config.settle_delay_ms == 3000
        assert config.user_agent == DEFAULT_USER_AGENT


class TestRender:
    @pytest.mark.asyncio
    async def test_success(self):
        factory, browser, page = mock_playwright()
        crawler = BrowserCrawler(BrowserLaunchConfig(settle_delay_ms=3000))

        with patch('crawler.browser_crawler.async_playwright', factory):
            html = await crawler.render(URL)

        assert "<h1>Role</h1>" in html
        page.goto.assert_awaited_once_with(URL, wait_until='networkidle', timeout=30000)
        page.wait_for_timeout.assert_awaited_once_with(3000)
        browser.new_context.assert_awaited_once_with(
            user_agent=DEFAULT_USER_AGENT,
            viewport={'width': 1280, 'height': 720}
        )
        browser.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_timeout_override_and_no_settle(self):
        factory, browser, page = mock_playwright()
        crawler = BrowserCrawler(BrowserLaunchConfig(settle_delay_ms=0))

        with patch('crawler.browser_crawler.async_playwright', factory):
            await crawler.render(URL, timeout_ms=1234)

        page.goto.assert_awaited_once_with(URL, wait_until='networkidle', timeout=1234)
        page.wait_for_timeout.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_launch_args_passed(self):
        factory, browser, page = mock_playwright()
        config = BrowserLaunchConfig(headless=False)

        with patch('crawler.browser_crawler.async_playwright', factory):
            await BrowserCrawler(config).render(URL)

        launch = factory.return_value.__aenter__.return_value.chromium.launch
        launch.assert_awaited_once_with(headless=False, args=config.launch_args())

    @pytest.mark.asyncio
    async def test_navigation_timeout_raises_render_error_and_closes(self):
        factory, browser, page = mock_playwright()
        timeout = PlaywrightTimeoutError("Timeout 30000ms exceeded")
        page.goto.side_effect = timeout

        with patch('crawler.browser_crawler.async_playwright', factory):
            with pytest.raises(RenderError) as exc_info:
                await BrowserCrawler().render(URL)

        assert exc_info.value.url == URL
        assert exc_info.value.__cause__ is timeout
        assert "timed out" in str(exc_info.value)
        browser.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_navigation_failure(self):
        factory, browser, page = mock_playwright()
        page.goto.side_effect = PlaywrightError("net::ERR_NAME_NOT_RESOLVED")

        with patch('crawler.browser_crawler.async_playwright', factory):
            with pytest.raises(RenderError):
                await BrowserCrawler().render(URL)

        browser.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_launch_failure(self):
        factory, browser, page = mock_playwright(
            launch_error=PlaywrightError("Executable doesn't exist")
        )

        with patch('crawler.browser_crawler.async_playwright', factory):
            with pytest.raises(RenderError):
                await BrowserCrawler().render(URL)

        page.goto.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_cancellation_still_closes_browser(self):
        factory, browser, page = mock_playwright()
        page.wait_for_timeout.side_effect = asyncio.CancelledError()

        with patch('crawler.browser_crawler.async_playwright', factory):
            with pytest.raises(asyncio.CancelledError):
                await BrowserCrawler().render(URL)

        browser.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_close_error_does_not_mask_result(self):
        factory, browser, page = mock_playwright()
        browser.close.side_effect = PlaywrightError("Target closed")

        with patch('crawler.browser_crawler.async_playwright', factory):
            html = await BrowserCrawler().render(URL)

        assert "Role" in html
