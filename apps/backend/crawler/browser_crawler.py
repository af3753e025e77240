"""
Browser-based page rendering using Playwright for JavaScript-heavy job boards.
"""
import os
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import AsyncIterator, List, Optional

from playwright.async_api import (
    async_playwright,
    Browser,
    Error as PlaywrightError,
    TimeoutError as PlaywrightTimeoutError,
)

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
    '(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
)
DEFAULT_NAV_TIMEOUT_MS = 30000
DEFAULT_SETTLE_DELAY_MS = 3000


class RenderError(Exception):
    """Page could not be rendered: launch failure, navigation failure or timeout."""

    def __init__(self, url: str, message: str):
        super().__init__(message)
        self.url = url


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"[browser] Invalid integer for {name}={value!r}, using {default}")
        return default


@dataclass
class BrowserLaunchConfig:
    """
    Browser launch and page settings.

    Attributes:
        headless: Run Chromium without a window.
        disable_sandbox: Pass --no-sandbox/--disable-setuid-sandbox/--no-zygote.
            Required when running as root inside containers; weakens process
            isolation between the browser and the host.
        disable_gpu: Pass --disable-gpu/--disable-accelerated-2d-canvas. Avoids
            GPU initialisation failures on servers without one.
        disable_dev_shm_usage: Pass --disable-dev-shm-usage. Docker's default
            64MB /dev/shm crashes Chromium on large pages.
        extra_args: Appended verbatim to the Chromium command line.
        user_agent: Desktop user agent presented to the site.
        viewport_width / viewport_height: Fixed viewport size.
        navigation_timeout_ms: Upper bound for page.goto().
        settle_delay_ms: Fixed wait after navigation for deferred client-side
            rendering. A heuristic, not a readiness guarantee.
        wait_until: Playwright load state goto() waits for.
    """
    headless: bool = True
    disable_sandbox: bool = True
    disable_gpu: bool = True
    disable_dev_shm_usage: bool = True
    extra_args: List[str] = field(default_factory=list)
    user_agent: str = DEFAULT_USER_AGENT
    viewport_width: int = 1280
    viewport_height: int = 720
    navigation_timeout_ms: int = DEFAULT_NAV_TIMEOUT_MS
    settle_delay_ms: int = DEFAULT_SETTLE_DELAY_MS
    wait_until: str = 'networkidle'

    def launch_args(self) -> List[str]:
        """Chromium command line flags for this config."""
        args = []
        if self.disable_sandbox:
            args += ['--no-sandbox', '--disable-setuid-sandbox', '--no-zygote']
        if self.disable_dev_shm_usage:
            args.append('--disable-dev-shm-usage')
        if self.disable_gpu:
            args += ['--disable-gpu', '--disable-accelerated-2d-canvas']
        args.append('--no-first-run')
        args += self.extra_args
        return args

    @classmethod
    def from_env(cls) -> 'BrowserLaunchConfig':
        """Build a config from JOBFETCH_* environment variables."""
        extra = os.getenv("JOBFETCH_BROWSER_ARGS", "")
        return cls(
            headless=_env_bool("JOBFETCH_HEADLESS", True),
            disable_sandbox=_env_bool("JOBFETCH_DISABLE_SANDBOX", True),
            disable_gpu=_env_bool("JOBFETCH_DISABLE_GPU", True),
            disable_dev_shm_usage=_env_bool("JOBFETCH_DISABLE_DEV_SHM", True),
            extra_args=[arg for arg in extra.split() if arg],
            user_agent=os.getenv("JOBFETCH_USER_AGENT") or DEFAULT_USER_AGENT,
            navigation_timeout_ms=_env_int("JOBFETCH_NAV_TIMEOUT_MS", DEFAULT_NAV_TIMEOUT_MS),
            settle_delay_ms=_env_int("JOBFETCH_SETTLE_DELAY_MS", DEFAULT_SETTLE_DELAY_MS),
        )


class BrowserCrawler:
    """
    Render pages in a headless browser.

    Every render() call launches its own Chromium process and closes it
    before returning, whatever the outcome. Nothing is shared between calls.
    """

    def __init__(self, config: Optional[BrowserLaunchConfig] = None):
        self.config = config or BrowserLaunchConfig()

    @asynccontextmanager
    async def _browser_session(self) -> AsyncIterator[Browser]:
        """Launch a private browser; always closed on exit."""
        async with async_playwright() as p:
            browser = await p.chromium.launch(
                headless=self.config.headless,
                args=self.config.launch_args()
            )
            try:
                yield browser
            finally:
                try:
                    await browser.close()
                except PlaywrightError as e:
                    logger.debug(f"[browser] Error while closing browser: {e}")

    async def render(self, url: str, timeout_ms: Optional[int] = None) -> str:
        """
        Render a URL and return the serialized DOM.

        Args:
            url: URL to render
            timeout_ms: Navigation timeout, defaults to config.navigation_timeout_ms

        Returns:
            Rendered HTML content

        Raises:
            RenderError: launch failure, navigation failure or timeout
        """
        timeout = timeout_ms if timeout_ms is not None else self.config.navigation_timeout_ms

        try:
            async with self._browser_session() as browser:
                context = await browser.new_context(
                    user_agent=self.config.user_agent,
                    viewport={
                        'width': self.config.viewport_width,
                        'height': self.config.viewport_height
                    }
                )
                page = await context.new_page()

                logger.info(f"[browser] Navigating to {url[:100]}")
                await page.goto(url, wait_until=self.config.wait_until, timeout=timeout)

                # Deferred client-side rendering
                if self.config.settle_delay_ms > 0:
                    await page.wait_for_timeout(self.config.settle_delay_ms)

                html = await page.content()
                logger.info(f"[browser] Rendered {url[:100]} ({len(html)} chars)")
                return html
        except PlaywrightTimeoutError as e:
            raise RenderError(url, f"Navigation timed out after {timeout}ms: {e}") from e
        except PlaywrightError as e:
            raise RenderError(url, f"Browser failed: {e}") from e
        except OSError as e:
            raise RenderError(url, f"Browser process could not be started: {e}") from e
