"""
Main extraction orchestrator.

Turns a job posting URL into a JobPostingRecord:
1. Render the page in a private headless browser
2. Parse the rendered DOM
3. Dispatch to the site plugin for the host (generic fallback)
4. Repair empty/placeholder fields from URL heuristics
5. Degrade to a URL-only record when rendering or parsing fails

Only a missing URL is reported as an error; everything else yields a record.
"""

import logging
from typing import Optional

from core.document import parse
from core.url_heuristics import (
    COMPANY_PLACEHOLDER,
    JOB_TITLE_PLACEHOLDER,
    UNKNOWN_COMPANY,
    UNTITLED_POSITION,
    company_from_host,
    company_from_url,
    is_placeholder,
    job_title_from_path,
    job_title_from_url,
)
from crawler.browser_crawler import BrowserCrawler, RenderError
from crawler.plugins.registry import PluginRegistry, get_plugin_registry
from .models import JobCandidate, JobPostingRecord, MAX_REQUIREMENTS

logger = logging.getLogger(__name__)

DEGRADED_DESCRIPTION = (
    "Job description could not be automatically extracted from {url}. "
    "Please manually enter the job description for better analysis."
)
EMPTY_DESCRIPTION = (
    "Job description extracted from {site} ({url}). Please review and edit as needed."
)


class InvalidURLError(ValueError):
    """The caller supplied no URL."""


def validate_url(url: Optional[str]) -> str:
    """Return the stripped URL or raise InvalidURLError when blank."""
    if url is None or not isinstance(url, str) or not url.strip():
        raise InvalidURLError("URL is required")
    return url.strip()


def resolve_company(value: Optional[str], url: str) -> str:
    """Keep an extracted company, else fall back to URL then host heuristics."""
    for candidate in (value, company_from_url(url), company_from_host(url)):
        if not is_placeholder(candidate, COMPANY_PLACEHOLDER):
            return candidate.strip()
    return UNKNOWN_COMPANY


def resolve_job_title(value: Optional[str], url: str) -> str:
    """Keep an extracted title, else fall back to URL then path heuristics."""
    for candidate in (value, job_title_from_url(url), job_title_from_path(url)):
        if not is_placeholder(candidate, JOB_TITLE_PLACEHOLDER):
            return candidate.strip()
    return UNTITLED_POSITION


class JobExtractor:
    """Extracts job postings from arbitrary job board URLs."""

    def __init__(
        self,
        crawler: Optional[BrowserCrawler] = None,
        registry: Optional[PluginRegistry] = None,
        timeout_ms: Optional[int] = None
    ):
        """
        Args:
            crawler: Rendering client; a default BrowserCrawler when omitted
            registry: Plugin registry; the global registry when omitted
            timeout_ms: Navigation timeout passed to the crawler
        """
        self.crawler = crawler or BrowserCrawler()
        self.registry = registry or get_plugin_registry()
        self.timeout_ms = timeout_ms

    async def extract(self, url: Optional[str]) -> JobPostingRecord:
        """
        Extract a job posting from a URL.

        Raises:
            InvalidURLError: url is missing or blank (nothing is rendered)
        """
        url = validate_url(url)
        logger.info(f"[extract] Extracting job info from: {url[:100]}")

        try:
            html = await self.crawler.render(url, self.timeout_ms)
        except RenderError as e:
            logger.warning(f"[extract] Render failed for {url[:100]}: {e}. Falling back to URL-based extraction")
            return self.degraded_record(url)
        except Exception as e:
            logger.error(f"[extract] Unexpected render error for {url[:100]}: {e}", exc_info=True)
            return self.degraded_record(url)

        try:
            record = self.extract_from_html(html, url)
        except Exception as e:
            logger.error(f"[extract] Extraction failed for {url[:100]}: {e}", exc_info=True)
            return self.degraded_record(url)

        logger.info(
            f"[extract] Extraction successful: company={record.company_name!r} title={record.job_title!r}"
        )
        return record

    def extract_from_html(self, html: str, url: str) -> JobPostingRecord:
        """Run parse, plugin dispatch and repair on already rendered HTML."""
        document = parse(html)
        plugin = self.registry.find_plugin(url)
        logger.debug(f"[extract] Using plugin {plugin.name} for {url[:100]}")

        candidate = plugin.extract(document, url)
        if not candidate.job_description:
            candidate.job_description = EMPTY_DESCRIPTION.format(
                site=plugin.display_name or plugin.name, url=url
            )
        return self.finalize(candidate, url)

    def finalize(self, candidate: JobCandidate, url: str) -> JobPostingRecord:
        """
        Repair a raw candidate into a final record.

        Placeholders and empty company/title values are replaced from URL
        heuristics; an empty description becomes a stand-in naming the URL.
        """
        description = candidate.job_description.strip() if candidate.job_description else ""
        return JobPostingRecord(
            company_name=resolve_company(candidate.company_name, url),
            job_title=resolve_job_title(candidate.job_title, url),
            job_description=description or DEGRADED_DESCRIPTION.format(url=url),
            location=(candidate.location or "").strip(),
            salary=(candidate.salary or "").strip(),
            requirements=tuple(candidate.requirements[:MAX_REQUIREMENTS]),
        )

    def degraded_record(self, url: str) -> JobPostingRecord:
        """Record built from the URL alone, used when the page is unusable."""
        return self.finalize(
            JobCandidate(
                company_name=COMPANY_PLACEHOLDER,
                job_title=JOB_TITLE_PLACEHOLDER,
                job_description=DEGRADED_DESCRIPTION.format(url=url),
            ),
            url
        )
