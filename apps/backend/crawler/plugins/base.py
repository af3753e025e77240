"""
Base plugin interface for job posting extraction.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional

from core.document import Document
from core.selector_config import get_selector_overrides
from core.url_heuristics import get_host
from pipeline.models import JobCandidate, MAX_REQUIREMENTS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SiteSelectors:
    """
    Ordered CSS selector lists for one site.

    title/company/location/salary: tried in order, first non-empty match wins.
    description: every element matching any selector is concatenated.
    """
    title: List[str] = field(default_factory=list)
    company: List[str] = field(default_factory=list)
    location: List[str] = field(default_factory=list)
    description: List[str] = field(default_factory=list)
    salary: List[str] = field(default_factory=list)

    def with_overrides(self, overrides: Dict[str, List[str]]) -> 'SiteSelectors':
        """Replace the lists named in overrides, keep the rest."""
        if not overrides:
            return self
        return replace(self, **{k: list(v) for k, v in overrides.items()})


class ExtractionPlugin(ABC):
    """
    Base class for extraction plugins.

    A plugin maps a parsed job posting page to a JobCandidate. Each plugin:
    1. Declares the host it handles (case-insensitive substring of the host)
    2. Declares ordered selector lists per field
    3. Optionally overrides how descriptions/requirements are collected

    extract() must be pure: same document and URL, same candidate.
    """

    # Substring of the request host this plugin handles; None for fallbacks
    host_pattern: Optional[str] = None
    # Human readable site name for logs
    display_name: str = ""

    def __init__(self, name: str, priority: int = 50, selectors: Optional[SiteSelectors] = None):
        """
        Initialize plugin.

        Args:
            name: Plugin name (e.g., 'linkedin', 'generic'), also the key in
                config/selectors.yaml
            priority: Priority (higher = tried first, default 50)
            selectors: Explicit selectors; defaults to the built-in ones with
                any configured overrides applied
        """
        self.name = name
        self.priority = priority
        self.logger = logging.getLogger(f"{__name__}.{name}")
        if selectors is None:
            selectors = self.default_selectors().with_overrides(get_selector_overrides(name))
        self.selectors = selectors

    @abstractmethod
    def default_selectors(self) -> SiteSelectors:
        """Built-in selector lists for this site."""
        pass

    def can_handle(self, url: str) -> bool:
        """Check if this plugin should handle the given URL."""
        if not self.host_pattern:
            return False
        return self.host_pattern.lower() in get_host(url)

    def extract(self, document: Document, url: str) -> JobCandidate:
        """
        Extract a job candidate from a parsed page.

        Args:
            document: Parsed, fully rendered page
            url: Source URL

        Returns:
            JobCandidate; fields that could not be found are empty
        """
        candidate = JobCandidate(
            job_title=document.select_first_text(self.selectors.title),
            company_name=document.select_first_text(self.selectors.company),
            location=document.select_first_text(self.selectors.location),
            salary=document.select_first_text(self.selectors.salary),
            job_description=self.extract_description(document),
            requirements=self.extract_requirements(document),
        )
        self.logger.debug(
            f"[{self.name}] title={bool(candidate.job_title)} company={bool(candidate.company_name)} "
            f"location={bool(candidate.location)} description_len={len(candidate.job_description)} "
            f"requirements={len(candidate.requirements)}"
        )
        return candidate

    def extract_description(self, document: Document) -> str:
        """
        Concatenate every description block.

        Descriptions are often split over several sibling blocks, so unlike
        the other fields every match is kept, not just the first.
        """
        texts = document.select_all(self.selectors.description).texts()
        return "\n".join(texts).strip()

    def extract_requirements(self, document: Document) -> List[str]:
        """Requirement bullets; most sites do not expose them separately."""
        return []

    def __repr__(self):
        return f"<{self.__class__.__name__}(name={self.name}, priority={self.priority})>"


REQUIREMENT_KEYWORDS = ('requirement', 'qualification', 'experience')


def collect_requirements(document: Document, selectors=('li', 'p'),
                         limit: int = MAX_REQUIREMENTS) -> List[str]:
    """
    Scan list items and paragraphs for requirement-like text.

    Keeps the first `limit` qualifying texts in document order, duplicates
    included.
    """
    requirements = []
    for text in document.select_all(list(selectors)).texts():
        lowered = text.lower()
        if any(keyword in lowered for keyword in REQUIREMENT_KEYWORDS):
            requirements.append(text)
            if len(requirements) >= limit:
                break
    return requirements
