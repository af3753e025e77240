"""
Glassdoor-specific extraction plugin.
"""
import logging

from .base import ExtractionPlugin, SiteSelectors

logger = logging.getLogger(__name__)


class GlassdoorPlugin(ExtractionPlugin):
    """Plugin for Glassdoor job postings"""

    host_pattern = 'glassdoor.com'
    display_name = 'Glassdoor'

    def __init__(self, **kwargs):
        super().__init__(name="glassdoor", priority=90, **kwargs)

    def default_selectors(self) -> SiteSelectors:
        return SiteSelectors(
            title=[
                '[data-test="job-title"]',
                'h1[class*="job-title"]',
                'h1[class*="title"]',
            ],
            company=[
                '[data-test="employer-name"]',
                '[class*="company"]',
                '[class*="employer"]',
            ],
            location=[
                '[data-test="location"]',
                '[class*="job-location"]',
                '[class*="location"]',
            ],
            description=[
                '[data-test="job-description"]',
                '.jobDescriptionContent',
                '[class*="job-description"]',
                '[class*="description"]',
            ],
            salary=[
                '[data-test="detailSalary"]',
                '[class*="salary"]',
            ],
        )
