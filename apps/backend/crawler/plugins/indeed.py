"""
Indeed-specific extraction plugin.
"""
import logging

from .base import ExtractionPlugin, SiteSelectors

logger = logging.getLogger(__name__)


class IndeedPlugin(ExtractionPlugin):
    """Plugin for Indeed job postings"""

    host_pattern = 'indeed.com'
    display_name = 'Indeed'

    def __init__(self, **kwargs):
        super().__init__(name="indeed", priority=90, **kwargs)

    def default_selectors(self) -> SiteSelectors:
        return SiteSelectors(
            title=[
                '[data-testid="jobsearch-JobInfoHeader-title"]',
                'h1[class*="jobsearch-JobInfoHeader-title"]',
                'h1[class*="title"]',
            ],
            company=[
                '[data-testid="inlineHeader-companyName"]',
                '[data-testid="jobsearch-JobInfoHeader-companyName"]',
                '[class*="company"]',
                '[class*="employer"]',
            ],
            location=[
                '[data-testid="inlineHeader-companyLocation"]',
                '[data-testid="jobsearch-JobInfoHeader-locationText"]',
                '[class*="job-location"]',
                '[class*="location"]',
            ],
            description=[
                '[data-testid="jobsearch-JobComponent-description"]',
                '#jobDescriptionText',
                '[class*="job-description"]',
                '[class*="description"]',
            ],
            salary=[
                '#salaryInfoAndJobType',
                '[class*="salary"]',
            ],
        )
