"""
LinkedIn-specific extraction plugin.
Covers both the signed-out public job view and the unified top card.
"""
import logging
from typing import List

from core.document import Document
from .base import ExtractionPlugin, SiteSelectors, collect_requirements

logger = logging.getLogger(__name__)


class LinkedInPlugin(ExtractionPlugin):
    """Plugin for LinkedIn job postings"""

    host_pattern = 'linkedin.com'
    display_name = 'LinkedIn'

    def __init__(self, **kwargs):
        super().__init__(name="linkedin", priority=90, **kwargs)

    def default_selectors(self) -> SiteSelectors:
        return SiteSelectors(
            title=[
                '[data-test-id="job-details-jobs-unified-top-card__job-title"]',
                '.job-details-jobs-unified-top-card__job-title',
                '.top-card-layout__title',
                'h1[class*="job-title"]',
                'h1[class*="title"]',
            ],
            company=[
                '[data-test-id="job-details-jobs-unified-top-card__company-name"]',
                '.job-details-jobs-unified-top-card__company-name',
                '.topcard__org-name-link',
                '[class*="company-name"]',
                '[class*="employer"]',
            ],
            location=[
                '.job-details-jobs-unified-top-card__bullet',
                '.topcard__flavor--bullet',
                '[class*="job-location"]',
                '[class*="location"]',
            ],
            description=[
                '[data-test-id="job-details-jobs-unified-top-card__job-description"]',
                '.jobs-description__content',
                '[class*="job-description"]',
                '[class*="description"]',
            ],
            salary=[
                '.compensation__salary',
                '[class*="salary"]',
            ],
        )

    def extract_requirements(self, document: Document) -> List[str]:
        return collect_requirements(document)
