"""
Monster-specific extraction plugin.
Monster exposes no stable data attributes, so only class matches are used.
"""
import logging

from .base import ExtractionPlugin, SiteSelectors

logger = logging.getLogger(__name__)


class MonsterPlugin(ExtractionPlugin):
    """Plugin for Monster job postings"""

    host_pattern = 'monster.com'
    display_name = 'Monster'

    def __init__(self, **kwargs):
        super().__init__(name="monster", priority=90, **kwargs)

    def default_selectors(self) -> SiteSelectors:
        return SiteSelectors(
            title=['h1[class*="job-title"]', 'h1[class*="title"]'],
            company=['[class*="company"]', '[class*="employer"]'],
            location=['[class*="job-location"]', '[class*="location"]'],
            description=['[class*="job-description"]', '[class*="description"]'],
            salary=['[class*="salary"]'],
        )
