"""
Generic extraction plugin.

Provides fallback extraction using common job posting patterns.
This is the default plugin when no site-specific plugin matches.
"""
import logging

from core.document import Document
from .base import ExtractionPlugin, SiteSelectors

logger = logging.getLogger(__name__)

# Paragraph-scale prose only: shorter is navigation/boilerplate, longer is
# usually a wrapper around the whole page
MIN_BLOCK_LENGTH = 100
MAX_BLOCK_LENGTH = 5000


class GenericPlugin(ExtractionPlugin):
    """Generic fallback plugin for job posting extraction"""

    display_name = 'the provided URL'

    def __init__(self, **kwargs):
        super().__init__(name="generic", priority=10, **kwargs)  # Low priority - fallback only

    def default_selectors(self) -> SiteSelectors:
        return SiteSelectors(
            title=['h1', 'h2', '.title', '[class*="title"]'],
            company=['[class*="company"]', '[class*="employer"]', '[class*="organization"]'],
            location=['[class*="location"]', '[class*="address"]'],
            description=['p', 'div', 'section'],
            salary=['[class*="salary"]', '[class*="compensation"]'],
        )

    def can_handle(self, url: str) -> bool:
        """Generic plugin can always handle (as fallback)"""
        return True

    def extract_description(self, document: Document) -> str:
        """
        Concatenate every block whose trimmed length is strictly between
        MIN_BLOCK_LENGTH and MAX_BLOCK_LENGTH, in document order.

        Nested blocks are checked independently, so a paragraph inside a
        qualifying div appears twice.
        """
        blocks = [
            text for text in document.select_all(self.selectors.description).texts()
            if MIN_BLOCK_LENGTH < len(text) < MAX_BLOCK_LENGTH
        ]
        return "\n".join(blocks).strip()
