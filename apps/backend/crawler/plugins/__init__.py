"""
Extraction plugin system for jobfetch.

Plugins provide site-specific extraction logic, allowing for:
- Ordered, per-site CSS selector lists
- Site-specific description/requirement collection
- Selector overrides from config/selectors.yaml
"""

from .base import ExtractionPlugin, SiteSelectors
from .registry import PluginRegistry, get_plugin_registry, reset_plugin_registry

__all__ = [
    'ExtractionPlugin',
    'SiteSelectors',
    'PluginRegistry',
    'get_plugin_registry',
    'reset_plugin_registry'
]
