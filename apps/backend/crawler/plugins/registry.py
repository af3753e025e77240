"""
Plugin registry for managing extraction plugins.
"""
import logging
from typing import List, Dict, Optional
from .base import ExtractionPlugin

logger = logging.getLogger(__name__)

# Global registry instance
_registry: Optional['PluginRegistry'] = None


class PluginRegistry:
    """
    Registry mapping request hosts to extraction plugins.

    Plugins are tried in priority order (higher first); the default plugin
    is returned when none of them claims the URL.
    """

    def __init__(self, default: Optional[ExtractionPlugin] = None):
        self._plugins: List[ExtractionPlugin] = []
        self._plugins_by_name: Dict[str, ExtractionPlugin] = {}
        self._default: Optional[ExtractionPlugin] = None
        if default is not None:
            self.set_default(default)

    def register(self, plugin: ExtractionPlugin):
        """Register a plugin"""
        if plugin.name in self._plugins_by_name:
            logger.warning(f"Plugin {plugin.name} already registered, replacing")
            self._plugins = [p for p in self._plugins if p.name != plugin.name]

        self._plugins_by_name[plugin.name] = plugin
        self._plugins.append(plugin)

        # Sort by priority (higher first); sort is stable so ties keep registration order
        self._plugins.sort(key=lambda p: p.priority, reverse=True)

        logger.info(f"Registered plugin: {plugin.name} (priority={plugin.priority})")

    def set_default(self, plugin: ExtractionPlugin):
        """Register the fallback plugin used when nothing else matches."""
        self.register(plugin)
        self._default = plugin

    def get_plugin(self, name: str) -> Optional[ExtractionPlugin]:
        """Get plugin by name"""
        return self._plugins_by_name.get(name)

    def find_plugin(self, url: str) -> ExtractionPlugin:
        """
        Find the plugin for a given URL.

        Args:
            url: Source URL

        Returns:
            Best matching plugin, or the default plugin

        Raises:
            LookupError: nothing matches and no default is registered
        """
        for plugin in self._plugins:
            if plugin is self._default:
                continue
            if plugin.can_handle(url):
                logger.debug(f"Selected plugin: {plugin.name} for {url[:80]}")
                return plugin

        if self._default is None:
            raise LookupError(f"No plugin found for {url[:80]} and no default plugin registered")

        logger.debug(f"Using default plugin {self._default.name} for {url[:80]}")
        return self._default

    def list_plugins(self) -> List[Dict]:
        """List all registered plugins"""
        return [
            {
                'name': plugin.name,
                'priority': plugin.priority,
                'host': plugin.host_pattern,
                'default': plugin is self._default,
                'class': plugin.__class__.__name__
            }
            for plugin in self._plugins
        ]


def get_plugin_registry() -> PluginRegistry:
    """Get or create the global plugin registry"""
    global _registry
    if _registry is None:
        _registry = build_default_registry()
    return _registry


def reset_plugin_registry():
    """Drop the global registry so it is rebuilt (e.g. after selector config changes)."""
    global _registry
    _registry = None


def build_default_registry() -> PluginRegistry:
    """Registry with every built-in plugin and the generic fallback."""
    from .linkedin import LinkedInPlugin
    from .indeed import IndeedPlugin
    from .glassdoor import GlassdoorPlugin
    from .monster import MonsterPlugin
    from .generic import GenericPlugin

    registry = PluginRegistry()
    registry.register(LinkedInPlugin())
    registry.register(IndeedPlugin())
    registry.register(GlassdoorPlugin())
    registry.register(MonsterPlugin())
    registry.set_default(GenericPlugin())
    return registry
