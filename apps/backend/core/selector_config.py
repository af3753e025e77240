"""
Per-site selector configuration loader.
Reads config/selectors.yaml (or JOBFETCH_SELECTORS_PATH) and provides
per-plugin selector overrides.
"""
import os
import yaml
import logging
from pathlib import Path
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

SELECTOR_FIELDS = ('title', 'company', 'location', 'salary', 'description')

# Cache for loaded config
_config_cache: Optional[Dict] = None


def get_config_path() -> Path:
    env_path = os.getenv("JOBFETCH_SELECTORS_PATH")
    if env_path:
        return Path(env_path)
    return Path(__file__).parent.parent / 'config' / 'selectors.yaml'


def load_selector_config() -> Dict:
    """Load selector configuration from YAML file."""
    global _config_cache

    if _config_cache is not None:
        return _config_cache

    config_path = get_config_path()

    if not config_path.exists():
        logger.warning(f"Selector config file not found: {config_path}. Using built-in selectors.")
        _config_cache = {}
        return _config_cache

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            _config_cache = yaml.safe_load(f) or {}
        logger.info(f"Loaded selector config from {config_path}")
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Error loading selector config: {e}")
        _config_cache = {}

    return _config_cache


def reset_selector_config_cache():
    """Forget the cached config so the next lookup re-reads the file."""
    global _config_cache
    _config_cache = None


def get_selector_overrides(plugin_name: str) -> Dict[str, List[str]]:
    """
    Get selector overrides for a plugin.

    Each configured field replaces the built-in list for that field only;
    order in the file is the order selectors are tried.
    """
    config = load_selector_config()

    sites = config.get('overrides', config) if isinstance(config, dict) else {}
    site_config = sites.get(plugin_name) if isinstance(sites, dict) else None
    if not isinstance(site_config, dict):
        return {}

    overrides = {}
    for field, selectors in site_config.items():
        if field not in SELECTOR_FIELDS:
            logger.warning(f"[selectors] Unknown field '{field}' for {plugin_name}, ignoring")
            continue
        if isinstance(selectors, str):
            selectors = [selectors]
        if not isinstance(selectors, list) or not all(isinstance(s, str) for s in selectors):
            logger.warning(f"[selectors] {plugin_name}.{field} must be a list of strings, ignoring")
            continue
        overrides[field] = list(selectors)

    return overrides
