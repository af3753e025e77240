import os
import logging
from typing import List

from crawler.browser_crawler import BrowserLaunchConfig
from core.selector_config import get_config_path

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
]


class Capabilities:
    @staticmethod
    def get_env() -> str:
        return os.getenv("JOBFETCH_ENV", "production").lower()

    @staticmethod
    def is_dev() -> bool:
        return Capabilities.get_env() == "dev"

    @staticmethod
    def get_log_level() -> int:
        level_name = os.getenv("JOBFETCH_LOG_LEVEL", "INFO").upper()
        level = logging.getLevelName(level_name)
        return level if isinstance(level, int) else logging.INFO

    @staticmethod
    def get_cors_origins() -> List[str]:
        raw = os.getenv("JOBFETCH_CORS_ORIGINS", "")
        origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
        return origins or list(DEFAULT_CORS_ORIGINS)

    @classmethod
    def get_status(cls) -> dict:
        browser = BrowserLaunchConfig.from_env()
        return {
            "status": "green",
            "env": cls.get_env(),
            "components": {
                "browser": {
                    "headless": browser.headless,
                    "sandbox": not browser.disable_sandbox,
                    "navigation_timeout_ms": browser.navigation_timeout_ms,
                    "settle_delay_ms": browser.settle_delay_ms,
                },
                "selectors_config": get_config_path().exists(),
            },
        }


def get_env_presence() -> dict:
    required_vars = [
        "JOBFETCH_ENV",
        "JOBFETCH_LOG_LEVEL",
        "JOBFETCH_NAV_TIMEOUT_MS",
        "JOBFETCH_SETTLE_DELAY_MS",
        "JOBFETCH_HEADLESS",
        "JOBFETCH_DISABLE_SANDBOX",
        "JOBFETCH_DISABLE_GPU",
        "JOBFETCH_DISABLE_DEV_SHM",
        "JOBFETCH_BROWSER_ARGS",
        "JOBFETCH_USER_AGENT",
        "JOBFETCH_SELECTORS_PATH",
        "JOBFETCH_CORS_ORIGINS",
        "RATE_LIMIT_EXTRACT",
    ]

    return {var: bool(os.getenv(var)) for var in required_vars}
