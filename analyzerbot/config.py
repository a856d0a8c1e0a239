"""Configuration management for the analyzer bot."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_COOLDOWN_SECONDS = 3600
DEFAULT_WCL_API_URL = "https://www.warcraftlogs.com/v1"
DEFAULT_ANALYZER_URL = "https://wowanalyzer.com"

# Report links must be hosted on this domain (subdomains included).
WARCRAFTLOGS_DOMAIN = "warcraftlogs.com"

# A link to a single report: /reports/<16 char code>/
REPORT_PATH_RE = re.compile(r"^/reports/([a-zA-Z0-9]{16})/?$")

# Fragment keys that point at a specific fight and player.
NAVIGATION_KEYS = ("fight", "source")

# Fragment keys that signal manual analysis of a report.
ADVANCED_FILTER_KEYS = ("start", "end", "pins", "phase", "ability", "view")


def _parse_positive_int(value: str, default: int) -> int:
    """Parse a positive integer, logging and falling back on invalid values."""
    try:
        result = int(value)
    except ValueError:
        logger.warning(f"Invalid integer in config: {value}")
        return default
    if result <= 0:
        logger.warning(f"Expected a positive integer in config, got: {value}")
        return default
    return result


@dataclass(frozen=True)
class Config:
    """Bot configuration loaded from environment variables."""

    bot_token: str
    wcl_api_key: str
    wcl_api_url: str = DEFAULT_WCL_API_URL
    analyzer_url: str = DEFAULT_ANALYZER_URL
    cooldown_seconds: int = DEFAULT_COOLDOWN_SECONDS
    sentry_dsn: str = ""
    debug: bool = False

    @classmethod
    def from_env(cls) -> Config:
        """Load configuration from environment variables."""
        return cls(
            bot_token=os.getenv("DISCORD_BOT_TOKEN", ""),
            wcl_api_key=os.getenv("WCL_API_KEY", ""),
            wcl_api_url=os.getenv("WCL_API_URL", DEFAULT_WCL_API_URL).rstrip("/"),
            analyzer_url=os.getenv("ANALYZER_URL", DEFAULT_ANALYZER_URL).rstrip("/"),
            cooldown_seconds=_parse_positive_int(
                os.getenv("REPORT_COOLDOWN_SECONDS", str(DEFAULT_COOLDOWN_SECONDS)),
                DEFAULT_COOLDOWN_SECONDS,
            ),
            sentry_dsn=os.getenv("SENTRY_DSN", ""),
            debug=os.getenv("DEBUG", "false").lower() in ("true", "1", "yes"),
        )
