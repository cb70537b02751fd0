"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file into an immutable Settings object that is built
once at startup and passed to whatever needs it.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


# ── Media defaults ────────────────────────────────────────
DEFAULT_INTRO_VIDEO_ID: str = (
    "BAACAgIAAxkBAAPvZMrHoFvK223F0uVmCJm0P1Q7V6IAAg8yAAL2e1FKaZZCAfErnfgvBA"
)
DEFAULT_STATS_STICKER_ID: str = (
    "CAACAgEAAxkBAANOZMqb1NYuIzcycWhj8XHUX6dj77AAAlAAA8GZigABNpX804CbHk0vBA"
)


class ConfigurationError(Exception):
    """Raised when configuration is invalid or missing."""


@dataclass(frozen=True)
class ClashAPIConfig:
    """Clash of Clans API connection settings."""
    token: str
    base_url: str
    timeout_seconds: Optional[float] = None


@dataclass(frozen=True)
class Settings:
    """Root application settings."""
    bot_token: str
    clash: ClashAPIConfig
    log_level: str = "INFO"
    intro_video_id: str = DEFAULT_INTRO_VIDEO_ID
    stats_sticker_id: str = DEFAULT_STATS_STICKER_ID


def _require(key: str) -> str:
    value = os.getenv(key, "").strip()
    if not value:
        raise ConfigurationError(f"Required environment variable {key} is not set")
    return value


def _get_timeout(key: str) -> Optional[float]:
    """An unset timeout means outbound calls wait indefinitely."""
    raw = os.getenv(key, "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"{key} must be a number of seconds, got {raw!r}")
    if value <= 0:
        raise ConfigurationError(f"{key} must be positive, got {raw!r}")
    return value


def load_settings() -> Settings:
    """
    Read the environment and build the application settings.

    Raises:
        ConfigurationError: If BOT_TOKEN, COC_TOKEN or COC_API_URL is missing,
            or COC_TIMEOUT_SECONDS is not a positive number.
    """
    return Settings(
        bot_token=_require("BOT_TOKEN"),
        clash=ClashAPIConfig(
            token=_require("COC_TOKEN"),
            base_url=_require("COC_API_URL").rstrip("/"),
            timeout_seconds=_get_timeout("COC_TIMEOUT_SECONDS"),
        ),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        intro_video_id=os.getenv("INTRO_VIDEO_ID") or DEFAULT_INTRO_VIDEO_ID,
        stats_sticker_id=os.getenv("STATS_STICKER_ID") or DEFAULT_STATS_STICKER_ID,
    )
