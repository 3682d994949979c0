"""
Configuration management for IPCalc.

Loads settings from environment variables or a .env file.
"""

import os
from pathlib import Path
from dataclasses import dataclass

from dotenv import load_dotenv


# Common locations for .env, first match wins
ENV_LOCATIONS = [
    Path.home() / ".ipcalc" / ".env",
    Path.home() / ".config" / "ipcalc" / ".env",
    Path.cwd() / ".env",
]


def load_env_file(locations: list[Path] = ENV_LOCATIONS) -> Path | None:
    """Load the first .env file found; existing environment wins."""
    for env_path in locations:
        if env_path.exists():
            load_dotenv(env_path)
            return env_path
    return None


load_env_file()


DEFAULT_MAX_DISPLAY = 256


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name, "")
    try:
        return int(value)
    except ValueError:
        return default


@dataclass
class CalcConfig:
    """Runtime settings for logging and CLI output."""

    log_level: str = "INFO"
    log_file: str | None = None

    # CLI stops listing blocks after this many
    max_display: int = DEFAULT_MAX_DISPLAY

    @classmethod
    def from_env(cls) -> "CalcConfig":
        """Load configuration from environment variables."""
        return cls(
            log_level=os.getenv("IPCALC_LOG_LEVEL", "INFO"),
            log_file=os.getenv("IPCALC_LOG_FILE") or None,
            max_display=_env_int("IPCALC_MAX_DISPLAY", DEFAULT_MAX_DISPLAY),
        )


# Global config instance
_config: CalcConfig | None = None


def get_config() -> CalcConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = CalcConfig.from_env()
    return _config


def set_config(config: CalcConfig | None) -> None:
    """Set the global configuration instance (None reloads from env on next use)."""
    global _config
    _config = config
