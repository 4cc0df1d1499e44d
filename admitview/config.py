"""
Runtime configuration.

Values come from environment variables (optionally loaded from a .env file
in the working directory). Malformed numbers fall back to defaults.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_API_BASE_URL = "http://localhost:3456"
DEFAULT_STATIC_BASE_URL = "http://localhost:3456/static/"
DEFAULT_DATE_FORMAT = "%d/%m/%Y %H:%M:%S"
DEFAULT_DB_PATH = "data/views.db"
DEFAULT_UTC_OFFSET_HOURS = 7.0
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class Settings:
    api_base_url: str = DEFAULT_API_BASE_URL
    static_asset_base_url: str = DEFAULT_STATIC_BASE_URL
    request_timeout: float = 15.0
    date_format: str = DEFAULT_DATE_FORMAT
    utc_offset_hours: float = DEFAULT_UTC_OFFSET_HOURS
    log_level: str = DEFAULT_LOG_LEVEL
    log_dir: str = ""
    db_path: str = DEFAULT_DB_PATH


def load_env() -> None:
    """Load .env from the working directory if present."""
    env_path = Path.cwd() / ".env"
    if not env_path.exists():
        return
    load_dotenv(dotenv_path=env_path)


def _env_str(var_name: str, default: str) -> str:
    raw = os.getenv(var_name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip()


def _env_float(var_name: str, default: float) -> float:
    raw = os.getenv(var_name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


def _env_log_level(var_name: str, default: str) -> str:
    level = _env_str(var_name, default).upper()
    return level if level in LOG_LEVELS else default


def load_settings() -> Settings:
    """Build Settings from the current environment."""
    return Settings(
        api_base_url=_env_str("ADMITVIEW_API_BASE_URL", DEFAULT_API_BASE_URL),
        static_asset_base_url=_env_str("ADMITVIEW_STATIC_BASE_URL", DEFAULT_STATIC_BASE_URL),
        request_timeout=_env_float("ADMITVIEW_REQUEST_TIMEOUT", 15.0),
        date_format=_env_str("ADMITVIEW_DATE_FORMAT", DEFAULT_DATE_FORMAT),
        utc_offset_hours=_env_float("ADMITVIEW_UTC_OFFSET_HOURS", DEFAULT_UTC_OFFSET_HOURS),
        log_level=_env_log_level("ADMITVIEW_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        log_dir=os.getenv("ADMITVIEW_LOG_DIR", "").strip(),
        db_path=_env_str("ADMITVIEW_DB_PATH", DEFAULT_DB_PATH),
    )
