"""Configuration and settings for EnPlace Shopper."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# App directories
APP_NAME = "enplace-shopper"
CONFIG_DIR = Path(os.getenv("ENPLACE_CONFIG_DIR", str(Path.home() / f".{APP_NAME}")))
CHECKLIST_FILE = CONFIG_DIR / "checklist.json"

DEFAULT_LOG_LEVEL = "WARNING"


def get_recipes_file() -> Path | None:
    """Get the default recipes bundle from ENPLACE_RECIPES_FILE."""
    value = os.getenv("ENPLACE_RECIPES_FILE")
    if not value:
        return None
    return Path(value).expanduser()


def get_log_level() -> str:
    """Get the log level from ENPLACE_LOG_LEVEL."""
    return os.getenv("ENPLACE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def get_log_format() -> str:
    """Get the log format ("text" or "json") from ENPLACE_LOG_FORMAT."""
    value = os.getenv("ENPLACE_LOG_FORMAT", "text").lower()
    return value if value in ("text", "json") else "text"


def get_log_file() -> str | None:
    """Get an extra log file path from ENPLACE_LOG_FILE."""
    value = os.getenv("ENPLACE_LOG_FILE")
    if not value:
        return None
    return str(Path(value).expanduser())
