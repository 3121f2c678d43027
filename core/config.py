"""Environment-driven settings."""

import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent

DEFAULT_CONTENT_PATH = PROJECT_ROOT / "content" / "course_structure.json"
DEFAULT_SITE_URL = "https://learnstackhub.com"


def get_content_path() -> Path:
    """Path to the course structure JSON file."""
    value = os.environ.get("CONTENT_PATH")
    if not value:
        return DEFAULT_CONTENT_PATH
    path = Path(value)
    return path if path.is_absolute() else PROJECT_ROOT / path


def get_site_url() -> str:
    """Public base URL of the tutorial site, without trailing slash."""
    return os.environ.get("SITE_URL", DEFAULT_SITE_URL).rstrip("/")


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").upper()


def get_sentry_dsn() -> str | None:
    return os.environ.get("SENTRY_DSN") or None


def get_environment() -> str:
    return os.environ.get("ENVIRONMENT", "development")
