import os

from ..core.constants import DEFAULT_AUTH_PROVIDERS


def get_settings_module() -> str:
    # APP_ENV selects the settings module, development by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "attendance_dashboard.config.production"

    if env in {"test", "testing"}:
        return "attendance_dashboard.config.testing"

    return "attendance_dashboard.config.development"


def parse_providers(value: str) -> list:
    """Split a comma separated provider list ("github, google" -> ["github", "google"])."""
    providers = [p.strip().lower() for p in (value or "").split(",") if p.strip()]
    return providers or list(DEFAULT_AUTH_PROVIDERS)


def get_logging_config(level: str, fmt: str) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": fmt,
            },
        },
        "handlers": {
            "default": {
                "formatter": "default",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {
            "level": level,
            "handlers": ["default"],
        },
        "loggers": {
            # Backend client libraries log every request at INFO/DEBUG.
            "httpx": {"level": "WARNING"},
            "httpcore": {"level": "WARNING"},
        },
    }
