"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with sample data on ``0.0.0.0:8000`` when nothing is
configured.  Tests construct their own ``Settings`` instance and pass
it to ``create_app`` instead of touching the environment.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Campus Events API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    # All routes are mounted below this prefix.  Existing web clients
    # call ``/api/events``, ``/api/registrations`` and so on.
    api_prefix: str = os.getenv("API_PREFIX", "/api")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Populate a fresh store with the demo organizer account and the six
    # sample campus events.
    seed_sample_data: bool = _env_flag("SEED_SAMPLE_DATA", "true")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
