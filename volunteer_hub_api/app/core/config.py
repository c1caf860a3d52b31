"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration; in a deployment you should
override them via environment variables.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Volunteer Hub API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Which durable store backs the four collections.  ``sqlite`` keeps
    # records across restarts; ``memory`` is handy for demos and tests
    # and loses everything when the process exits.
    storage_backend: str = os.getenv("STORAGE_BACKEND", "sqlite")

    # Path to the SQLite database file.  If a relative path is given it
    # is resolved relative to the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "volunteer_hub.db")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
