"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts against a local SQLite file with no configuration at
all.  Tests and embedding code may construct ``Settings`` explicitly
and pass it to ``create_app``.
"""

import os
from dataclasses import dataclass


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "AWS Demo API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_bool("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Connection string for the users store.  ``sqlite:///path``, a bare
    # file path and ``:memory:`` are understood by ``core.db``.
    database_url: str = os.getenv("DB_URL", "sqlite:///aws_demo.db")
    database_user: str = os.getenv("DB_USER", "")
    database_password: str = os.getenv("DB_PASSWORD", "")

    server_host: str = os.getenv("SERVER_HOST", "0.0.0.0")
    server_port: int = int(os.getenv("SERVER_PORT", "8080"))

    # Insert the three sample users when the store is empty at startup.
    seed_sample_data: bool = _env_bool("SEED_SAMPLE_DATA", "true")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
