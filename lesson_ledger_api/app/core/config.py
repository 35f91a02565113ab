"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts against a local SQLite file without any setup.  In a
production deployment override these via environment variables.
"""

import os
from dataclasses import dataclass
from typing import List


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Lesson Ledger API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database file.  A relative path is resolved
    # against the project root by ``core.db``.
    database_url: str = os.getenv("DATABASE_URL", "lesson_ledger.db")

    # Comma‑separated list of origins allowed by the CORS middleware.
    # ``*`` allows any origin, which is what the tutoring front end
    # expects when served from a different port during development.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5001"))

    # Passwords are stored exactly as submitted unless this is enabled.
    # Switching it on for an existing database invalidates every stored
    # plaintext password.
    password_hashing: bool = os.getenv("PASSWORD_HASHING", "false").lower() in {"1", "true", "yes"}

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
