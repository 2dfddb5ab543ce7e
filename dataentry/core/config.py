"""
Configuration helpers for the data entry app.

Settings are read once from environment variables so that the rest of the
package never touches os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    app_title: str
    database_url: str
    log_level: str
    host: str
    port: int


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        app_title=os.getenv("APP_TITLE", "Simple Data Entry"),
        database_url=(os.getenv("DATABASE_URL") or "sqlite:///data.db").strip(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        host=os.getenv("HOST", "127.0.0.1"),
        port=_int(os.getenv("PORT", "8000"), 8000),
    )
