"""
Configuration helpers for the Person API.

Settings are read from environment variables so that services, repositories
and scripts do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_DATA_FILE = Path(__file__).resolve().parents[1] / "data.json"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    person_backend: str
    data_file: Path
    log_level: str
    log_file: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    data_file = (os.getenv("PERSON_DATA_FILE") or "").strip()
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=os.getenv("DATABASE_URL", ""),
        person_backend=(os.getenv("PERSON_BACKEND") or "memory").strip().lower(),
        data_file=Path(data_file) if data_file else DEFAULT_DATA_FILE,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_file=os.getenv("LOG_FILE", ""),
    )
