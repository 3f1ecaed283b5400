"""
Configuration management using Pydantic Settings.
Single source of truth for the listen port, store location, static pages and logging.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Application settings loaded from environment. Validates at startup."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Buildstore API"
    debug: bool = False

    # Server (PORT is the only knob the deployment usually sets)
    host: str = "0.0.0.0"
    port: int = 8032

    # Database (SQLite file kept alongside the application)
    database_url: str = f"sqlite+aiosqlite:///{PACKAGE_DIR / 'db.sqlite'}"

    # Static pages
    static_dir: Path = PACKAGE_DIR / "static"

    # CORS: every origin is allowed unless narrowed here
    cors_origins: list[str] = ["*"]

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance. Avoids re-reading env on every request."""
    return Settings()
