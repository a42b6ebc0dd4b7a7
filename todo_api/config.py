"""
Configuration settings for the todo API.
Loaded from environment variables and an optional ``.env`` file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Database
    DATABASE_PATH: Path = Field(default=Path("./todo.db"), validation_alias="DATABASE_PATH")

    # API Server
    API_HOST: str = Field(default="127.0.0.1", validation_alias="API_HOST")
    API_PORT: int = Field(default=3000, validation_alias="API_PORT")

    # Logging
    LOG_LEVEL: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return (and lazily build) the module-level Settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Discard the cached settings (useful in tests)."""
    global _settings
    _settings = None
