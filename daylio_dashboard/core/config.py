"""
Application settings.
"""
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BACKUP_VERSION = 15


class Settings(BaseSettings):
    """Runtime configuration, read from DAYLIO_* environment variables or .env."""

    model_config = SettingsConfigDict(
        env_prefix="DAYLIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Daylio Dashboard"
    data_dir: Path = Path("data")
    database_url: Optional[str] = None
    log_level: str = "INFO"

    # Envelope value written to exports when no backup was imported yet
    backup_version: int = DEFAULT_BACKUP_VERSION

    host: str = "127.0.0.1"
    port: int = 5000

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper()

    @property
    def resolved_database_url(self) -> str:
        """SQLite file inside data_dir unless an explicit URL is configured."""
        if self.database_url:
            return self.database_url
        return f"sqlite:///{self.data_dir / 'daylio.db'}"


settings = Settings()
