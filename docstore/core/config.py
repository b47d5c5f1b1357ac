"""
Configuration management for docstore using Pydantic Settings.
"""

from pathlib import Path
from typing import Literal, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Store settings loaded from environment variables.

    All settings can be configured via environment variables or .env file.
    """

    # Storage settings
    STORAGE_BACKEND: Literal["memory", "disk"] = Field(
        default="disk",
        description="Documents store backend (memory or disk)"
    )

    STORAGE_LOCATION: Path = Field(
        default=Path("./docstore_data"),
        description="Directory holding on-disk documents stores"
    )

    STORE_NAME: str = Field(
        default="documents",
        min_length=1,
        description="Name of the main documents store"
    )

    ARCHIVE_STORE_NAME: Optional[str] = Field(
        default=None,
        description="Name of the archive store; enables archiving on delete when set"
    )

    # Logging
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    @field_validator("STORAGE_BACKEND", mode="before")
    @classmethod
    def validate_backend(cls, v: str) -> str:
        """Normalize backend name."""
        return v.lower() if isinstance(v, str) else v

    @field_validator("STORAGE_LOCATION")
    @classmethod
    def validate_storage_location(cls, v: Path) -> Path:
        """Ensure storage location is absolute."""
        if not v.is_absolute():
            v = Path.cwd() / v
        return v

    @field_validator("ARCHIVE_STORE_NAME")
    @classmethod
    def validate_archive_store_name(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty archive store name as unset."""
        return v or None

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        v = v.upper()
        valid_levels = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
        if v not in valid_levels:
            raise ValueError(f"Invalid LOG_LEVEL: {v}. Must be one of {valid_levels}")
        return v

    @property
    def archiving_enabled(self) -> bool:
        return self.ARCHIVE_STORE_NAME is not None

    def __repr__(self) -> str:
        return (f"Settings(backend={self.STORAGE_BACKEND}, location={self.STORAGE_LOCATION}, "
                f"store={self.STORE_NAME}, archive={self.ARCHIVE_STORE_NAME})")


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings instance (singleton pattern).

    Returns:
        Settings: The store settings.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """
    Reload settings from environment (useful for testing).

    Returns:
        Settings: The reloaded settings instance.
    """
    global _settings
    _settings = Settings()
    return _settings
