"""
Configuration management for the charity back office.

This module centralizes environment-driven configuration using Pydantic's
`BaseSettings`. The API, the storage layer and the CLI all consume the shared
`settings` instance so file locations and bootstrap identities stay consistent.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Annotated, List, Optional

from pydantic import AliasChoices, Field, PositiveInt, field_validator
from pydantic_settings import BaseSettings, NoDecode


class Settings(BaseSettings):
    """Application configuration sourced from environment variables."""

    # General application settings
    API_TITLE: str = "Charity Back Office API"
    API_VERSION: str = "0.1.0"
    DEBUG: bool = False
    ENVIRONMENT: str = Field("development", pattern=r"^(development|staging|production)$")
    LOG_LEVEL: str = "INFO"

    # File-backed storage
    DATA_DIR: Path = Field(default_factory=lambda: Path("data"))
    EMPLOYEES_FILE: Optional[Path] = None
    AUDIT_LOG_FILE: Optional[Path] = None
    AUDIT_MAX_ENTRIES: PositiveInt = 500

    # Bootstrap identity; HEAD_EMAIL is the older name for the same variable
    PRESIDENT_EMAIL: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("PRESIDENT_EMAIL", "HEAD_EMAIL"),
    )
    PRESIDENT_NAME: str = "Association President"
    HEAD_KEY: Optional[str] = None

    # Security / auth
    SECRET_KEY: str = "changeme"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 12
    SUPERUSER_ROLES: Annotated[List[str], NoDecode] = Field(default_factory=lambda: ["president"])
    ALLOWED_ORIGINS: Annotated[List[str], NoDecode] = Field(default_factory=lambda: ["*"])

    # Form client
    API_BASE_URL: str = "http://localhost:8080"
    CLIENT_TIMEOUT_SECONDS: float = 30.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

    @field_validator("ALLOWED_ORIGINS", "SUPERUSER_ROLES", mode="before")
    def _split_list(cls, value: str | List[str]) -> List[str]:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @field_validator("PRESIDENT_EMAIL", "HEAD_KEY", mode="before")
    def _blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if isinstance(value, str) and not value.strip():
            return None
        return value.strip() if isinstance(value, str) else value

    @property
    def employees_path(self) -> Path:
        return self.EMPLOYEES_FILE or self.DATA_DIR / "employees.json"

    @property
    def audit_log_path(self) -> Path:
        return self.AUDIT_LOG_FILE or self.DATA_DIR / "audit-log.json"


@lru_cache()
def get_settings() -> Settings:
    """Return a cached `Settings` instance."""

    return Settings()


# Singleton-style settings instance for modules that prefer direct access.
settings = get_settings()
