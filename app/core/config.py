from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from pydantic import Field, PostgresDsn, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class InvalidSettingsError(Exception):
    """Raised when settings are invalid."""

    def __init__(self, invalid_fields: list[tuple[str, str]]) -> None:
        """Initialize with list of invalid field names and messages."""
        self.invalid_fields = invalid_fields
        summary = ", ".join(f"{field}: {message}" for field, message in invalid_fields)
        super().__init__(f"Invalid environment variables: {summary}")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "tourwise-content-engine"
    environment: Literal["local", "test", "production"] = "local"
    log_level: str = "INFO"
    site_url: str = Field(
        default="https://tourwiseai.com",
        description="Public base URL used for sitemap and robots entries",
    )

    # Content source
    content_backend: Literal["markdown", "database"] = "markdown"
    content_dir: Path = Field(default=Path("content"), description="Markdown content root")
    verticals_file: Path | None = Field(
        default=None, description="JSON file overriding the built-in vertical catalogue"
    )
    affiliate_partners_file: Path | None = Field(
        default=None, description="JSON file overriding the built-in affiliate partner table"
    )

    # Database content backend; url built from components when missing
    postgres_user: str | None = None
    postgres_password: str | None = None
    postgres_host: str | None = None
    postgres_port: int = 5432
    postgres_db: str | None = None
    database_url: PostgresDsn | None = Field(
        default=None,
        description="Database connection URL",
    )

    rate_limit_storage_url: str = Field(
        default="memory://",
        description="Rate limit storage URL",
    )

    @field_validator("site_url")
    @classmethod
    def normalize_site_url(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value.startswith(("http://", "https://")):
            raise ValueError("Site URL must start with http:// or https://")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level

    @model_validator(mode="after")
    def build_database_url(self) -> Settings:
        """Build the database URL from components when missing."""
        if self.database_url is None and self.postgres_host and self.postgres_db:
            self.database_url = PostgresDsn.build(
                scheme="postgresql+asyncpg",
                username=self.postgres_user,
                password=self.postgres_password,
                host=self.postgres_host,
                port=self.postgres_port,
                path=self.postgres_db,
            )
        if self.content_backend == "database" and self.database_url is None:
            raise ValueError(
                "The database content backend needs DATABASE_URL or POSTGRES_HOST and POSTGRES_DB."
            )
        return self


def validate_settings() -> Settings:
    """Validate settings and collect every invalid field.

    Raises:
        InvalidSettingsError: If any environment variable has an invalid value
    """
    try:
        return Settings()
    except ValidationError as e:
        invalid_fields: list[tuple[str, str]] = []
        for error in e.errors():
            field_path = ".".join(str(part) for part in error.get("loc", []))
            message = error.get("msg", "Invalid value")
            invalid_fields.append((field_path or "settings", message))
        raise InvalidSettingsError(invalid_fields) from e


# Validate settings at import time.
# Exceptions will propagate to the importing module (e.g., app/main.py)
settings = validate_settings()
