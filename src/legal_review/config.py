"""Configuration management for Legal Review."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Legal research API
    api_token: Optional[str] = Field(default=None, alias="API_TOKEN")
    research_api_url: str = Field(
        default="https://webapp-git-valsai-midpage.vercel.app/api/legal_research",
        alias="LEGAL_RESEARCH_API_URL",
    )
    # Research runs can take minutes
    request_timeout: float = Field(
        default=600.0,
        alias="LEGAL_REVIEW_TIMEOUT",
    )
    max_retries: int = Field(
        default=3,
        alias="LEGAL_REVIEW_MAX_RETRIES",
    )

    # Report settings
    default_format: str = Field(
        default="docx",
        alias="LEGAL_REVIEW_FORMAT",
    )
    email_sender: str = Field(
        default="Legal Review <noreply@resend.dev>",
        alias="LEGAL_REVIEW_SENDER",
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
