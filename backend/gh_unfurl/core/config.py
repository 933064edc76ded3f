import logging
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application-wide settings managed by Pydantic.
    Reads configuration from environment variables and .env files.
    """
    # General project metadata
    PROJECT_NAME: str = "GitHub Unfurl"
    API_V1_STR: str = "/api"

    # GitHub endpoints
    # The REST API is used for lookups, the web root for canonical
    # and reconstructed URLs (e.g. the humans.txt fallback)
    GITHUB_API_BASE: str = "https://api.github.com"
    GITHUB_WEB_BASE: str = "https://github.com"

    # Optional personal access token; raises the anonymous rate limit
    GITHUB_TOKEN: Optional[str] = None

    # HTTP client behaviour
    USER_AGENT: str = "gh-unfurl/0.1"
    REQUEST_TIMEOUT_SECONDS: float = 10.0

    LOG_LEVEL: str = "INFO"

    @field_validator("GITHUB_API_BASE", "GITHUB_WEB_BASE")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Paths are appended with a leading slash, so bases must not end with one."""
        return v.rstrip("/")

    @field_validator("REQUEST_TIMEOUT_SECONDS")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"REQUEST_TIMEOUT_SECONDS must be positive, got: {v}")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"LOG_LEVEL must be a standard logging level name, got: {v}")
        return level

    # Pydantic Configuration
    model_config = SettingsConfigDict(
        env_file=".env",              # Load variables from .env file
        env_file_encoding="utf-8",    # Ensure correct encoding
        case_sensitive=True,          # Environment variables are case-sensitive
        extra="ignore"                # Ignore extra fields in .env not defined here
    )


# Instantiate the settings object to be imported elsewhere
settings = Settings()
