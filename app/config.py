"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    debug: bool = Field(
        default=False,
        description="Log full notification contents instead of a one line summary",
    )
    app_timezone: str = Field(
        default="UTC",
        description="Timezone used when stamping build email records",
    )
    sendgrid_api_key: str | None = Field(
        default=None,
        description="SendGrid API key used for sending notification emails via the REST API",
    )
    sendgrid_sender: str | None = Field(
        default=None,
        description="Email address that will appear as the sender of notification emails",
        min_length=3,
    )
    github_api_url: str = Field(
        default="https://api.github.com",
        description="Base URL of the GitHub REST API",
    )
    github_token: str | None = Field(
        default=None,
        description="Token allowed to create check runs on the configured repository",
    )
    github_repository: str | None = Field(
        default=None,
        description="Repository receiving check runs, in owner/name form",
    )
    github_timeout: float = Field(
        default=10.0,
        description="Seconds to wait for the GitHub API before giving up",
        gt=0,
    )
    dashboard_url: str | None = Field(
        default=None,
        description="Public URL of the dashboard, linked from check runs",
    )

    @model_validator(mode="after")
    def _validate_sendgrid_pair(self) -> "Settings":
        if bool(self.sendgrid_api_key) ^ bool(self.sendgrid_sender):
            raise ValueError(
                "SENDGRID_API_KEY and SENDGRID_SENDER must both be provided to enable email"
            )
        if self.sendgrid_sender and "@" not in self.sendgrid_sender:
            raise ValueError("SENDGRID_SENDER must be a valid email address")
        return self

    @model_validator(mode="after")
    def _validate_github_repository(self) -> "Settings":
        repository = self.github_repository
        if repository and repository.count("/") != 1:
            raise ValueError("GITHUB_REPOSITORY must look like 'owner/name'")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
