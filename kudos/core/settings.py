"""Application settings using Pydantic Settings for typed configuration.

Settings are loaded from environment variables (or a local .env file)
with defaults suitable for local development.
"""

from datetime import timedelta
from functools import lru_cache
from typing import Literal

from fastapi import Request
from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

_DEV_ENV_NAMES = {"dev", "development", "local", "test"}


class Settings(BaseSettings):
    """Application-wide settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Environment
    env_name: str = Field(default="development", alias="ENV_NAME")

    # Database
    database_url: str = Field(default="sqlite:///./kudos.db", alias="DATABASE_URL")
    db_create_tables: bool = Field(default=True, alias="DB_CREATE_TABLES")

    # Back-office (SQLAdmin signs its own cookie with this key)
    session_secret_key: str = Field(
        default="change-me-in-production", alias="SESSION_SECRET_KEY"
    )

    # Sessions
    session_expires_days: int = Field(
        default=7, alias="SESSION_EXPIRES_DAYS", ge=1, le=30
    )
    session_cookie_name: str = Field(
        default="session_token", alias="SESSION_COOKIE_NAME"
    )

    # CORS
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")

    # Email (Resend)
    resend_api_key: str | None = Field(default=None, alias="RESEND_API_KEY")
    app_domain: str = Field(default="resend.dev", alias="APP_DOMAIN")
    client_url: str = Field(default="http://localhost:3000", alias="CLIENT_URL")

    @computed_field
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS into a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @computed_field
    @property
    def is_secure_cookie(self) -> bool:
        """Cookies carry the Secure flag everywhere except local development."""
        return self.env_name.lower() not in _DEV_ENV_NAMES

    @computed_field
    @property
    def cookie_samesite(self) -> Literal["lax", "none"]:
        """Cross-site cookies are only allowed together with Secure."""
        return "none" if self.is_secure_cookie else "lax"

    @computed_field
    @property
    def session_expires_in(self) -> timedelta:
        """Get session lifetime as timedelta."""
        return timedelta(days=self.session_expires_days)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


def get_app_settings(request: Request) -> Settings:
    """Return the settings the running app was built with."""
    return request.app.state.settings
