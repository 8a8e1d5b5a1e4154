"""Application settings using Pydantic Settings for typed configuration.

This module centralizes all configuration and provides type-safe access to settings.
Settings are loaded from environment variables with sensible defaults.
"""

from datetime import timedelta
from functools import lru_cache

from pydantic import Field, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "change-me-in-production"  # noqa: S105


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
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")

    # Database
    database_url: str = Field(alias="DATABASE_URL")

    # Admin panel
    session_secret_key: str = Field(alias="SESSION_SECRET_KEY")
    admin_username: str = Field(alias="ADMIN_USERNAME")
    admin_password: str = Field(alias="ADMIN_PASSWORD")

    # CORS
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")

    # JWT
    jwt_secret: str = Field(default=DEFAULT_JWT_SECRET, alias="JWT_SECRET")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    jwt_expires_hours: int = Field(default=24, alias="JWT_EXPIRES_HOURS", ge=1)

    # Account tokens
    email_verification_expires_hours: int = Field(
        default=24, alias="EMAIL_VERIFICATION_EXPIRES_HOURS", ge=1
    )
    password_reset_expires_minutes: int = Field(
        default=60, alias="PASSWORD_RESET_EXPIRES_MINUTES", ge=1
    )

    # Rate limiting
    rate_limit_enabled: bool = Field(default=True, alias="RATE_LIMIT_ENABLED")

    # Email (Resend)
    resend_api_key: str | None = Field(default=None, alias="RESEND_API_KEY")
    app_domain: str = Field(default="resend.dev", alias="APP_DOMAIN")
    client_url: str = Field(default="http://localhost:3000", alias="CLIENT_URL")

    # Public base URL of this API (used by the development mock endpoints)
    app_url: str = Field(default="http://localhost:8000", alias="APP_URL")

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Refuse to boot production with the development signing secret."""
        if self.is_production and self.jwt_secret == DEFAULT_JWT_SECRET:
            raise ValueError("JWT_SECRET must be changed in production")
        return self

    @property
    def is_production(self) -> bool:
        return self.env_name.lower() in {"prod", "production"}

    @computed_field
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS into a list."""
        origins = []
        for o in self.cors_origins.split(","):
            trimmed = o.strip()
            if trimmed:
                origins.append(trimmed)
        return origins

    @computed_field
    @property
    def jwt_expires_in(self) -> timedelta:
        """Get access token lifetime as timedelta."""
        return timedelta(hours=self.jwt_expires_hours)

    @computed_field
    @property
    def email_verification_expires_in(self) -> timedelta:
        return timedelta(hours=self.email_verification_expires_hours)

    @computed_field
    @property
    def password_reset_expires_in(self) -> timedelta:
        return timedelta(minutes=self.password_reset_expires_minutes)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
