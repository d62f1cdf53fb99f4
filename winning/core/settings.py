"""Application settings using Pydantic Settings for typed configuration.

This module centralizes all configuration and provides type-safe access to settings.
Settings are loaded from environment variables with sensible defaults.
"""

from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


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

    # Database / durable slot
    database_url: str = Field(default="sqlite:///./winning.db", alias="DATABASE_URL")
    storage_key: str = Field(default="winning_products_dz_v2", alias="STORAGE_KEY")

    # Sessions
    session_secret_key: str = Field(
        default="dev-session-secret-change-me", alias="SESSION_SECRET_KEY"
    )

    # Accounts
    admin_email: str = Field(default="admin@winning.dz", alias="ADMIN_EMAIL")
    strict_transitions: bool = Field(default=True, alias="STRICT_TRANSITIONS")
    support_whatsapp: str = Field(default="+213555112233", alias="SUPPORT_WHATSAPP")

    # CORS
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")

    # Product scan
    scan_webhook_url: str = Field(
        default="https://innovation-team.hawiyat.org/webhook-test/scan-products",
        alias="SCAN_WEBHOOK_URL",
    )
    public_url: str = Field(default="http://localhost:8000", alias="PUBLIC_URL")
    gemini_api_key: str | None = Field(default=None, alias="GEMINI_API_KEY")
    gemini_model: str = Field(default="gemini-3-pro-preview", alias="GEMINI_MODEL")
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com", alias="GEMINI_BASE_URL"
    )

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
    def is_secure_cookie(self) -> bool:
        """Determine if cookies should be set with Secure flag."""
        return self.env_name.lower() not in {"dev", "development", "local", "test"}

    @computed_field
    @property
    def scan_callback_url(self) -> str:
        """URL the scan workflow reports back to."""
        return self.public_url.rstrip("/") + "/api/scans/complete"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
