# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.supabase_url)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Credentials are optional at import time so the app can still boot and report
# "not configured" errors. The standalone server refuses to start without the
# database credentials (see app/server.py).
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Supabase Configuration
    # -------------------------------------------------------------------------

    SUPABASE_URL: str = Field(
        default="",
        description="Supabase project URL (e.g., https://xxx.supabase.co)"
    )

    SUPABASE_SERVICE_ROLE_KEY: str = Field(
        default="",
        description="Supabase service_role key (bypasses RLS)"
    )

    # Public pair consumed by the front end; SUPABASE_URL falls back to it
    VITE_SUPABASE_URL: str = Field(
        default="",
        description="Public Supabase URL exposed to the browser"
    )

    VITE_SUPABASE_ANON_KEY: str = Field(
        default="",
        description="Supabase anon/public API key exposed to the browser"
    )

    # -------------------------------------------------------------------------
    # Cloudinary (image asset host)
    # -------------------------------------------------------------------------

    CLOUDINARY_CLOUD_NAME: str = Field(default="", description="Cloudinary cloud name")
    CLOUDINARY_API_KEY: str = Field(default="", description="Cloudinary API key")
    CLOUDINARY_API_SECRET: str = Field(default="", description="Cloudinary API secret")

    CLOUDINARY_FOLDER: str = Field(
        default="lumen-sphere",
        description="Folder uploaded images are stored under"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, auto-reload)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    PORT: int = Field(
        default=4000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    API_PREFIX: str = Field(
        default="/api",
        description="URL prefix stripped before routing"
    )

    # -------------------------------------------------------------------------
    # Security
    # -------------------------------------------------------------------------

    # Comma-separated; empty means any verified Supabase user is an admin
    ADMIN_ALLOWLIST: str = Field(
        default="",
        description="Admin email addresses allowed to use mutating endpoints"
    )

    CORS_ORIGINS: str = Field(
        default="*",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # File Upload Settings
    # -------------------------------------------------------------------------

    MAX_UPLOAD_SIZE_MB: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Maximum image upload size in MB"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def supabase_url(self) -> str:
        """Server-side database URL, falling back to the public one."""
        return (self.SUPABASE_URL or self.VITE_SUPABASE_URL).strip()

    @property
    def has_supabase_credentials(self) -> bool:
        return bool(self.supabase_url and self.SUPABASE_SERVICE_ROLE_KEY)

    @property
    def has_cloudinary_credentials(self) -> bool:
        return bool(
            self.CLOUDINARY_CLOUD_NAME
            and self.CLOUDINARY_API_KEY
            and self.CLOUDINARY_API_SECRET
        )

    @property
    def admin_allowlist(self) -> list[str]:
        """
        Parse ADMIN_ALLOWLIST into lower-cased addresses.

        Example: "Ana@Studio.dev, ops@studio.dev" -> ["ana@studio.dev", "ops@studio.dev"]
        """
        return [
            email.strip().lower()
            for email in self.ADMIN_ALLOWLIST.split(",")
            if email.strip()
        ]

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def max_upload_size_bytes(self) -> int:
        return self.MAX_UPLOAD_SIZE_MB * 1024 * 1024

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
