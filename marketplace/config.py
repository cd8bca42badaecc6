"""
Application configuration using Pydantic Settings.
Loads environment variables and provides type-safe configuration.
"""

from typing import List, Optional
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator

DEFAULT_UPLOAD_EXTENSIONS = [".pdf", ".png", ".jpg", ".jpeg", ".gif", ".webp", ".doc", ".docx", ".mp4", ".txt"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    environment: str = Field(default="development", description="Current environment")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: Optional[str] = Field(default=None, description="Overrides the level implied by debug")
    app_title: str = Field(default="Freelance Marketplace")

    # Supabase Configuration
    supabase_url: str = Field(default="https://example.supabase.co", description="Supabase project URL")
    supabase_anon_key: str = Field(default="temp-key", description="Supabase anonymous key")

    # Backends
    document_backend: str = Field(default="supabase", pattern="^(supabase|memory)$")
    storage_backend: str = Field(default="supabase", pattern="^(supabase|memory)$")
    storage_bucket: str = Field(default="attachments")

    # Authentication
    auth_provider: str = Field(default="google", description="OAuth provider used for interactive sign-in")
    auth_redirect_url: Optional[str] = Field(default=None, description="OAuth redirect URL")

    # Pagination
    default_page_size: int = Field(default=10, ge=1)
    recent_activities_limit: int = Field(default=10, ge=1)

    # File Upload
    max_upload_size_mb: int = Field(default=10)
    allowed_upload_extensions: str | List[str] = Field(
        default=",".join(DEFAULT_UPLOAD_EXTENSIONS)
    )
    upload_chunk_size: int = Field(default=256 * 1024, ge=1)
    signed_url_expires_in: int = Field(default=3600, description="Signed URL lifetime in seconds")

    @field_validator("allowed_upload_extensions", mode="before")
    @classmethod
    def parse_upload_extensions(cls, v):
        """Parse upload extensions from comma-separated string or list."""
        if isinstance(v, str):
            if not v or v.strip() == "":
                return list(DEFAULT_UPLOAD_EXTENSIONS)
            return [ext.strip().lower() for ext in v.split(",") if ext.strip()]
        elif v is None:
            return list(DEFAULT_UPLOAD_EXTENSIONS)
        return [ext.lower() for ext in v]

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment.lower() == "testing"

    @property
    def max_upload_size_bytes(self) -> int:
        """Get max upload size in bytes."""
        return self.max_upload_size_mb * 1024 * 1024

    @property
    def effective_log_level(self) -> str:
        """Log level name, honouring an explicit override."""
        if self.log_level:
            return self.log_level.upper()
        return "DEBUG" if self.debug else "INFO"

    def validate_environment(self) -> None:
        """Validate that all required environment variables are set."""
        required_vars = [
            "supabase_url",
            "supabase_anon_key",
        ]

        missing_vars = []
        for var in required_vars:
            value = getattr(self, var, None)
            if not value or value in ("temp-key", "https://example.supabase.co"):
                missing_vars.append(var.upper())

        if missing_vars:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing_vars)}"
            )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Use this function to get settings throughout the application.
    """
    settings = Settings()

    # Validate environment in production
    if settings.is_production:
        settings.validate_environment()

    return settings
