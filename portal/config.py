"""
Configuration and settings for the portal backend.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BUCKET_REGION = "eu-north-1"


class Settings(BaseSettings):
    """Environment-backed settings for the FastAPI service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    api_prefix: str = Field(default="/api")
    app_env: str = Field(default="development")

    # Database (Postgres expected, usually through the Supabase pooler)
    database_url: Optional[str] = Field(default=None)

    # Supabase project. Public variables win over server-only ones.
    supabase_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(
            "NEXT_PUBLIC_SUPABASE_DATABASE_URL", "SUPABASE_DATABASE_URL"
        ),
    )
    supabase_anon_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(
            "NEXT_PUBLIC_SUPABASE_ANON_KEY", "SUPABASE_ANON_KEY"
        ),
    )
    supabase_service_role_key: Optional[str] = Field(
        default=None, validation_alias="SUPABASE_SERVICE_ROLE_KEY"
    )

    # S3 object storage for uploaded images
    bucket_region: str = Field(
        default=DEFAULT_BUCKET_REGION,
        validation_alias=AliasChoices("AWS_REGIO", "BUCKET_REGION"),
    )
    bucket_name: Optional[str] = Field(default=None, validation_alias="BUCKET_NAME")
    aws_access_key: Optional[str] = Field(
        default=None, validation_alias="AWS_ACCESS_KEY"
    )
    aws_secret_access: Optional[str] = Field(
        default=None, validation_alias="AWS_SECRET_ACCESS"
    )

    # Development toggles
    use_in_memory_backends: bool = Field(
        default=False, validation_alias="PORTAL_USE_IN_MEMORY_BACKENDS"
    )

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
