"""
Application configuration using Pydantic settings.

Usage:
    from accounts.config import get_settings
    settings = get_settings()
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Unified application settings loaded from environment variables and .env file.

    Required for production:
        - JWT_SECRET_KEY (min 32 chars)
        - DATABASE_URL
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App settings
    app_name: str = "Profile Service"
    api_prefix: str = "/api"
    debug: bool = Field(default=False)

    # Database
    database_url: str = Field(default="sqlite:///profile_service.db", validation_alias="DATABASE_URL")
    db_pool_size: int = Field(default=10, validation_alias="DB_POOL_SIZE")
    db_max_overflow: int = Field(default=20, validation_alias="DB_MAX_OVERFLOW")
    db_pool_pre_ping: bool = Field(default=True, validation_alias="DB_POOL_PRE_PING")
    create_tables_on_startup: bool = Field(default=False, validation_alias="CREATE_TABLES_ON_STARTUP")

    # JWT / Authentication
    jwt_secret_key: str = Field(default="CHANGE_ME", validation_alias="JWT_SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256")
    access_token_expire_minutes: int = Field(default=60 * 24)

    # Password hashing (bcrypt log2 cost)
    password_hash_rounds: int = Field(default=10, ge=4, le=31, validation_alias="PASSWORD_HASH_ROUNDS")

    # CORS
    cors_allowed_origins: str = Field(default="http://localhost:5173", validation_alias="CORS_ALLOWED_ORIGINS")

    @field_validator("jwt_secret_key")
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        """Validate JWT secret - warns in dev, errors in production."""
        import os
        import warnings

        env = os.getenv("ENV", "development")
        is_production = env.lower() in ("production", "prod")

        forbidden_values = [
            "CHANGE_ME", "changeme", "secret", "your-secret-key",
            "jwt-secret", "supersecret", "development", "test",
        ]

        is_forbidden = v.lower() in [fv.lower() for fv in forbidden_values]
        is_too_short = len(v) < 32

        if is_production:
            if is_forbidden:
                raise ValueError(
                    f"JWT_SECRET_KEY cannot be a default value ('{v}') in production. "
                    "Generate a secure key with: python -c \"import secrets; print(secrets.token_urlsafe(48))\""
                )
            if is_too_short:
                raise ValueError(
                    f"JWT_SECRET_KEY must be at least 32 characters in production (got {len(v)})."
                )
        else:
            if is_forbidden:
                warnings.warn(
                    f"JWT_SECRET_KEY is set to a default value ('{v}'). "
                    "This is insecure - set a proper key for production.",
                    UserWarning,
                    stacklevel=2,
                )
            elif is_too_short:
                warnings.warn(
                    f"JWT_SECRET_KEY should be at least 32 characters (got {len(v)})",
                    UserWarning,
                    stacklevel=2,
                )

        return v

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_allowed_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()


__all__ = ["Settings", "get_settings"]
