"""
Configuration management using Pydantic settings.
Handles database URL, token secrets, and environment variables for Docker deployment.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings
from dataclasses import dataclass
from typing import List
from functools import lru_cache


DEFAULT_TOKEN_KEY = "your-secret-key-change-in-production"
DEFAULT_PRODUCT_KEY_SECRET = "your-product-key-secret-change-in-production"


@dataclass(frozen=True)
class TokenConfig:
    """Signing parameters handed to the token verifier at construction."""

    secret_key: str
    algorithm: str = "HS256"
    expire_minutes: int = 60


class Settings(BaseSettings):
    """Application settings with Docker environment variable support."""

    # Application configuration
    app_name: str = "Realtor API"
    app_version: str = "1.0.0"
    environment: str = "development"
    debug: bool = False

    # Database configuration - Docker-compatible defaults
    database_url: str = "postgresql+asyncpg://postgres:postgres@db:5432/realtor"

    # Token configuration
    json_token_key: str = DEFAULT_TOKEN_KEY
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # Realtor/admin signup
    product_key_secret: str = DEFAULT_PRODUCT_KEY_SECRET

    # API configuration
    cors_origins: List[str] = ["http://localhost:3000", "http://localhost:8080", "http://localhost:8000"]

    # Server configuration
    host: str = "0.0.0.0"
    port: int = 8000

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v):
        """Ensure an async driver is used."""
        if v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    @field_validator("json_token_key")
    @classmethod
    def validate_json_token_key(cls, v):
        """Validate token secret strength."""
        if not v:
            raise ValueError("JSON_TOKEN_KEY is required")
        if len(v) < 32 and v != DEFAULT_TOKEN_KEY:
            raise ValueError("JSON_TOKEN_KEY must be at least 32 characters long")
        return v

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment setting."""
        allowed_envs = ["development", "testing", "staging", "production"]
        if v not in allowed_envs:
            raise ValueError(f"Environment must be one of: {allowed_envs}")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"

    @property
    def token_config(self) -> TokenConfig:
        """Token signing parameters as an explicit struct."""
        return TokenConfig(
            secret_key=self.json_token_key,
            algorithm=self.jwt_algorithm,
            expire_minutes=self.access_token_expire_minutes,
        )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    This ensures we only create one instance of settings throughout the app lifecycle.
    """
    return Settings()


# Global settings instance
settings = get_settings()
