"""
App configuration - using pydantic settings for env vars
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """App settings - loads from .env file"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # basic app stuff
    app_name: str = Field(default="Jotter API")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)  # set to True for dev

    # server config
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=5000)
    reload: bool = Field(default=False)

    # DB settings - no default, the app can't do anything without a store
    database_url: str = Field(description="SQLAlchemy async database URL")
    database_echo: bool = Field(default=False)  # useful for debugging
    skip_lifespan_db: bool = Field(
        default=False, description="Don't create tables on startup (tests)"
    )

    # JWT
    # Left optional so the app boots; minting or verifying without it fails loudly
    secret_key: Optional[str] = Field(default=None, description="JWT signing secret")
    algorithm: str = Field(default="HS256", description="JWT algorithm")
    access_token_expire_seconds: int = Field(
        default=3600, description="Access token lifetime in seconds"
    )

    # CORS
    cors_origins: list[str] = Field(
        default=["http://localhost:5173", "http://localhost:3000"],
        description="CORS allowed origins",
    )
    cors_allow_credentials: bool = Field(default=True, description="CORS allow credentials")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_dir: str = Field(default="logs", description="Directory for rotating log files")

    # Environment
    environment: str = Field(default="development", description="Environment name")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("secret_key")
    @classmethod
    def blank_secret_is_missing(cls, v: Optional[str]) -> Optional[str]:
        # SECRET_KEY= in a .env file means "not configured"
        return v or None

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


@lru_cache
def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
