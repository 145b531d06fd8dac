"""
Configuration via environment variables.

Loaded with pydantic-settings from WORKSPACE_AUTH_* variables (or a .env
file). The bcrypt work factor lives here rather than in code so each
deployment can tune it.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    """All workspace_auth configuration. Set via WORKSPACE_AUTH_* env vars."""

    model_config = SettingsConfigDict(
        env_prefix="WORKSPACE_AUTH_",
        env_file=".env",
        extra="ignore",
    )

    # Password hashing (bcrypt accepts 4..31)
    bcrypt_work_factor: int = Field(default=8, ge=4, le=31)

    # Sessions
    session_ttl: int = Field(default=3600, gt=0)
    redis_url: str = "redis://localhost:6379/0"
    session_prefix: str = "workspace:session:"

    # Logging
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def load_settings() -> AuthSettings:
    """Load and cache settings."""
    return AuthSettings()
