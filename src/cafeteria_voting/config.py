"""Application configuration."""

import os
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_file: str = "data.json"
    auth_mode: Literal["anonymous", "header"] = "anonymous"
    anonymous_user_id: str = "anonymous"
    admin_token: str | None = None
    login_rate_limit_window_seconds: int = 15 * 60
    login_rate_limit_max_attempts: int = 5
    login_rate_limit_max_keys: int = 10_000
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
