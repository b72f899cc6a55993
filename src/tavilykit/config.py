"""Client configuration.

Configuration is loaded from environment variables. For local development, you can provide a
`.env` file and set `TAVILY_ENV_FILE` to point to it.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

TAVILY_BASE_URL = "https://api.tavily.com"


class Settings(BaseSettings):
    """tavilykit settings.

    All fields are environment-configurable. Prefix is `TAVILY_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="TAVILY_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Read from TAVILY_API_KEY; only consulted when no explicit key is given.
    api_key: SecretStr | None = Field(default=None)
    base_url: str = Field(default=TAVILY_BASE_URL)
    # None leaves the transport default in place.
    timeout_s: float | None = Field(default=None, gt=0.0, le=600.0)

    log_level: str = Field(default="INFO")


def load_settings() -> Settings:
    """Load settings from env.

    Returns:
        Settings: Parsed settings.
    """

    env_file_override = os.getenv("TAVILY_ENV_FILE")
    if env_file_override:
        env_path = Path(env_file_override)
        return Settings(_env_file=env_path)

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return Settings(_env_file=default_env)

    return Settings()
