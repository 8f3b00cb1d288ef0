"""Environment based settings for the sqlmarshal command line.

Every setting can be given as ``SQLMARSHAL_<NAME>`` in the environment or in
a ``.env`` file in the working directory; command line flags win over both.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

Dialect = Literal["ansi", "postgresql", "sqlite"]


class Settings(BaseSettings):
    """Settings for statement generation and logging."""

    model_config = SettingsConfigDict(
        env_prefix="SQLMARSHAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    dialect: Dialect = Field(default="ansi", description="SQL dialect used for CREATE")
    log_level: str = Field(default="WARNING", description="Log level name")
    log_json: bool = Field(default=False, description="Render log events as JSON")


@lru_cache
def get_settings() -> Settings:
    """Get the cached settings instance."""
    return Settings()
