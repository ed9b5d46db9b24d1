"""Runtime settings loaded from the environment (``F1TOPIC_*``) or a .env file."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from f1topic._http import DEFAULT_TIMEOUT
from f1topic.constants import DEFAULT_FANTASY_CODE


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="F1TOPIC_",
        case_sensitive=False,
        extra="ignore",
    )

    timeout: float = DEFAULT_TIMEOUT
    fantasy_code: str = DEFAULT_FANTASY_CODE
    log_file: str | None = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
