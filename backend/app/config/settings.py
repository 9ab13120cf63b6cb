from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from app.config.defaults import (
    DEFAULT_FORWARD_HEADERS,
    DEFAULT_UPSTREAM_BASE_URL,
    DEFAULT_UPSTREAM_TIMEOUT_SECONDS,
)


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    app_env: str = "dev"
    app_name: str = "incident-insight-backend"
    upstream_base_url: str = DEFAULT_UPSTREAM_BASE_URL
    upstream_timeout_seconds: float = DEFAULT_UPSTREAM_TIMEOUT_SECONDS
    forward_headers: list[str] = DEFAULT_FORWARD_HEADERS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return AppSettings()
