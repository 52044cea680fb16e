"""
Settings for the JSON Record Table Viewer.

Loaded with Pydantic Settings from environment variables and an optional
`.env` file. The page size is not a setting; see `pagination.PAGE_SIZE`.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENDPOINT = "https://jsonplaceholder.typicode.com/users"


class Settings(BaseSettings):
    # Remote source
    endpoint_url: str = Field(DEFAULT_ENDPOINT, alias="TABLE_VIEWER_ENDPOINT")
    request_timeout: float = Field(10.0, alias="TABLE_VIEWER_TIMEOUT")

    # Application
    title: str = Field("User Table", alias="TABLE_VIEWER_TITLE")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["DEFAULT_ENDPOINT", "Settings", "get_settings"]
