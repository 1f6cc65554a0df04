from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

from myshop.settings.database_settings import DatabaseSettings


class AppSettings(BaseSettings):
    """
    Application settings aggregator.
    Loaded from environment with prefix MYSHOP_*
    """

    app_name: str = "MyShop Order API"
    log_level: str = "INFO"

    # "memory" keeps everything in process, for demos
    repository_backend: Literal["sqlalchemy", "memory"] = "sqlalchemy"

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "MYSHOP_",
        "extra": "ignore",
    }


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached global settings for the entire app."""
    return AppSettings()
