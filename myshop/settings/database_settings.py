from pydantic import Field
from pydantic_settings import BaseSettings


class DatabaseSettings(BaseSettings):
    """
    Database connection settings.
    Loaded from environment with prefix MYSHOP_DB_*
    """

    url: str = Field(default="sqlite+aiosqlite:///./myshop.db")
    echo: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "MYSHOP_DB_",
        "extra": "ignore",
    }
