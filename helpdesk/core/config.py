# helpdesk/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    APP_NAME: str = "Helpdesk API"
    APP_DESC: str = "Tickets and comments backed by MongoDB"
    APP_VERSION: str = "1.0.0"

    HOST: str = "0.0.0.0"
    PORT: int = Field(default=5000)

    MONGODB_URI: str = Field(default="mongodb://127.0.0.1:27017/helpdesk")
    MONGODB_DB: str = "helpdesk"  # used when the URI names no database
    MONGODB_TIMEOUT_MS: int = 5000

    # comma separated, "*" allows any origin
    CORS_ORIGINS: str = "*"

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
