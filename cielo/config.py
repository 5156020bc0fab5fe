import os

from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parents[1]

FEED_BASE_URL = "https://feed-api.cielo.finance/api/v1/feed?"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    def model_post_init(self, __context: Any) -> None:
        """Ensure we pick up legacy environment variable aliases."""

        super().model_post_init(__context)

        if not self.cielo_api_key:
            fallback = os.getenv("CIELO_KEY")
            if fallback:
                object.__setattr__(self, "cielo_api_key", fallback)

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Cielo Feed API
    cielo_api_key: str = Field(default="", description="Cielo API key sent as X-API-KEY")
    cielo_base_url: str = Field(
        default=FEED_BASE_URL,
        description="Feed endpoint the query string is appended to",
    )
    request_timeout_seconds: int = Field(default=30, ge=1, description="Request timeout")


# Global settings instance
settings = Settings()
