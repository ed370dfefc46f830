from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "Dial Assist"
    LOG_LEVEL: str = "INFO"

    # Any SQLAlchemy URL; tests build their own engines
    DATABASE_URL: str = "sqlite:///./app.db"

    # The credits page has no login yet, so it always shows this user's balance
    CREDITS_EMAIL: str = "test@test.com"

    # OpenAI moderation. Reads OPENAI_API_KEY or openai_api_key from the env.
    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4.1-mini"
    openai_max_tokens: int = 1024

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Settings are read from the env once per process."""
    return Settings()
