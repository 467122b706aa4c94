"""Application configuration loaded from environment variables and .env file."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # Transport settings
    TRANSPORT: str = "mock"
    API_URL: str = "http://127.0.0.1:8080/rpc"
    AUTH_TOKEN: Optional[str] = None
    REQUEST_TIMEOUT: float = 10.0


settings = Settings()
