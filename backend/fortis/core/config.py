"""
Application configuration.
All values loaded from environment variables or a local .env file.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Dashboard settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # json or console

    # Weekly target shown on the progress ring
    WEEKLY_GOAL: int = 4

    # Header fallbacks when the profile has no username
    DEFAULT_USERNAME: str = "Athlete"
    DEFAULT_INITIAL: str = "U"


settings = Settings()
