"""
Library configuration module.
Loads environment variables and provides settings for logging and the CLI.
"""
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Get project root (one level up from this package)
PROJECT_ROOT = Path(__file__).parent.parent


class Settings(BaseSettings):
    """
    Settings loaded from DISPLAYFMT_* environment variables or .env file.
    (Note: Environment variables take precedence over .env file)
    """
    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_JSON: bool = False  # JSON lines instead of human-readable console output

    model_config = SettingsConfigDict(
        env_prefix="DISPLAYFMT_",
        env_file=str(PROJECT_ROOT / ".env"),
        case_sensitive=True,
        env_file_encoding='utf-8',
        extra="ignore"
        )


def get_settings() -> Settings:
    """
    Get settings instance.

    Returns:
        Settings: Library settings
    """
    return Settings()
