"""Application settings and configuration."""

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

# Load .env file if present
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Quiz Settings
    time_limit_seconds: float = Field(
        default=10.0,
        ge=0.0,
        description="Seconds allowed to answer each quiz question",
        validation_alias="QUIZ_TIME_LIMIT",
    )

    questions_file: Path | None = Field(
        default=None,
        description="JSON file with quiz questions (defaults to the built-in set)",
        validation_alias="QUIZ_QUESTIONS_FILE",
    )

    # ATM Settings
    max_pin_attempts: int = Field(
        default=3,
        ge=1,
        le=10,
        description="Failed PIN attempts before an account is locked",
        validation_alias="ATM_MAX_PIN_ATTEMPTS",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Log level for diagnostic output on stderr",
        validation_alias="LOG_LEVEL",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Loaded the first time and then cached for the rest of the run
@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings object with loaded configuration
    """
    return Settings()
