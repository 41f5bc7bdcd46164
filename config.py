"""
Global Configuration for the GitOps Demo status service
"""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings

# Fixed response payload values
APP_STATUS = "UP"
APP_MESSAGE = "GitOps Demo Application is running!"
APP_VERSION = "1.0"


class Settings(BaseSettings):
    """
    Global Base settings for the status service
    """
    # App Configuration
    APP_ENV: str = "development"
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8080

    # Logging
    LOG_LEVEL: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    class Config:
        env_file = ".env"

settings = Settings()
