"""
EuroAlt settings

All settings come from the environment or the .env file.
Usage:
    from euroalt.config import settings
    path = settings.CATALOGUE_PATH
"""

import sys

from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # ignore unrelated .env variables
    )

    # === Environment ===
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # === Catalogue ===
    # Empty: the catalogue bundled with the package
    CATALOGUE_PATH: str = ""

    # === Browse defaults ===
    DEFAULT_LANGUAGE: str = "en"
    DEFAULT_SORT: str = "name"

    # === API ===
    API_PREFIX: str = "/api/v1"
    CORS_ORIGINS: list[str] = ["*"]


def configure_logging(level: str | None = None) -> None:
    """Replaces loguru's default sink with one at the configured level"""
    logger.remove()
    logger.add(sys.stderr, level=(level or settings.LOG_LEVEL).upper())


# Singleton
settings = Settings()
