"""
Configuration management for the SDK.
"""

import logging
from typing import Optional

from pydantic import ConfigDict
from pydantic_settings import BaseSettings

from .models import DEFAULT_HOSTNAME, DEFAULT_TIMEOUT_MS


class Settings(BaseSettings):
    model_config = ConfigDict(env_file=".env", env_prefix="PREPR_", extra="ignore")

    access_token: Optional[str] = None
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    user_id: Optional[str] = None
    hostname: str = DEFAULT_HOSTNAME
    log_level: str = "WARNING"
    debug: bool = False


def get_settings() -> Settings:
    return Settings()


def setup_logging(level: str = "WARNING", debug: bool = False) -> None:
    """Configure logging for the SDK."""
    resolved = logging.DEBUG if debug else getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger("prepr")
    logger.setLevel(resolved)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(f"prepr.{name}")
