"""Configuration loading from environment variables."""

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

__all__ = ["Settings", "load_settings"]

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s"
DEFAULT_DATE_FORMAT = "%d/%m/%y %H:%M:%S"


class Settings(BaseModel):
    """Logging configuration for the host application.

    Attributes:
        log_level: Level of the root logger.
        app_log_level: Level of the application ("src") loggers.
        log_format: Format string of the console handler.
        date_format: Date format of the console handler.
        suppress_host_logging_init: Skip configure_logs() entirely.
    """

    log_level: str = Field(default="INFO", description="Root logger level.")
    app_log_level: str = Field(default="DEBUG", description="Application logger level.")
    log_format: str = Field(default=DEFAULT_LOG_FORMAT, description="Console log format.")
    date_format: str = Field(default=DEFAULT_DATE_FORMAT, description="Console date format.")
    suppress_host_logging_init: bool = Field(
        default=False,
        description=(
            "If set, the host logging auto-configuration is disabled "
            "and logging is left to the embedding application."
        ),
    )

    @field_validator("log_level", "app_log_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate that level is one of the logging module's level names.

        Args:
            v: Level name, any case.

        Returns:
            The upper-cased level name.

        Raises:
            ValueError: If level is unknown.
        """
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level


def load_settings() -> Settings:
    """Load and validate settings from the environment.

    Optional environment variables:
    - LOG_LEVEL: Root logger level (default INFO).
    - APP_LOG_LEVEL: Application logger level (default DEBUG).
    - LOG_FORMAT: Console log format.
    - LOG_DATE_FORMAT: Console date format.
    - SUPPRESS_HOST_LOGGING_INIT: Boolean, disables configure_logs().

    Returns:
        Validated Settings object.

    Raises:
        RuntimeError: If an environment variable is invalid.
    """
    values: dict[str, str] = {}
    for env_name, field_name in (
        ("LOG_LEVEL", "log_level"),
        ("APP_LOG_LEVEL", "app_log_level"),
        ("LOG_FORMAT", "log_format"),
        ("LOG_DATE_FORMAT", "date_format"),
        ("SUPPRESS_HOST_LOGGING_INIT", "suppress_host_logging_init"),
    ):
        raw = os.getenv(env_name)
        # Empty values count as unset
        if raw is not None and raw.strip():
            values[field_name] = raw

    try:
        settings = Settings(**values)
    except ValidationError as e:
        raise RuntimeError(f"Invalid logging configuration: {e}") from e

    logger.debug(
        f"Logging configured: level={settings.log_level}, "
        f"app_level={settings.app_log_level}, "
        f"suppress_host_init={settings.suppress_host_logging_init}"
    )

    return settings
