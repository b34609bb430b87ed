"""Host logging auto-configuration."""

import logging

from src.adapters.driven.config.settings import Settings
from src.adapters.driven.logging.logging_support import (
    CONSOLE_APPENDER_NAME,
    is_host_logging_initialization_suppressed,
    remove_console_appender,
    require_logback_root_logger,
)

__all__ = ["configure_logs"]

logger = logging.getLogger(__name__)


def configure_logs(settings: Settings | None = None) -> bool:
    """Configure console logging.

    Sets up:
    - A single "console" handler on the root logger (replacing a previous one).
    - Root logger at settings.log_level.
    - Application loggers (src) at settings.app_log_level.
    - Structured format with timestamp, level, module, and line number.

    Does nothing if suppress_host_logging_initialization() has been called.

    Args:
        settings: Logging settings; defaults apply when None.

    Returns:
        True if logging was configured, False if it was suppressed.
    """
    if is_host_logging_initialization_suppressed():
        logger.debug("Host logging initialization suppressed")
        return False

    settings = settings or Settings()

    formatter = logging.Formatter(settings.log_format, settings.date_format)
    handler = logging.StreamHandler()
    handler.set_name(CONSOLE_APPENDER_NAME)
    handler.setFormatter(formatter)

    # Root logger
    root = require_logback_root_logger()
    remove_console_appender(root)
    root.setLevel(settings.log_level)
    root.addHandler(handler)

    # Application loggers
    logging.getLogger("src").setLevel(settings.app_log_level)
    return True
