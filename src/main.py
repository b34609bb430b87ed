"""Application bootstrap."""

import logging

from src.adapters.driven.config.settings import load_settings
from src.adapters.driven.logging.logging_config import configure_logs
from src.adapters.driven.logging.logging_support import suppress_host_logging_initialization

__all__ = ["main"]

logger = logging.getLogger(__name__)


def main() -> int:
    """Bootstrap logging for the host application.

    Startup sequence:
    1. Load and validate configuration.
    2. Suppress the host logging auto-configuration if requested.
    3. Configure logging (no-op when suppressed).

    Returns:
        0 on success, 1 on configuration error.
    """
    try:
        settings = load_settings()
    except (RuntimeError, ValueError) as exc:
        logger.error(
            "Configuration error: %s\n"
            "Hint: check LOG_LEVEL, APP_LOG_LEVEL and SUPPRESS_HOST_LOGGING_INIT.",
            exc,
        )
        return 1

    if settings.suppress_host_logging_init:
        suppress_host_logging_initialization()

    if configure_logs(settings):
        logger.info("Logging configured")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
