"""Lookups and mutations against the process-wide logging context.

The logging context is the logging.Manager owning every logger. Appenders are
logging.Handler objects identified by Handler.name.

Lookups that may legitimately find nothing return None; the require_*
variants turn absence into a RuntimeError with a templated message.
"""

import logging
from typing import Any, TypeVar

__all__ = [
    "CONSOLE_APPENDER_NAME",
    "DELEGATE_APPENDER_NAME",
    "HOST_LOGGING_SYSTEM_KEY",
    "ILLEGAL_LOGGER_TYPE_EXCEPTION_MESSAGE",
    "ROOT_LOGGER_NAME",
    "UNRESOLVABLE_APPENDER_EXCEPTION_MESSAGE",
    "get_appender",
    "get_object",
    "is_host_logging_initialization_suppressed",
    "put_object",
    "remove_appender",
    "remove_console_appender",
    "remove_delegate_appender",
    "require_appender",
    "require_logback_root_logger",
    "require_logger_context",
    "resolve_logger_context",
    "resolve_root_logger",
    "suppress_host_logging_initialization",
]

CONSOLE_APPENDER_NAME = "console"
DELEGATE_APPENDER_NAME = "delegate"

ROOT_LOGGER_NAME = "root"

# Marker key checked by the host logging auto-configuration
HOST_LOGGING_SYSTEM_KEY = "src.adapters.driven.logging.logging_config.configure_logs"

ILLEGAL_LOGGER_TYPE_EXCEPTION_MESSAGE = "[%s] Logger type [%s] is not a Logback Logger"
UNRESOLVABLE_APPENDER_EXCEPTION_MESSAGE = (
    "Could not resolve Appender with name [%s] as type [%s] from Logger [%s]"
)

OBJECT_STORE_ATTRIBUTE = "object_store"

HandlerT = TypeVar("HandlerT", bound=logging.Handler)


def suppress_host_logging_initialization() -> None:
    """Disable the host's logging auto-configuration (configure_logs).

    Raises:
        RuntimeError: If no logging context can be resolved.
    """
    put_object(HOST_LOGGING_SYSTEM_KEY, object())


def is_host_logging_initialization_suppressed() -> bool:
    """Return True if the suppression marker is present in the logging context."""
    context = resolve_logger_context()
    return context is not None and HOST_LOGGING_SYSTEM_KEY in _read_object_store(context)


def resolve_logger_context() -> logging.Manager | None:
    """Resolve the logging context.

    Returns:
        The logging.Manager owning the root logger, or None if another
        logging provider replaced it.
    """
    manager = getattr(logging.getLogger(), "manager", None)
    return manager if isinstance(manager, logging.Manager) else None


def require_logger_context() -> logging.Manager:
    """Resolve the logging context or fail.

    Returns:
        The logging context.

    Raises:
        RuntimeError: If the logging context could not be resolved.
    """
    context = resolve_logger_context()
    if context is None:
        raise RuntimeError("LoggerContext is required")
    return context


def put_object(key: str, value: Any) -> None:
    """Store value under key in the logging context's shared object store.

    Raises:
        RuntimeError: If the logging context could not be resolved.
    """
    _object_store(require_logger_context())[key] = value


def get_object(key: str) -> Any | None:
    context = resolve_logger_context()
    return _read_object_store(context).get(key) if context is not None else None


def resolve_root_logger() -> logging.Logger:
    """Resolve the logger registered under the root name."""
    return logging.getLogger(ROOT_LOGGER_NAME)


def require_logback_root_logger() -> logging.Logger:
    """Resolve the root logger and check it is a logging.Logger.

    Returns:
        The root logger.

    Raises:
        RuntimeError: If the root logger is unresolvable or of another type.
    """
    root_logger = resolve_root_logger()
    if not isinstance(root_logger, logging.Logger):
        raise RuntimeError(
            ILLEGAL_LOGGER_TYPE_EXCEPTION_MESSAGE
            % (ROOT_LOGGER_NAME, _null_safe_type_name(root_logger))
        )
    return root_logger


def get_appender(logger: logging.Logger | None, appender_name: str) -> logging.Handler | None:
    """Find the handler named appender_name attached to logger.

    Returns:
        The first matching handler, or None if logger is None or has none.
    """
    if logger is None:
        return None
    return next((h for h in logger.handlers if h.name == appender_name), None)


def require_appender(
    logger: logging.Logger | None,
    appender_name: str,
    appender_type: type[HandlerT] | None,
) -> HandlerT:
    """Resolve the handler named appender_name and check its type.

    Args:
        logger: Logger the handler is attached to.
        appender_name: Name of the handler.
        appender_type: Required handler class; None never matches.

    Returns:
        The handler.

    Raises:
        RuntimeError: If no such handler is attached or it is of another type.
    """
    appender = get_appender(logger, appender_name)
    if appender_type is None or not isinstance(appender, appender_type):
        raise RuntimeError(
            UNRESOLVABLE_APPENDER_EXCEPTION_MESSAGE
            % (
                appender_name,
                _null_safe_type_name_of_type(appender_type),
                logger.name if logger is not None else None,
            )
        )
    return appender


def remove_appender(logger: logging.Logger | None, appender_name: str) -> bool:
    """Close the handler named appender_name and detach it from logger.

    Args:
        logger: Logger to remove the handler from.
        appender_name: Name of the handler to remove.

    Returns:
        True if the handler was attached and has been detached, False otherwise.
    """
    appender = get_appender(logger, appender_name)
    if logger is None or appender is None or appender.name != appender_name:
        return False

    appender.close()
    logger.removeHandler(appender)
    return appender not in logger.handlers


def remove_console_appender(logger: logging.Logger | None) -> bool:
    return remove_appender(logger, CONSOLE_APPENDER_NAME)


def remove_delegate_appender(logger: logging.Logger | None) -> bool:
    return remove_appender(logger, DELEGATE_APPENDER_NAME)


def _object_store(context: logging.Manager) -> dict[str, Any]:
    store = getattr(context, OBJECT_STORE_ATTRIBUTE, None)
    if store is None:
        store = {}
        setattr(context, OBJECT_STORE_ATTRIBUTE, store)
    return store


def _read_object_store(context: logging.Manager) -> dict[str, Any]:
    return getattr(context, OBJECT_STORE_ATTRIBUTE, None) or {}


def _null_safe_type_name_of_type(cls: type | None) -> str | None:
    return f"{cls.__module__}.{cls.__qualname__}" if cls is not None else None


def _null_safe_type_name(obj: object | None) -> str | None:
    return _null_safe_type_name_of_type(type(obj)) if obj is not None else None
