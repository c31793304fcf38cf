"""Diagnostic helpers that tag every message with the plugin name."""

import logging

from debug_log_file.constants import PLUGIN_NAME
from debug_log_file.settings import settings

logger = logging.getLogger("debug_log_file")

# Level for log_debug output; must clear the default root level and logging.lastResort
DEBUG_DIAGNOSTIC_LEVEL = logging.WARNING


def _tag(message: str) -> str:
    return f"{PLUGIN_NAME}: {message}"


def configure_logging(level: str | None = None) -> None:
    """Apply the configured level to the package logger.

    Handlers and formats stay with the host application.

    Args:
        level: Level name; defaults to settings.log_level
    """
    name = (level or settings.log_level).upper()
    logger.setLevel(getattr(logging, name, logging.INFO))


def log_error(message: str) -> bool:
    """Emit an error diagnostic.

    Args:
        message: Text to log, without the plugin prefix

    Returns:
        True on success, False if the record could not be emitted
    """
    try:
        logger.error(_tag(message))
    except Exception:
        return False
    return True


def log_debug(message: str, debug: bool | None = None) -> bool:
    """Emit an informational diagnostic only while debug mode is on.

    Logged at DEBUG_DIAGNOSTIC_LEVEL, which default logging levels let through.

    Args:
        message: Text to log, without the plugin prefix
        debug: Debug mode override; settings.debug is read when omitted

    Returns:
        True on success or when suppressed, False if emitting failed
    """
    enabled = settings.debug if debug is None else debug
    if not enabled:
        return True
    try:
        logger.log(DEBUG_DIAGNOSTIC_LEVEL, _tag(message))
    except Exception:
        return False
    return True
