"""Resolve the configured debug log location and point error logging at it."""

import os

from debug_log_file.constants import DEBUG_LOG_FILENAME
from debug_log_file.diagnostics import log_debug, log_error
from debug_log_file.log_target import ErrorLogSetting, error_log
from debug_log_file.settings import Settings, settings


def _is_writable(path: str) -> bool:
    return os.access(path, os.W_OK)


def _read_link(path: str) -> str:
    """Return the target of symlink ``path``, anchored at the link's directory if relative."""
    target = os.readlink(path)
    if not os.path.isabs(target):
        target = os.path.join(os.path.dirname(path), target)
    return target


def change_debug_log(
    debug_log_path: str | None = None,
    *,
    setting: ErrorLogSetting | None = None,
    config: Settings | None = None,
) -> None:
    """Try to redirect error logging to ``debug_log_path``.

    The path may name a directory (``debug.log`` is created inside it), a
    file, a symlink to either, or something that does not exist yet. Any
    failure is logged and leaves the current destination alone; nothing is
    raised to the caller.

    Args:
        debug_log_path: Target location. When empty, BBA_WP__DEBUG_LOG_FILE
            from settings is used instead.
        setting: Destination to update; defaults to the process-wide error_log
        config: Settings to read the fallback from; defaults to the global settings
    """
    setting = setting if setting is not None else error_log
    config = config if config is not None else settings

    if not debug_log_path:
        if not config.debug_log_file:
            log_error(
                "change_debug_log(): A valid value needs to be passed in or define 'BBA_WP__DEBUG_LOG_FILE'."
            )
            return
        debug_log_path = config.debug_log_file

    resolved_path = debug_log_path

    if os.path.islink(resolved_path):
        try:
            resolved_path = _read_link(resolved_path)
        except OSError:
            log_error(f"change_debug_log(): Detected a symlink but failed to resolve the target: {debug_log_path}")
            return
        log_debug(f"change_debug_log(): Detected a symlink and resolved it to a real path: {resolved_path}")

    if os.path.isdir(resolved_path):
        if not _is_writable(resolved_path):
            log_error(f"change_debug_log(): Detected a directory but is not writable: {resolved_path}")
            return
        setting.set(os.path.join(resolved_path, DEBUG_LOG_FILENAME))
        return

    if os.path.isfile(resolved_path):
        if not _is_writable(resolved_path):
            log_error(f"change_debug_log(): Detected a file but is not writable: {resolved_path}")
            return
        setting.set(resolved_path)
        return

    # Neither a directory nor a file: use it as given and hope for the best
    log_debug("change_debug_log(): Could not determine the exact setting to use. Here's hoping for the best!")
    setting.set(resolved_path)


def install() -> None:
    """Apply BBA_WP__DEBUG_LOG_FILE to the process-wide error log.

    Hosts call this once during startup.
    """
    change_debug_log()
