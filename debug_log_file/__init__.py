"""Blue Blaze debug log file: send error logging to a configurable location."""

from importlib.metadata import PackageNotFoundError, version

from debug_log_file.diagnostics import configure_logging, log_debug, log_error
from debug_log_file.log_target import ErrorLogSetting, error_log
from debug_log_file.resolver import change_debug_log, install

try:
    __version__ = version("blueblaze-debug-log-file")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "ErrorLogSetting",
    "__version__",
    "change_debug_log",
    "configure_logging",
    "error_log",
    "install",
    "log_debug",
    "log_error",
]
