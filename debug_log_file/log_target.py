"""Process-wide error log destination."""

import logging


class ErrorLogSetting:
    """Where error-log records for a logger end up.

    Setting a path attaches a file handler to the target logger (root by
    default) and swaps out whichever handler this instance attached before.
    Handlers the host installed itself stay attached, so records are written
    to the file in addition to them rather than instead of them. PHP's
    error_log setting replaces the destination outright.
    """

    def __init__(self, logger: logging.Logger | None = None):
        self._logger = logger if logger is not None else logging.getLogger()
        self._handler: logging.FileHandler | None = None
        self.path: str | None = None

    def set(self, path: str) -> None:
        # delay=True: the file is opened on the first record, not here
        handler = logging.FileHandler(path, encoding="utf-8", delay=True)
        self._detach()
        self._logger.addHandler(handler)
        self._handler = handler
        self.path = path

    def reset(self) -> None:
        """Drop the file handler and go back to the host's default destination."""
        self._detach()
        self.path = None

    def _detach(self) -> None:
        if self._handler is None:
            return
        self._logger.removeHandler(self._handler)
        self._handler.close()
        self._handler = None


# Global instance bound to the root logger
error_log = ErrorLogSetting()
