import logging
from typing import Optional

from movie_companion.domain.ports.services.logger import LoggerPort


class StdLoggerAdapter(LoggerPort):
    """LoggerPort backed by the standard logging module.

    An optional component label is prepended to every message so the quiz and
    recommendation engines can share a logger name and still be told apart.
    """

    def __init__(self, name: Optional[str] = None, component: Optional[str] = None):
        self._logger = logging.getLogger(name)
        self._prefix = f"[{component}] " if component else ""

    def _log(self, level: int, msg: str, *args, **kwargs) -> None:
        if self._logger.isEnabledFor(level):
            self._logger.log(level, self._prefix + msg, *args, stacklevel=3, **kwargs)

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self._log(logging.ERROR, msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs) -> None:
        kwargs.setdefault("exc_info", True)
        self._log(logging.ERROR, msg, *args, **kwargs)
