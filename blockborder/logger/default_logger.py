"""Logger backed by the standard library ``logging`` module."""

import logging
from typing import Optional

from .interface import Logger


class DefaultLogger(Logger):
    """Forwards messages to a named ``logging.Logger``.

    Keyword arguments are attached as structured context: they are appended
    to the message and passed through ``extra`` for handlers that use them.
    """

    def __init__(self, name: str = "blockborder", level: Optional[int] = None):
        self._logger = logging.getLogger(name)
        if level is not None:
            self._logger.setLevel(level)

    @property
    def name(self) -> str:
        return self._logger.name

    def _log(self, level: int, message: str, **kwargs) -> None:
        if kwargs:
            context = " ".join(f"{key}={value}" for key, value in kwargs.items())
            message = f"{message} {context}"
        self._logger.log(level, message, extra={"context": kwargs})

    def debug(self, message: str, **kwargs) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs) -> None:
        self._log(logging.CRITICAL, message, **kwargs)
