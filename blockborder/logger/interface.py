"""Abstract logger interface.

Components take a ``Logger`` by injection so callers can route messages into
their own logging setup.
"""

from abc import ABC, abstractmethod


class Logger(ABC):
    """Minimal logging interface used across blockborder."""

    @abstractmethod
    def debug(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def critical(self, message: str, **kwargs) -> None:
        pass
