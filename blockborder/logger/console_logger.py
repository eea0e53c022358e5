"""Logger that writes formatted records to the console."""

import logging
import sys

from .default_logger import DefaultLogger

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class ConsoleLogger(DefaultLogger):
    """DefaultLogger with a stream handler attached to stderr."""

    def __init__(self, name: str = "blockborder.console", level: int = logging.INFO):
        super().__init__(name=name, level=level)
        # Avoid stacking handlers when the same name is requested twice
        if not any(getattr(h, "_blockborder_console", False) for h in self._logger.handlers):
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            handler._blockborder_console = True  # type: ignore[attr-defined]
            self._logger.addHandler(handler)
        self._logger.propagate = False
