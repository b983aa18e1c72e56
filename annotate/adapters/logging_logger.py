from __future__ import annotations
import logging
from typing import Callable, Optional

from annotate.ports.logger import Logger

LOGGER_NAME = "annotate"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a stream handler to the package logger once."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


class LoggingLogger(Logger):
    def __init__(self, name: str = LOGGER_NAME, sink: Optional[Callable[[str], None]] = None):
        self._logger = logging.getLogger(name)
        self._sink = sink  # optional extra consumer, e.g. a UI log pane

    def log(self, message: str) -> None:
        if self._sink:
            self._sink(message)
        self._logger.info(message)

    def warning(self, message: str) -> None:
        if self._sink:
            self._sink(message)
        self._logger.warning(message)
