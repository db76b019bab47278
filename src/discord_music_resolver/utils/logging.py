"""Console logging helpers."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, TextIO


class ColoredFormatter(logging.Formatter):
    """Formatter that wraps the level name in an ANSI colour.

    Colour is skipped when ``NO_COLOR`` is set or the target stream is not a
    terminal, so redirected output stays plain.
    """

    LEVEL_COLORS: dict[int, str] = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[1;31m",
    }
    RESET = "\033[0m"

    def __init__(self, *args: Any, stream: TextIO | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._stream = stream

    def use_color(self) -> bool:
        if "NO_COLOR" in os.environ:
            return False
        stream = self._stream or sys.stderr
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_color():
            return super().format(record)
        # Colour a copy; other handlers share the record.
        colored = logging.makeLogRecord(record.__dict__)
        color = self.LEVEL_COLORS.get(record.levelno, "")
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)
