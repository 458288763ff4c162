"""Logging setup and the on-screen console buffer."""

from __future__ import annotations

import logging
import time
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional

from dangerzone.config import CONSOLE_LINES

SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")


def log_success(logger: logging.Logger, msg: str, *args) -> None:
    logger.log(SUCCESS, msg, *args)


@dataclass(frozen=True)
class ConsoleLine:
    level: str
    text: str


class ConsoleLogHandler(logging.Handler):
    """Keeps the most recent records for the always-visible console panel."""

    def __init__(self, maxlen: int = CONSOLE_LINES, level: int = logging.INFO) -> None:
        super().__init__(level=level)
        self._lines: Deque[ConsoleLine] = deque(maxlen=maxlen)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            stamp = time.strftime("%H:%M:%S", time.localtime(record.created))
            self._lines.append(ConsoleLine(record.levelname, f"[{stamp}] {record.getMessage()}"))
        except Exception:
            self.handleError(record)

    def lines(self) -> List[ConsoleLine]:
        return list(self._lines)

    def clear(self) -> None:
        self._lines.clear()


def setup_logging(level: int = logging.INFO, console: Optional[ConsoleLogHandler] = None) -> ConsoleLogHandler:
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")
    console = console or ConsoleLogHandler()
    logging.getLogger().addHandler(console)
    return console
