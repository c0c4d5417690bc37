"""Logging setup for the flappy_dragon package."""

from __future__ import annotations

import logging
import sys
from datetime import datetime


class HumanFormatter(logging.Formatter):
    """Compact one-line format for terminal display."""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.now().strftime("%H:%M:%S")
        name = record.name.replace("flappy_dragon.", "")
        return f"{ts} [{record.levelname[0]}] {name}: {record.getMessage()}"


def setup_logging(level: str = "info") -> None:
    """Configure the flappy_dragon root logger."""
    root = logging.getLogger("flappy_dragon")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(HumanFormatter())
    root.addHandler(console)
