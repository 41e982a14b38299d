"""Centralized logging configuration — stdlib only.

The console handler resolves ``sys.stdout`` / ``sys.stderr`` each time it
emits, so a caller can move log output off stdout with
:func:`set_console_stream` after loggers already exist.
"""
from __future__ import annotations

import logging
import os
import sys
from datetime import datetime
from pathlib import Path

_LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
_DATE_FMT = "%Y-%m-%d %H:%M:%S"
_STREAMS = ("stdout", "stderr")
_configured = False


class ConsoleHandler(logging.StreamHandler):
    """StreamHandler bound to a ``sys`` attribute name instead of a file object."""

    def __init__(self, target: str = "stdout"):
        self.target = target
        super().__init__()

    @property
    def stream(self):
        return getattr(sys, self.target)

    @stream.setter
    def stream(self, value) -> None:
        # Assigned by StreamHandler.__init__; the target decides.
        pass


def get_logger(name: str) -> logging.Logger:
    """Return a named logger; configures root handlers on first call."""
    global _configured
    if not _configured:
        _configure()
        _configured = True
    return logging.getLogger(name)


def set_console_stream(target: str) -> None:
    """Send console log lines to ``"stdout"`` or ``"stderr"``."""
    if target not in _STREAMS:
        raise ValueError(f"Unknown console stream {target!r}; expected one of {_STREAMS}")
    for handler in logging.getLogger().handlers:
        if isinstance(handler, ConsoleHandler):
            handler.target = target


def _configure() -> None:
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)

    if root.handlers:
        return

    target = os.environ.get("HIRELENS_LOG_STREAM", "stdout").lower()
    console = ConsoleHandler(target if target in _STREAMS else "stdout")
    console.setLevel(level)
    console.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FMT))
    root.addHandler(console)

    if os.environ.get("HIRELENS_NO_LOG_FILE"):
        return

    log_dir = Path(os.environ.get("HIRELENS_LOG_DIR", "") or _LOG_DIR)
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"hirelens_{datetime.now().strftime('%Y-%m-%d')}.log"
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FMT))
        root.addHandler(fh)
    except OSError:
        pass
