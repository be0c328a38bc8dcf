"""Simple logging wrapper supporting optional file logging."""

from __future__ import annotations

import logging
import os
from pathlib import Path

_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def get_logger(name: str, file_path: str | None = None, level: int | str = logging.INFO) -> logging.Logger:
    """Return configured logger, attaching ``file_path`` handler if provided.

    Configuring the package logger ``"gridline"`` also routes the debug
    records of every ``gridline.*`` module through these handlers.
    """

    logger = logging.getLogger(name)
    formatter = logging.Formatter(_FORMAT)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    if file_path:
        target = os.path.abspath(file_path)
        known = {
            h.baseFilename for h in logger.handlers if isinstance(h, logging.FileHandler)
        }
        if target not in known:
            Path(file_path).parent.mkdir(parents=True, exist_ok=True)
            f_handler = logging.FileHandler(file_path, encoding="utf-8")
            f_handler.setFormatter(formatter)
            logger.addHandler(f_handler)
    logger.setLevel(level)
    return logger
