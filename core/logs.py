from __future__ import annotations

import logging
import sys
from pathlib import Path

from core.config import LOG_FILE, LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: str | None = None, log_file: str | None = None) -> None:
    # stdout belongs to the stdio transport, so console logs go to stderr.
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    path = log_file if log_file is not None else LOG_FILE
    if path:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
