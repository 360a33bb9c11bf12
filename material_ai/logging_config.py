"""Logging setup for the material master assistant.

Environment Variables:
    LOG_LEVEL   - root level name (default: INFO); unknown names fall back to INFO
    LOG_FILE    - optional path of an additional log file
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Client libraries that log every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "openai")


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(log_level: Optional[str] = None, log_file: Optional[Path] = None) -> logging.Logger:
    """Configure root logging on stdout, plus a file when one is given or set in LOG_FILE."""
    log_level = log_level or os.getenv("LOG_LEVEL", "INFO")
    if log_file is None and os.getenv("LOG_FILE"):
        log_file = Path(os.environ["LOG_FILE"])

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=_resolve_level(log_level),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return logging.getLogger("material_ai")
