"""Logging helpers: namespaced loggers plus console and daily rolling file sinks.

setup_logging() is called once by an entrypoint (console host or API startup);
modules only call get_logger().
"""

import logging
import os
from logging.handlers import TimedRotatingFileHandler
from typing import Optional

ROOT_LOGGER_NAME = "first_program"
LOG_FILE_NAME = "first-program.log"

CONSOLE_FORMAT = "[%(asctime)s %(levelname).3s] %(message)s"
CONSOLE_DATEFMT = "%H:%M:%S"
FILE_FORMAT = "[%(asctime)s.%(msecs)03d %(levelname).3s] %(message)s"
FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the application namespace."""
    if name.startswith(ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(level: str = "INFO", log_dir: Optional[str] = "logs", to_file: bool = True) -> logging.Logger:
    """Attach console (and optionally file) handlers to the application logger.

    Repeated calls only update the level.
    """
    global _configured
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if _configured:
        return root

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=CONSOLE_DATEFMT))
    root.addHandler(console)

    if to_file and log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            os.path.join(log_dir, LOG_FILE_NAME),
            when="midnight",
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATEFMT))
        root.addHandler(file_handler)

    _configured = True
    return root
