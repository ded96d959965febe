"""
Logging setup for the command dispatcher.

Logs go to stderr, and optionally to a log file as well. stdout is left to
the commands themselves.
"""

import sys
import logging
from pathlib import Path
from typing import Optional


def setup_logging(verbose: bool = False,
                  log_file: Optional[str] = None,
                  log_format: str = None) -> logging.Logger:
    """
    Setup console logging, plus a file sink when log_file is given.

    Args:
        verbose: If True, set log level to DEBUG. Otherwise WARNING.
        log_file: Optional log file path, appended to.
        log_format: Override log format string.

    Returns:
        The cmd_dispatch package logger
    """
    level = logging.DEBUG if verbose else logging.WARNING

    if log_format is None:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    handlers = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(log_format))
    handlers.append(console_handler)

    if log_file:
        try:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, mode='a')
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(log_format))
            handlers.append(file_handler)
        except OSError as e:
            print(f"Warning: Could not setup file logging at {log_file}: {e}",
                  file=sys.stderr)

    logging.basicConfig(
        level=level,
        format=log_format,
        handlers=handlers
    )

    # basicConfig is a no-op once the root logger has handlers
    root_handlers = logging.getLogger().handlers
    for handler in handlers:
        if handler not in root_handlers:
            handler.close()

    logger = logging.getLogger("cmd_dispatch")
    logger.setLevel(level)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name (typically __name__)."""
    return logging.getLogger(name)
