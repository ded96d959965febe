"""Utility components for the command dispatcher."""

from cmd_dispatch.utils.logging import setup_logging, get_logger

__all__ = [
    "setup_logging",
    "get_logger",
]
