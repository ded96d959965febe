"""
Error types for the command dispatcher.

Built-in commands return these as the second element of their
``(exit_code, error)`` result instead of raising them.
"""

from typing import Optional


class DispatchError(Exception):
    """Base for errors produced by the dispatcher and its built-ins."""

    exit_code = 1


class MissingParametersError(DispatchError):
    exit_code = 1

    def __init__(self):
        super().__init__("Missing parameters, type -h for help")


class UnsupportedCommandError(DispatchError):
    exit_code = 2

    def __init__(self, name: Optional[str]):
        super().__init__(
            f"Unsupported command or help target('{name}'), type -h for help"
        )
        self.name = name


class ConfigError(DispatchError):
    """Configuration file or command module could not be loaded."""

    def __init__(self, source: str, detail: str):
        super().__init__(f"Failed loading '{source}': {detail}")
        self.source = source
        self.detail = detail
