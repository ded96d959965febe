"""
Command system for the dispatcher.

Commands are registered with the @register_command decorator or with
CommandRegistry.register; built-ins come from commands.builtin.
"""

from cmd_dispatch.commands.base import (
    Command,
    CommandRegistry,
    CommandResult,
    SimpleCommand,
    get_registry,
    register,
    register_command,
    reset_registry,
)
from cmd_dispatch.commands.builtin import (
    HelpCommand,
    MissingParametersCommand,
    UnsupportedCommand,
)

__all__ = [
    "Command",
    "CommandRegistry",
    "CommandResult",
    "SimpleCommand",
    "get_registry",
    "register",
    "register_command",
    "reset_registry",
    "HelpCommand",
    "MissingParametersCommand",
    "UnsupportedCommand",
]
