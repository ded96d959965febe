"""
Command Dispatch - a name-based command registry and dispatcher for CLIs.

Commands register under a primary name plus aliases; dispatch() picks the
command named at argv[2] and returns its (exit_code, error) pair. Help,
Unsupported and MissingParameters are always available.
"""

from cmd_dispatch.commands import (
    Command,
    CommandRegistry,
    SimpleCommand,
    get_registry,
    register,
    register_command,
    reset_registry,
)
from cmd_dispatch.dispatcher import dispatch
from cmd_dispatch.errors import (
    ConfigError,
    DispatchError,
    MissingParametersError,
    UnsupportedCommandError,
)

__version__ = "1.0.0"
__all__ = [
    "Command",
    "CommandRegistry",
    "SimpleCommand",
    "get_registry",
    "register",
    "register_command",
    "reset_registry",
    "dispatch",
    "ConfigError",
    "DispatchError",
    "MissingParametersError",
    "UnsupportedCommandError",
]
