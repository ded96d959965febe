"""
Routes an argument vector to the command named at index 2.

Index 0 is the program, index 1 the program path or sub-tool, and the
command name sits at index 2. The whole vector is passed to the command.
"""

import logging
from typing import Optional, Sequence

from cmd_dispatch.commands.base import CommandRegistry, CommandResult, get_registry

logger = logging.getLogger(__name__)

COMMAND_INDEX = 2


def dispatch(args: Sequence[str], registry: Optional[CommandRegistry] = None) -> CommandResult:
    """
    Run the command selected by args[COMMAND_INDEX].

    Args:
        args: Full argument vector
        registry: Registry to resolve names against (default: global registry)

    Returns:
        (exit_code, error) exactly as produced by the selected command
    """
    if registry is None:
        registry = get_registry()

    if len(args) <= COMMAND_INDEX:
        logger.debug("No command name given")
        return registry.missing_parameters_command.execute(args)

    name = args[COMMAND_INDEX]
    if name in registry.help_command.names():
        logger.debug(f"Dispatching to help: {name}")
        return registry.help_command.execute(args)

    command = registry.get(name)
    if command is None:
        logger.debug(f"Unsupported command: {name}")
        return registry.unsupported_command.execute(args)

    logger.debug(f"Dispatching command: {name}")
    return command.execute(args)
