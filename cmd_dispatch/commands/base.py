"""
Command contract and registry for the dispatcher.

Commands are registered either by passing an object to
``CommandRegistry.register`` or with the @register_command decorator.
"""

import inspect
import logging
from dataclasses import dataclass
from typing import (
    Callable, Dict, Iterator, List, Optional, Protocol, Sequence, Tuple,
    runtime_checkable,
)

logger = logging.getLogger(__name__)

CommandResult = Tuple[int, Optional[Exception]]


@runtime_checkable
class Command(Protocol):
    """
    Anything that can be registered and dispatched.

    names() returns the primary name first, then aliases.
    help() returns a one-line abstract first, then detail lines.
    execute() receives the full argument vector.
    """

    def names(self) -> Sequence[str]: ...

    def help(self) -> Sequence[str]: ...

    def execute(self, args: Sequence[str]) -> CommandResult: ...


@dataclass(frozen=True)
class SimpleCommand:
    """Command assembled from a handler function and static text."""

    command_names: Tuple[str, ...]
    help_lines: Tuple[str, ...]
    handler: Callable[[Sequence[str]], CommandResult]

    def names(self) -> Sequence[str]:
        return list(self.command_names)

    def help(self) -> Sequence[str]:
        return list(self.help_lines)

    def execute(self, args: Sequence[str]) -> CommandResult:
        return self.handler(args)


class CommandRegistry:
    """
    Registry for dispatchable commands.

    Keeps commands in registration order for listing, plus an index from
    every declared name (primary and aliases) to the command object. The
    three built-in commands live on the registry itself and are rebuilt by
    clear().
    """

    def __init__(self):
        self.clear()

    def clear(self) -> None:
        """
        Drop every registered command and rebuild the built-ins.

        Commands or built-ins fetched before the call must not be reused.
        """
        # Deferred: builtin imports this module.
        from cmd_dispatch.commands.builtin import (
            HelpCommand, MissingParametersCommand, UnsupportedCommand,
        )

        self._commands: List[Command] = []
        self._index: Dict[str, Command] = {}
        self.help_command: Command = HelpCommand(self)
        self.unsupported_command: Command = UnsupportedCommand()
        self.missing_parameters_command: Command = MissingParametersCommand()
        logger.debug("Command registry cleared")

    def register(self, command: Command) -> None:
        """
        Register a command under every name it declares.

        A command declaring no names is ignored. A name that is already
        taken is silently pointed at the new command; the older command
        stays in the listing.

        Args:
            command: Object implementing the Command protocol
        """
        names = list(command.names())
        if not names:
            logger.debug(f"Ignoring command without names: {command!r}")
            return

        self._commands.append(command)
        for name in names:
            self._index[name] = command
        logger.debug(f"Registered command: {', '.join(names)}")

    def get(self, name: str) -> Optional[Command]:
        """Get a command by primary name or alias."""
        return self._index.get(name)

    def list_commands(self) -> List[Command]:
        """List registered commands in registration order."""
        return list(self._commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, name: object) -> bool:
        return name in self._index


# Global registry instance
_registry = CommandRegistry()


def get_registry() -> CommandRegistry:
    """Get the global command registry."""
    return _registry


def reset_registry() -> None:
    """Clear the global command registry."""
    _registry.clear()


def register(command: Command) -> None:
    """Register a command with the global registry."""
    _registry.register(command)


def _help_from_docstring(fn: Callable) -> Tuple[str, ...]:
    doc = inspect.getdoc(fn) or ""
    lines = tuple(line.rstrip() for line in doc.splitlines() if line.strip())
    return lines or ("",)


def register_command(func: Callable = None, *,
                     names: Sequence[str] = None,
                     help_lines: Sequence[str] = None,
                     registry: CommandRegistry = None) -> Callable:
    """
    Decorator to register a handler function as a command.

    Usage:
        @register_command
        def greet(args):
            '''Greets you
            Usage: greet <name>
            '''
            print(f"Hello {args[3]}")
            return 0, None

        @register_command(names=["check", "--check", "-c"])
        def check(args):
            ...

    Names default to the function name with underscores turned into dashes.
    Help lines default to the non-empty docstring lines: the first one is the
    abstract, the rest are detail lines. The function is returned unchanged.
    """
    def decorator(fn: Callable) -> Callable:
        cmd_names = tuple(names) if names is not None else (fn.__name__.replace("_", "-"),)
        cmd_help = tuple(help_lines) if help_lines is not None else _help_from_docstring(fn)
        target = registry if registry is not None else _registry
        target.register(SimpleCommand(cmd_names, cmd_help, fn))
        return fn

    if func is not None:
        # Called without parentheses: @register_command
        return decorator(func)
    else:
        # Called with parentheses: @register_command(names=[...])
        return decorator
