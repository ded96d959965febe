"""
Built-in commands that are always available.

Help lists or explains registered commands. Unsupported and
MissingParameters only produce errors for the dispatcher to return.
"""

import sys
from typing import TYPE_CHECKING, Optional, Sequence, TextIO

from cmd_dispatch.commands.base import CommandResult
from cmd_dispatch.errors import MissingParametersError, UnsupportedCommandError

if TYPE_CHECKING:
    from cmd_dispatch.commands.base import CommandRegistry

HELP_NAMES = ("help", "-h", "--help")

# Position of the command name, and of the help target after it
NAME_INDEX = 2
HELP_TARGET_INDEX = 3


class HelpCommand:
    """
    Prints command help to the diagnostic stream (stderr by default).

    Without a target, prints one "<name>\\t<abstract>" line per registered
    command. With a target, prints that command's detail lines, or the
    Unsupported command's (empty) details when the target is unknown.
    Always exits 0.
    """

    def __init__(self, registry: "CommandRegistry", stream: Optional[TextIO] = None):
        self._registry = registry
        self._stream = stream

    def names(self) -> Sequence[str]:
        return list(HELP_NAMES)

    def help(self) -> Sequence[str]:
        return [
            "Show this help",
            "help|-h|--help    Show abstracts for all commands.",
            "help <COMMAND>    Show help detail for <COMMAND>.",
            "help help         Show this help.",
        ]

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def execute(self, args: Sequence[str]) -> CommandResult:
        if len(args) <= HELP_TARGET_INDEX:
            self._print_abstracts()
            return 0, None

        target = args[HELP_TARGET_INDEX]
        if target in self.names():
            command = self
        else:
            command = self._registry.get(target)
        if command is None:
            command = self._registry.unsupported_command

        for line in list(command.help())[1:]:
            print(line, file=self.stream)
        return 0, None

    def _print_abstracts(self) -> None:
        for command in self._registry:
            names = command.names()
            if not names or not names[0]:
                continue
            help_lines = command.help()
            abstract = help_lines[0] if help_lines else ""
            print(f"{names[0]}\t{abstract}", file=self.stream)


class UnsupportedCommand:
    """Returned for names that match no registered command."""

    def names(self) -> Sequence[str]:
        return [""]

    def help(self) -> Sequence[str]:
        return [""]

    def execute(self, args: Sequence[str]) -> CommandResult:
        name = args[NAME_INDEX] if len(args) > NAME_INDEX else ""
        error = UnsupportedCommandError(name)
        return error.exit_code, error


class MissingParametersCommand:
    """Returned when no command name was given."""

    def names(self) -> Sequence[str]:
        return [""]

    def help(self) -> Sequence[str]:
        return [""]

    def execute(self, args: Sequence[str]) -> CommandResult:
        error = MissingParametersError()
        return error.exit_code, error
