import pytest

from cmd_dispatch.commands import CommandRegistry, SimpleCommand, reset_registry


@pytest.fixture
def registry():
    return CommandRegistry()


@pytest.fixture
def clean_global_registry():
    reset_registry()
    yield
    reset_registry()


def make_command(names, help_lines=("",), code=0, error=None, calls=None):
    """Command that records the argument vectors it was run with."""
    def handler(args):
        if calls is not None:
            calls.append(list(args))
        return code, error
    return SimpleCommand(tuple(names), tuple(help_lines), handler)


@pytest.fixture
def greet():
    return make_command(["greet", "hi"], ["Greets you", "Usage: greet <name>"])
