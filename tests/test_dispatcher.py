import pytest

from cmd_dispatch import dispatch
from cmd_dispatch.errors import MissingParametersError, UnsupportedCommandError

from conftest import make_command


@pytest.mark.parametrize("args", [[], ["prog"], ["prog", "sub"]])
def test_missing_parameters(registry, greet, args):
    registry.register(greet)
    code, error = dispatch(args, registry)

    assert code == 1
    assert isinstance(error, MissingParametersError)
    assert str(error) == "Missing parameters, type -h for help"


@pytest.mark.parametrize("name", ["help", "-h", "--help"])
def test_help_names_route_to_help(registry, capsys, name):
    calls = []
    registry.register(make_command([name], ["Shadow"], code=9, calls=calls))

    code, error = dispatch(["prog", "sub", name], registry)

    assert (code, error) == (0, None)
    assert calls == []
    assert capsys.readouterr().err == f"{name}\tShadow\n"


def test_registered_command_receives_full_vector(registry):
    calls = []
    registry.register(make_command(["greet"], calls=calls))

    dispatch(["prog", "sub", "greet", "world"], registry)

    assert calls == [["prog", "sub", "greet", "world"]]


def test_aliases_dispatch_identically(registry):
    calls = []
    registry.register(make_command(["foo", "bar"], code=5, calls=calls))

    assert dispatch(["p", "s", "foo", "x"], registry) == (5, None)
    assert dispatch(["p", "s", "bar", "x"], registry) == (5, None)
    assert calls == [["p", "s", "foo", "x"], ["p", "s", "bar", "x"]]


def test_command_result_passed_through(registry):
    failure = RuntimeError("disk full")
    registry.register(make_command(["save"], code=42, error=failure))

    code, error = dispatch(["p", "s", "save"], registry)

    assert code == 42
    assert error is failure


def test_command_exception_propagates(registry):
    def boom(args):
        raise ValueError("bad input")

    from cmd_dispatch.commands import SimpleCommand
    registry.register(SimpleCommand(("boom",), ("",), boom))

    with pytest.raises(ValueError, match="bad input"):
        dispatch(["p", "s", "boom"], registry)


def test_unsupported_command(registry, greet):
    registry.register(greet)
    code, error = dispatch(["prog", "sub", "zzz"], registry)

    assert code == 2
    assert isinstance(error, UnsupportedCommandError)
    assert error.name == "zzz"
    assert str(error) == "Unsupported command or help target('zzz'), type -h for help"


def test_cleared_registry_no_longer_dispatches(registry, greet):
    registry.register(greet)
    registry.clear()

    code, error = dispatch(["prog", "sub", "greet"], registry)
    assert code == 2
    assert "greet" in str(error)


def test_defaults_to_global_registry(clean_global_registry):
    from cmd_dispatch import register
    register(make_command(["ping"], code=7))

    assert dispatch(["p", "s", "ping"]) == (7, None)
