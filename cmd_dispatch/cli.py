"""Process entry point: dispatch sys.argv and exit with the command's code."""

import sys
from typing import Optional, Sequence

from cmd_dispatch.commands.base import CommandRegistry, get_registry
from cmd_dispatch.config import import_command_modules, load_config_from_env
from cmd_dispatch.dispatcher import dispatch
from cmd_dispatch.errors import ConfigError
from cmd_dispatch.utils.logging import setup_logging, get_logger


def main(argv: Optional[Sequence[str]] = None,
         registry: Optional[CommandRegistry] = None) -> int:
    """
    Dispatch an argument vector and report any returned error.

    Args:
        argv: Full argument vector. Defaults to the interpreter followed by
            sys.argv, so ``python -m cmd_dispatch greet`` puts "greet" at
            index 2.
        registry: Registry to dispatch against (default: global registry)

    Returns:
        Exit code
    """
    if argv is None:
        argv = [sys.executable] + sys.argv

    try:
        config = load_config_from_env()
        setup_logging(verbose=config.verbose, log_file=config.log_file)
        if config.command_modules and registry is not None and registry is not get_registry():
            # @register_command targets the global registry only
            raise ConfigError(
                "commands",
                "configured command modules require the global registry",
            )
        import_command_modules(config.command_modules)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    logger = get_logger(__name__)
    code, error = dispatch(argv, registry)
    if error is not None:
        print(f"error: {error}", file=sys.stderr)
    logger.debug(f"Exit code: {code}")
    return code


def run() -> None:
    sys.exit(main())
