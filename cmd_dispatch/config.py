"""
YAML configuration for the dispatcher entry point.

Example:

    logging:
      verbose: false
      file: /tmp/cmd_dispatch.log
    commands:
      - mypkg.commands

Modules listed under ``commands`` are imported so that their
@register_command decorators run before dispatch.
"""

import os
import importlib
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

import yaml

from cmd_dispatch.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV = "CMD_DISPATCH_CONFIG"
VERBOSE_ENV = "CMD_DISPATCH_VERBOSE"


@dataclass
class DispatchConfig:
    verbose: bool = False
    log_file: Optional[str] = None
    command_modules: List[str] = field(default_factory=list)


def load_config(path: Optional[str]) -> DispatchConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: Config file path. None or empty means defaults.

    Returns:
        Parsed configuration

    Raises:
        ConfigError: File missing, not valid YAML, or sections of the wrong type
    """
    if not path:
        return DispatchConfig()

    config_file = Path(path)
    if not config_file.exists():
        raise ConfigError(path, "file not found")

    try:
        with open(config_file, 'r') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(path, f"invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(path, "top level must be a mapping")

    logging_config = data.get('logging') or {}
    if not isinstance(logging_config, dict):
        raise ConfigError(path, "'logging' must be a mapping")

    modules = data.get('commands') or []
    if not isinstance(modules, list) or not all(isinstance(m, str) for m in modules):
        raise ConfigError(path, "'commands' must be a list of module names")

    verbose = logging_config.get('verbose', False)
    if not isinstance(verbose, bool):
        raise ConfigError(path, "'logging.verbose' must be true or false")

    log_file = logging_config.get('file')
    return DispatchConfig(
        verbose=verbose,
        log_file=str(log_file) if log_file else None,
        command_modules=modules,
    )


def load_config_from_env() -> DispatchConfig:
    """Load the config named by $CMD_DISPATCH_CONFIG, honouring $CMD_DISPATCH_VERBOSE."""
    config = load_config(os.environ.get(CONFIG_ENV))
    if os.environ.get(VERBOSE_ENV, "").lower() in ("1", "true", "yes", "on"):
        config.verbose = True
    return config


def import_command_modules(names: Sequence[str]) -> None:
    """
    Import modules so their command registrations run.

    Raises:
        ConfigError: A module could not be imported
    """
    for name in names:
        try:
            importlib.import_module(name)
        except Exception as e:
            raise ConfigError(
                name, f"cannot import command module: {type(e).__name__}: {e}"
            ) from e
        logger.debug(f"Loaded command module: {name}")
