"""Configuration commands for bugboard CLI."""

import os

from cyclopts import App

from bugboard.config import ENV_KEYS, get_config

config_app = App(name="config", help="Manage configuration")

# Settings whose values are credentials and never printed
SECRET_SUFFIXES = (".key", ".token")
MASK = "****"


def _scope(global_: bool) -> str:
    return "global" if global_ else "local"


def _display(key: str, value: object) -> str:
    """Format a setting for output, hiding credential values."""
    if key.endswith(SECRET_SUFFIXES):
        return f"{key} = {MASK}"
    return f"{key} = {value}"


@config_app.command
def set(key: str, value: str, global_: bool = False) -> None:
    """Set a configuration setting.

    Args:
        key: Configuration key, e.g. supabase.url
        value: Configuration value
        global_: If True, set in global config. If False, set in local config.
    """
    config = get_config(use_global=global_)
    config.set(key, value)
    print(f"Set {_display(key, value)} ({_scope(global_)})")


@config_app.command
def unset(key: str, global_: bool = False) -> None:
    """Unset a configuration setting.

    Args:
        key: Configuration key
        global_: If True, unset from global config. If False, unset from local config.
    """
    config = get_config(use_global=global_)
    config.unset(key)
    print(f"Unset {key} ({_scope(global_)})")


@config_app.command
def get(key: str, global_: bool = False) -> None:
    """Get the effective value of a configuration setting.

    Args:
        key: Configuration key
        global_: If True, ignore local config.
    """
    config = get_config(use_global=global_)
    value = config.get(key)
    if value is None:
        print(f"{key} is not set")
    else:
        print(_display(key, value))


@config_app.command(name="list")
def list_config(global_: bool = False) -> None:
    """List configuration settings from config files and the environment.

    Credential values (keys ending in .key or .token) are masked.

    Args:
        global_: If True, list global config only. If False, list merged config.
    """
    config = get_config(use_global=global_)
    settings = config.list()
    overrides = [key for key, env_name in ENV_KEYS.items() if os.environ.get(env_name)]

    if not settings and not overrides:
        print(f"No {_scope(global_)} configuration settings")
        return

    if settings:
        print(f"{'Global' if global_ else 'Configuration'} settings:\n")
        for key, value in settings.items():
            print(_display(key, value))

    if overrides:
        if settings:
            print()
        print("Environment overrides:\n")
        for key in overrides:
            print(f"{_display(key, os.environ[ENV_KEYS[key]])} (from {ENV_KEYS[key]})")
