"""Environment-driven configuration helpers.

Purpose
-------
Let operators preconfigure message toggles through environment variables and,
optionally, a ``.env`` file discovered with python-dotenv.

Contents
--------
* :data:`DOTENV_ENV_VAR` - toggle enabling ``.env`` loading for the CLI.
* :func:`should_use_dotenv` / :func:`enable_dotenv` - ``.env`` handling.
* :func:`messages_from_env` - read ``LOGUX_STATUS_*`` toggles.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

from .domain import LogMessages

DOTENV_ENV_VAR = "LOGUX_STATUS_USE_DOTENV"
ENV_PREFIX = "LOGUX_STATUS_"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

_LOADED_DOTENV: Path | None = None


def _parse_bool(value: str | None, default: bool) -> bool:
    """Interpret ``1/true/yes/on`` style strings.

    Examples
    --------
    >>> _parse_bool("On", default=False)
    True
    >>> _parse_bool(None, default=True)
    True
    >>> _parse_bool("0", default=True)
    False
    """
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def should_use_dotenv(*, explicit: bool | None, env_value: str | None) -> bool:
    """Return whether ``.env`` should be loaded; an explicit CLI flag wins."""

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    normalised = env_value.strip().lower()
    if normalised in _FALSY:
        return False
    return normalised in _TRUTHY


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` above the working directory.

    Existing environment variables keep precedence. Returns the resolved path
    of the loaded file, or ``None`` when no file was found. Repeated calls
    return the first loaded path without reading the file again.
    """

    global _LOADED_DOTENV
    if _LOADED_DOTENV is not None:
        return _LOADED_DOTENV
    found = find_dotenv(usecwd=True)
    if not found:
        return None
    path = Path(found).resolve()
    load_dotenv(path, override=False)
    _LOADED_DOTENV = path
    return path


def _reset_dotenv_state_for_testing() -> None:
    global _LOADED_DOTENV
    _LOADED_DOTENV = None


def messages_from_env(
    base: LogMessages | None = None,
    environ: Mapping[str, str] | None = None,
) -> LogMessages:
    """Return ``base`` with ``LOGUX_STATUS_<TOGGLE>`` overrides applied.

    Examples
    --------
    >>> messages_from_env(environ={"LOGUX_STATUS_ADD": "0"}).add
    False
    >>> messages_from_env(environ={}).add
    True
    """

    env = os.environ if environ is None else environ
    current = base if base is not None else LogMessages()
    overrides = {
        key: _parse_bool(env.get(f"{ENV_PREFIX}{key.upper()}"), default)
        for key, default in current.to_dict().items()
    }
    return LogMessages(**overrides)


__all__ = [
    "DOTENV_ENV_VAR",
    "ENV_PREFIX",
    "enable_dotenv",
    "messages_from_env",
    "should_use_dotenv",
]
