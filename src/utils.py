"""Shared utilities for module-poet."""

from __future__ import annotations

from errors import ConfigurationError

MODULE_PREFIX = "module"


def module_name(index: int) -> str:
    """Return the canonical name of the module at ``index``.

    Examples:
        >>> module_name(0)
        'module0'
        >>> module_name(12)
        'module12'
    """
    return f"{MODULE_PREFIX}{index}"


def parse_int(value: object, *, name: str) -> int:
    """Parse an integer parameter that may arrive as a string.

    Booleans are rejected even though they are ``int`` subclasses.

    Raises:
        ConfigurationError: If ``value`` is not an integer or integer string.
    """
    if isinstance(value, bool):
        msg = f"{name} must be an integer but {value!r} was given"
        raise ConfigurationError(msg)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as exc:
            msg = f"{name} must be an integer but {value!r} was given"
            raise ConfigurationError(msg) from exc
    msg = f"{name} must be an integer but {value!r} was given"
    raise ConfigurationError(msg)
