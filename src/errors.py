"""Error types shared by the generator core."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a generation run cannot proceed with the given configuration.

    Covers malformed or missing topology parameters, invalid code-mass totals
    and edges whose endpoints fall outside ``[0, num_modules)``.
    """


__all__ = ["ConfigurationError"]
