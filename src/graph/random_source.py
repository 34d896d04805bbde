"""Seeded random sources for randomized topologies."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from utils import parse_int

if TYPE_CHECKING:
    from collections.abc import Mapping

SEED_PARAMETER = "seed"
DEFAULT_SEED = 0


def seed_from(parameters: Mapping[str, str]) -> int:
    """Return the seed named by ``parameters``, or ``DEFAULT_SEED`` when absent.

    Raises:
        ConfigurationError: If a seed is present but is not an integer.
    """
    raw = parameters.get(SEED_PARAMETER)
    if raw is None:
        return DEFAULT_SEED
    return parse_int(raw, name=SEED_PARAMETER)


def random_for(parameters: Mapping[str, str]) -> random.Random:
    """Build an independent, reproducible random source from ``parameters``."""
    return random.Random(seed_from(parameters))


def coin_flip(rng: random.Random) -> bool:
    """Draw one fair coin flip from ``rng``."""
    return rng.getrandbits(1) == 1


__all__ = ["DEFAULT_SEED", "SEED_PARAMETER", "coin_flip", "random_for", "seed_from"]
