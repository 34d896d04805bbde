"""Topology engine: edge generation for synthetic module graphs.

Every algorithm maps ``(num_modules, parameters)`` to a list of directed edges
``(from_index, to_index)`` with ``from_index < to_index``, meaning that module
``to_index`` depends on module ``from_index``. Edges are produced in ascending
``to_index`` order, then ascending ``from_index`` within a target.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable, NamedTuple

from loguru import logger

from errors import ConfigurationError
from graph.random_source import coin_flip, random_for, seed_from
from utils import parse_int

if TYPE_CHECKING:
    from collections.abc import Mapping

WIDTH_PARAMETER = "width"


class DependencyEdge(NamedTuple):
    """Module ``to_index`` depends on module ``from_index``."""

    from_index: int
    to_index: int


class TopologyKind(str, Enum):
    """Supported edge-generation algorithms."""

    FULL = "full"
    RANDOM = "random"
    RANDOM_CONNECTED = "random_connected"
    LINEAR = "linear"
    STAR = "star"
    BINARY_TREE = "binary_tree"
    RECTANGLE = "rectangle"
    RANDOM_RECTANGLE = "random_rectangle"
    RANDOM_CONNECTED_RECTANGLE = "random_connected_rectangle"

    @classmethod
    def _missing_(cls, value: object) -> TopologyKind | None:
        if isinstance(value, str):
            normalized = value.strip().lower().replace("-", "_")
            for member in cls:
                if member.value == normalized:
                    return member
        return None

    @property
    def is_random(self) -> bool:
        return self in _RANDOM_KINDS

    @property
    def needs_width(self) -> bool:
        return self in _RECTANGLE_KINDS


_RANDOM_KINDS = frozenset(
    {
        TopologyKind.RANDOM,
        TopologyKind.RANDOM_CONNECTED,
        TopologyKind.RANDOM_RECTANGLE,
        TopologyKind.RANDOM_CONNECTED_RECTANGLE,
    }
)

_RECTANGLE_KINDS = frozenset(
    {
        TopologyKind.RECTANGLE,
        TopologyKind.RANDOM_RECTANGLE,
        TopologyKind.RANDOM_CONNECTED_RECTANGLE,
    }
)


def width_from(parameters: Mapping[str, str]) -> int:
    """Return the positive row width required by rectangle topologies.

    Raises:
        ConfigurationError: If ``width`` is missing, not an integer, or not
            greater than zero.
    """
    raw = parameters.get(WIDTH_PARAMETER)
    if raw is None:
        msg = f"No width was specified for {dict(parameters)}"
        raise ConfigurationError(msg)
    width = parse_int(raw, name=WIDTH_PARAMETER)
    if width <= 0:
        msg = f"width must be greater than 0 but {width} was given"
        raise ConfigurationError(msg)
    return width


def validate_parameters(kind: TopologyKind, parameters: Mapping[str, str]) -> None:
    """Check the parameters ``kind`` will read, without generating anything."""
    if kind.is_random:
        seed_from(parameters)
    if kind.needs_width:
        width_from(parameters)


def _full(num_modules: int, parameters: Mapping[str, str]) -> list[DependencyEdge]:
    return [
        DependencyEdge(from_index, to_index)
        for to_index in range(1, num_modules)
        for from_index in range(to_index)
    ]


def _random(num_modules: int, parameters: Mapping[str, str]) -> list[DependencyEdge]:
    rng = random_for(parameters)
    edges: list[DependencyEdge] = []
    # One flip per pair, drawn in row-major (from, to) order.
    for from_index in range(num_modules):
        for to_index in range(from_index + 1, num_modules):
            if coin_flip(rng):
                edges.append(DependencyEdge(from_index, to_index))
    edges.sort(key=lambda edge: (edge.to_index, edge.from_index))
    return edges


def _random_connected(
    num_modules: int, parameters: Mapping[str, str]
) -> list[DependencyEdge]:
    rng = random_for(parameters)
    edges: list[DependencyEdge] = []
    to_index = 1
    while to_index < num_modules:
        added = 0
        for from_index in range(to_index):
            if coin_flip(rng):
                edges.append(DependencyEdge(from_index, to_index))
                added += 1
        if added:
            to_index += 1
    return edges


def _linear(num_modules: int, parameters: Mapping[str, str]) -> list[DependencyEdge]:
    return [DependencyEdge(index - 1, index) for index in range(1, num_modules)]


def _star(num_modules: int, parameters: Mapping[str, str]) -> list[DependencyEdge]:
    return [DependencyEdge(0, index) for index in range(1, num_modules)]


def binary_tree_parent(index: int) -> int:
    """Return the parent of ``index`` in a heap-ordered binary tree."""
    return (index + 1) // 2 - 1


def _binary_tree(
    num_modules: int, parameters: Mapping[str, str]
) -> list[DependencyEdge]:
    return [
        DependencyEdge(binary_tree_parent(index), index)
        for index in range(1, num_modules)
    ]


def _row_base(to_index: int, width: int) -> int:
    """Index of the first module in the row above ``to_index``."""
    return (to_index // width - 1) * width


def _rectangle(
    num_modules: int, parameters: Mapping[str, str]
) -> list[DependencyEdge]:
    width = width_from(parameters)
    edges: list[DependencyEdge] = []
    for to_index in range(width, num_modules):
        base = _row_base(to_index, width)
        for offset in range(width):
            edges.append(DependencyEdge(base + offset, to_index))
    return edges


def _random_rectangle(
    num_modules: int, parameters: Mapping[str, str]
) -> list[DependencyEdge]:
    width = width_from(parameters)
    rng = random_for(parameters)
    edges: list[DependencyEdge] = []
    for to_index in range(width, num_modules):
        base = _row_base(to_index, width)
        for offset in range(width):
            if coin_flip(rng):
                edges.append(DependencyEdge(base + offset, to_index))
    return edges


def _random_connected_rectangle(
    num_modules: int, parameters: Mapping[str, str]
) -> list[DependencyEdge]:
    width = width_from(parameters)
    rng = random_for(parameters)
    edges: list[DependencyEdge] = []
    to_index = width
    while to_index < num_modules:
        base = _row_base(to_index, width)
        added = 0
        for offset in range(width):
            if coin_flip(rng):
                edges.append(DependencyEdge(base + offset, to_index))
                added += 1
        if added:
            to_index += 1
    return edges


_GENERATORS: dict[
    TopologyKind, Callable[[int, Mapping[str, str]], list[DependencyEdge]]
] = {
    TopologyKind.FULL: _full,
    TopologyKind.RANDOM: _random,
    TopologyKind.RANDOM_CONNECTED: _random_connected,
    TopologyKind.LINEAR: _linear,
    TopologyKind.STAR: _star,
    TopologyKind.BINARY_TREE: _binary_tree,
    TopologyKind.RECTANGLE: _rectangle,
    TopologyKind.RANDOM_RECTANGLE: _random_rectangle,
    TopologyKind.RANDOM_CONNECTED_RECTANGLE: _random_connected_rectangle,
}


def generate(
    kind: TopologyKind | str,
    parameters: Mapping[str, str] | None,
    num_modules: int,
) -> list[DependencyEdge]:
    """Generate the edges of one topology pass.

    Args:
        kind: Algorithm to run; strings are matched case-insensitively.
        parameters: Algorithm parameters such as ``seed`` and ``width``.
        num_modules: Number of modules in the project.

    Returns:
        Edges in generation order. Randomized kinds return the same list for
        the same ``seed``.

    Raises:
        ConfigurationError: If ``kind`` is unknown or a parameter it needs is
            missing or malformed.
    """
    try:
        topology = TopologyKind(kind)
    except ValueError as exc:
        msg = f"Unknown topology type {kind!r}"
        raise ConfigurationError(msg) from exc

    edges = _GENERATORS[topology](num_modules, parameters or {})
    logger.debug(
        "topology {} generated {} edges for {} modules",
        topology.value,
        len(edges),
        num_modules,
    )
    return edges


__all__ = [
    "DependencyEdge",
    "TopologyKind",
    "binary_tree_parent",
    "generate",
    "validate_parameters",
    "width_from",
]
