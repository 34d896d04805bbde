"""Dependency graph model for a generated project."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger
from pydantic import BaseModel, Field

from errors import ConfigurationError
from graph.algos import build_adjacency, compute_fan_stats, find_cycles, has_cycle
from graph.topologies import DependencyEdge
from utils import module_name

if TYPE_CHECKING:
    from collections.abc import Iterable

TOP_MODULES_LIMIT = 10


class GraphSummary(BaseModel):
    """Summary of dependency graph metrics."""

    node_count: int
    edge_count: int
    cycles: list[list[int]] = Field(default_factory=list)
    fan_in: dict[int, int] = Field(default_factory=dict)
    fan_out: dict[int, int] = Field(default_factory=dict)
    top_modules: list[int] = Field(default_factory=list)


class DependencyGraph:
    """All dependency edges of a project, merged once and never mutated.

    Duplicate edges are preserved. The graph is not required to be acyclic;
    cycles are reported, not rejected.
    """

    def __init__(self, num_modules: int, edges: Iterable[tuple[int, int]]) -> None:
        """Index ``edges`` over modules ``0..num_modules-1``.

        Raises:
            ConfigurationError: If ``num_modules`` is not positive or an edge
                endpoint lies outside ``[0, num_modules)``.
        """
        if num_modules <= 0:
            msg = f"numModules must be greater than 0 but {num_modules} was given"
            raise ConfigurationError(msg)

        checked: list[DependencyEdge] = []
        for from_index, to_index in edges:
            for endpoint in (from_index, to_index):
                if not 0 <= endpoint < num_modules:
                    msg = (
                        f"Dependency ({from_index}, {to_index}) references module "
                        f"{endpoint}, valid indices are 0..{num_modules - 1}"
                    )
                    raise ConfigurationError(msg)
            checked.append(DependencyEdge(from_index, to_index))

        self._num_modules = num_modules
        self._edges: tuple[DependencyEdge, ...] = tuple(checked)
        # Adjacency follows from -> to, i.e. dependency -> dependent.
        self._adjacency = build_adjacency(num_modules, self._edges)
        self._incoming: list[list[DependencyEdge]] = [[] for _ in range(num_modules)]
        self._outgoing: list[list[DependencyEdge]] = [[] for _ in range(num_modules)]
        for edge in self._edges:
            self._incoming[edge.to_index].append(edge)
            self._outgoing[edge.from_index].append(edge)

    @classmethod
    def build(
        cls,
        explicit_edges: Iterable[tuple[int, int]],
        generated_edges: Iterable[tuple[int, int]],
        num_modules: int,
    ) -> DependencyGraph:
        """Merge explicit and generated edges, explicit ones first.

        Raises:
            ConfigurationError: If ``num_modules`` is not positive or an edge
                endpoint lies outside ``[0, num_modules)``.
        """
        graph = cls(num_modules, [*explicit_edges, *generated_edges])
        logger.info(
            "dependency graph built: {} modules, {} edges",
            num_modules,
            len(graph),
        )
        return graph

    @property
    def num_modules(self) -> int:
        return self._num_modules

    @property
    def edges(self) -> tuple[DependencyEdge, ...]:
        return self._edges

    def dependencies_of(self, index: int) -> list[DependencyEdge]:
        """Edges whose ``to`` endpoint is ``index``: what ``index`` depends on."""
        return list(self._incoming[index])

    def dependents_of(self, index: int) -> list[DependencyEdge]:
        """Edges whose ``from`` endpoint is ``index``: what depends on ``index``."""
        return list(self._outgoing[index])

    def has_circular_dependencies(self) -> bool:
        return has_cycle(self._adjacency)

    def find_cycles(self) -> list[list[int]]:
        return find_cycles(self._adjacency)

    def describe(self) -> list[str]:
        """One line per module, in index order, naming its direct dependencies."""
        lines: list[str] = []
        for index, incoming in enumerate(self._incoming):
            sources = sorted({edge.from_index for edge in incoming})
            listed = ", ".join(module_name(source) for source in sources)
            lines.append(f"{module_name(index)} -> {listed or '(none)'}")
        return lines

    def summary(self) -> GraphSummary:
        fan_in, fan_out = compute_fan_stats(self._edges)
        top_modules = sorted(fan_in, key=lambda m: (-fan_in[m], m))[:TOP_MODULES_LIMIT]
        return GraphSummary(
            node_count=self._num_modules,
            edge_count=len(self._edges),
            cycles=self.find_cycles(),
            fan_in=dict(sorted(fan_in.items())),
            fan_out=dict(sorted(fan_out.items())),
            top_modules=top_modules,
        )

    def __len__(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        return f"DependencyGraph(num_modules={self._num_modules}, edges={len(self._edges)})"


__all__ = ["DependencyGraph", "GraphSummary"]
