"""Graph algorithms for module dependency graphs.

Graphs are adjacency lists indexed by module: ``adjacency[i]`` holds the
modules reachable from ``i`` by one edge. Every traversal here is iterative so
that very large module counts do not hit the interpreter recursion limit.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


class _Color(IntEnum):
    WHITE = 0
    GRAY = 1
    BLACK = 2


def build_adjacency(
    num_nodes: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """Build sorted, de-duplicated adjacency lists for nodes ``0..num_nodes-1``."""
    successors: list[set[int]] = [set() for _ in range(num_nodes)]
    for source, target in edges:
        successors[source].add(target)
    return [sorted(targets) for targets in successors]


def has_cycle(adjacency: Sequence[Sequence[int]]) -> bool:
    """Return True if the directed graph contains a cycle.

    Depth-first search with WHITE/GRAY/BLACK coloring: reaching a GRAY node
    means the edge closes a path still on the DFS stack.
    """
    color = [_Color.WHITE] * len(adjacency)

    for root in range(len(adjacency)):
        if color[root] is not _Color.WHITE:
            continue
        color[root] = _Color.GRAY
        stack: list[tuple[int, int]] = [(root, 0)]
        while stack:
            node, position = stack[-1]
            successors = adjacency[node]
            if position == len(successors):
                color[node] = _Color.BLACK
                stack.pop()
                continue
            stack[-1] = (node, position + 1)
            successor = successors[position]
            if color[successor] is _Color.GRAY:
                return True
            if color[successor] is _Color.WHITE:
                color[successor] = _Color.GRAY
                stack.append((successor, 0))

    return False


class _TarjanState:
    """Mutable state container for Tarjan's SCC algorithm."""

    def __init__(self, num_nodes: int) -> None:
        self.index = 0
        self.indices: list[int | None] = [None] * num_nodes
        self.low_link: list[int] = [0] * num_nodes
        self.on_stack: list[bool] = [False] * num_nodes
        self.stack: list[int] = []
        self.sccs: list[list[int]] = []

    def visit(self, node: int) -> None:
        self.indices[node] = self.index
        self.low_link[node] = self.index
        self.index += 1
        self.stack.append(node)
        self.on_stack[node] = True


def _extract_scc(state: _TarjanState, root: int) -> list[int]:
    """Extract a strongly connected component from the stack."""
    scc: list[int] = []
    while state.stack:
        w = state.stack.pop()
        state.on_stack[w] = False
        scc.append(w)
        if w == root:
            break
    if root not in scc:
        msg = (
            f"Tarjan algorithm invariant violated: root node {root!r} "
            "not found in stack during SCC extraction."
        )
        raise RuntimeError(msg)
    return scc


def _strongconnect(
    root: int, adjacency: Sequence[Sequence[int]], state: _TarjanState
) -> None:
    """Run Tarjan's algorithm from ``root`` using an explicit frame stack."""
    state.visit(root)
    frames: list[tuple[int, int]] = [(root, 0)]

    while frames:
        node, position = frames[-1]
        successors = adjacency[node]

        if position < len(successors):
            frames[-1] = (node, position + 1)
            neighbor = successors[position]
            neighbor_index = state.indices[neighbor]
            if neighbor_index is None:
                state.visit(neighbor)
                frames.append((neighbor, 0))
            elif state.on_stack[neighbor]:
                state.low_link[node] = min(state.low_link[node], neighbor_index)
            continue

        frames.pop()
        if frames:
            parent = frames[-1][0]
            state.low_link[parent] = min(state.low_link[parent], state.low_link[node])

        if state.low_link[node] == state.indices[node]:
            scc = _extract_scc(state, node)
            if len(scc) > 1 or node in successors:
                state.sccs.append(sorted(scc))


def find_cycles(adjacency: Sequence[Sequence[int]]) -> list[list[int]]:
    """Find cyclic strongly connected components using Tarjan's algorithm.

    Args:
        adjacency: Adjacency lists indexed by node

    Returns:
        Sorted list of components, each sorted; a component qualifies when it
        has more than one node or a self-loop
    """
    state = _TarjanState(len(adjacency))

    for node in range(len(adjacency)):
        if state.indices[node] is None:
            _strongconnect(node, adjacency, state)

    return sorted(state.sccs)


def compute_fan_stats(
    edges: Iterable[tuple[int, int]],
) -> tuple[dict[int, int], dict[int, int]]:
    """Compute fan-in and fan-out statistics from edges."""
    fan_in: dict[int, int] = {}
    fan_out: dict[int, int] = {}

    for source, target in edges:
        fan_out[source] = fan_out.get(source, 0) + 1
        fan_in[target] = fan_in.get(target, 0) + 1

    return fan_in, fan_out


__all__ = [
    "build_adjacency",
    "compute_fan_stats",
    "find_cycles",
    "has_cycle",
]
