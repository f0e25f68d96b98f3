"""
Load-order graph for chunks shared between entrypoints.

Each chunk list from the manifest is a chain: chunk ``i`` loads before chunk
``i + 1``. Chains from several entrypoints are merged into one graph so a
vendor chunk used by two packs becomes a single vertex, then the graph is
sorted into one load order.
"""

from __future__ import annotations

from graphlib import CycleError, TopologicalSorter
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from packtags.errors import DependencyCycleError


class DependencyGraph:
    """Directed "loads-before" graph; vertices and edges keep insertion order."""

    def __init__(self):
        self._successors: Dict[Optional[str], Dict[Optional[str], None]] = {}

    @classmethod
    def from_chains(cls, chains: Iterable[Optional[Sequence[str]]]) -> "DependencyGraph":
        graph = cls()
        for chain in chains:
            graph.add_chain(chain)
        return graph

    def add_vertex(self, vertex: Optional[str]) -> None:
        self._successors.setdefault(vertex, {})

    def add_edge(self, before: Optional[str], after: Optional[str]) -> None:
        self.add_vertex(before)
        self.add_vertex(after)
        self._successors[before][after] = None

    def add_chain(self, chain: Optional[Sequence[str]]) -> None:
        if not chain:
            return
        chain = list(chain)
        self.add_vertex(chain[0])
        for before, after in zip(chain, chain[1:]):
            self.add_edge(before, after)

    def successors(self, vertex: Optional[str]) -> List[Optional[str]]:
        return list(self._successors.get(vertex, ()))

    @property
    def vertices(self) -> List[Optional[str]]:
        return list(self._successors)

    def edges(self) -> Iterator[Tuple[Optional[str], Optional[str]]]:
        for before, successors in self._successors.items():
            for after in successors:
                yield before, after

    def __contains__(self, vertex) -> bool:
        return vertex in self._successors

    def __len__(self) -> int:
        return len(self._successors)


def resolve_order(graph: DependencyGraph) -> List[str]:
    """
    Sort ``graph`` so every chunk comes after the chunks that must load before it.

    Unconstrained chunks keep the order in which they were first added to the
    graph, so the same chains always give the same result. ``None`` vertices
    left behind by malformed chunk lists are dropped from the output.
    """
    sorter = TopologicalSorter()
    for vertex in graph.vertices:
        sorter.add(vertex)
    for before, after in graph.edges():
        sorter.add(after, before)
    try:
        order = list(sorter.static_order())
    except CycleError as exc:
        raise DependencyCycleError(exc.args[1]) from exc
    return [vertex for vertex in order if vertex is not None]
