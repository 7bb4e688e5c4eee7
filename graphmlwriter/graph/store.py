"""In-memory, index based graph storage."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Tuple


@dataclass
class GraphStore:
    """Lightweight graph whose nodes and edges are addressed by position.

    Nodes are referred to by the index returned from :meth:`add_node`; both
    nodes and edges keep insertion order and may carry an arbitrary weight.
    """

    directed: bool = True
    node_weights: List[Any] = field(default_factory=list)
    edge_list: List[Tuple[int, int, Any]] = field(default_factory=list)

    def add_node(self, weight: Any = None) -> int:
        """Add a node carrying ``weight`` and return its index."""

        self.node_weights.append(weight)
        return len(self.node_weights) - 1

    def add_edge(self, source: int, target: int, weight: Any = None) -> int:
        """Add an edge between two existing nodes and return its index."""

        for endpoint in (source, target):
            if not 0 <= endpoint < len(self.node_weights):
                raise IndexError(f"Node index {endpoint} is out of range")
        self.edge_list.append((source, target, weight))
        return len(self.edge_list) - 1

    def extend_with_edges(self, edges: Iterable[Tuple[int, int]]) -> None:
        """Add unweighted edges for every ``(source, target)`` pair."""

        for source, target in edges:
            self.add_edge(source, target)

    def is_directed(self) -> bool:
        return self.directed

    def node_references(self) -> Iterable[Tuple[int, Any]]:
        """Iterate over ``(index, weight)`` pairs."""

        return enumerate(self.node_weights)

    def edge_references(self) -> Iterable[Tuple[int, int, Any]]:
        """Iterate over ``(source, target, weight)`` triples."""

        return iter(self.edge_list)
