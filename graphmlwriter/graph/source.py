"""Read-only view of a graph consumed by the GraphML emitter."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Iterable, Optional, Protocol, Tuple, runtime_checkable

import networkx as nx


@runtime_checkable
class SourceGraph(Protocol):
    """Protocol for graphs that can be emitted.

    Nodes and edges are yielded in a stable iteration order together with
    their weight; a weight of ``None`` means the element carries none.
    """

    def is_directed(self) -> bool:  # pragma: no cover - interface
        ...

    def node_references(self) -> Iterable[Tuple[Hashable, Any]]:  # pragma: no cover - interface
        ...

    def edge_references(self) -> Iterable[Tuple[Hashable, Hashable, Any]]:  # pragma: no cover - interface
        ...


@dataclass
class NetworkXSource:
    """Adapt a :mod:`networkx` graph to :class:`SourceGraph`.

    ``node_weight`` names the node data attribute used as weight; ``None``
    uses the node key itself. ``edge_weight`` names the edge data attribute;
    ``None`` uses the whole edge data dictionary. Missing attributes leave the
    element without a weight.
    """

    graph: nx.Graph
    node_weight: Optional[str] = None
    edge_weight: Optional[str] = "weight"

    def is_directed(self) -> bool:
        return self.graph.is_directed()

    def node_references(self) -> Iterable[Tuple[Hashable, Any]]:
        for node, data in self.graph.nodes(data=True):
            if self.node_weight is None:
                yield node, node
            else:
                yield node, data.get(self.node_weight)

    def edge_references(self) -> Iterable[Tuple[Hashable, Hashable, Any]]:
        for source, target, data in self.graph.edges(data=True):
            if self.edge_weight is None:
                yield source, target, dict(data)
            else:
                yield source, target, data.get(self.edge_weight)


def as_source(graph: Any) -> SourceGraph:
    """Return ``graph`` as a :class:`SourceGraph`, wrapping networkx graphs."""

    if isinstance(graph, nx.Graph):
        return NetworkXSource(graph)
    if isinstance(graph, SourceGraph):
        return graph
    raise TypeError(f"Cannot emit GraphML for object of type {type(graph).__name__}")
