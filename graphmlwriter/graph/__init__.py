"""Graph subpackage containing the source protocol and graph adapters."""

from .ids import edge_id, node_id
from .source import NetworkXSource, SourceGraph, as_source
from .store import GraphStore

__all__ = [
    "GraphStore",
    "NetworkXSource",
    "SourceGraph",
    "as_source",
    "edge_id",
    "node_id",
]
