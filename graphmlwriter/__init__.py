"""graphmlwriter package initialization.

This module exposes the entry points used by callers to render an in-memory
graph as a GraphML document.
"""

from .config import GraphMlConfig
from .emit import GraphMl, to_graphml
from .exporters import CustomWeights, DebugWeights, DisplayWeights, SUPPRESSED, SuppressedWeights
from .graph import GraphStore, NetworkXSource, SourceGraph
from .keys import AttributeKey, KeyRegistry, KeyScope
from .persist import GraphExporter

__all__ = [
    "AttributeKey",
    "CustomWeights",
    "DebugWeights",
    "DisplayWeights",
    "GraphExporter",
    "GraphMl",
    "GraphMlConfig",
    "GraphStore",
    "KeyRegistry",
    "KeyScope",
    "NetworkXSource",
    "SUPPRESSED",
    "SourceGraph",
    "SuppressedWeights",
    "to_graphml",
]
