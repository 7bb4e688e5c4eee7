"""Graph export utilities."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

import networkx as nx

from ..config import GraphMlConfig
from ..emit import GraphMl
from ..graph.source import NetworkXSource


@dataclass
class GraphExporter:
    """Serialize a :mod:`networkx` graph to GraphML."""

    graph: nx.Graph
    config: GraphMlConfig = field(default_factory=GraphMlConfig)
    node_weight: Optional[str] = None
    edge_weight: Optional[str] = "weight"

    def export(self) -> str:
        """Return the GraphML document for the wrapped graph."""

        return GraphMl(self.config).to_string(self._source())

    def write(self, target: Union[str, Path, Any]) -> None:
        """Write the document to a file path or to an object with ``write``."""

        if isinstance(target, (str, Path)):
            with open(target, "w", encoding="utf-8", newline="") as handle:
                GraphMl(self.config).to_writer(self._source(), handle)
            return
        GraphMl(self.config).to_writer(self._source(), target)

    def _source(self) -> NetworkXSource:
        return NetworkXSource(self.graph, node_weight=self.node_weight, edge_weight=self.edge_weight)
