"""GraphML emission engine.

Emission runs in two phases. The first walks the graph and renders the
``<graph>`` element into a private buffer while recording every attribute key
it uses. The second writes the XML declaration, the ``<graphml>`` root, the
buffered body and finally the ``<key>`` declarations collected in the first
phase. Because the declarations depend on the whole body, memory proportional
to the body is needed even when writing to a sink.
"""
from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, Optional

from .config import GraphMlConfig
from .exporters import WeightExporter
from .graph.ids import edge_id, node_id
from .graph.source import SourceGraph, as_source
from .keys import KeyRegistry, KeyScope
from .writer import XmlWriter

LOGGER = logging.getLogger(__name__)

NAMESPACE_URL = "http://graphml.graphdrawing.org/xmlns"


@dataclass(frozen=True)
class RenderedBody:
    """Output of the first phase: serialized ``<graph>`` plus its keys."""

    markup: str
    keys: KeyRegistry
    node_count: int = 0
    edge_count: int = 0


@dataclass
class GraphMl:
    """Render graphs as GraphML documents according to ``config``."""

    config: GraphMlConfig = field(default_factory=GraphMlConfig)

    def to_string(self, graph: Any) -> str:
        """Return the complete GraphML document for ``graph``.

        No I/O is involved; only a failing custom weight exporter can raise.
        """

        chunks: list[str] = []
        self._emit(as_source(graph), chunks.append)
        return "".join(chunks)

    def to_writer(self, graph: Any, sink: Any) -> None:
        """Write the complete GraphML document for ``graph`` to ``sink``.

        ``sink`` is any object with a ``write`` method. Binary streams receive
        UTF-8 encoded bytes, everything else receives text. A failing write
        aborts the emission and its error (:class:`OSError`, or
        :class:`ValueError` for a closed stream) propagates; whatever was
        already written stays in the sink.
        """

        self._emit(as_source(graph), _sink_writer(sink))

    def render_body(self, graph: SourceGraph) -> RenderedBody:
        """Run the first phase and return the buffered ``<graph>`` element."""

        keys = KeyRegistry()
        body = XmlWriter(pretty_print=self.config.pretty_print_enabled, depth=1)
        body.start_element(
            "graph",
            [("edgedefault", "directed" if graph.is_directed() else "undirected")],
        )

        indices: Dict[Hashable, int] = {}
        for index, (node, weight) in enumerate(graph.node_references()):
            indices[node] = index
            body.start_element("node", [("id", node_id(index))])
            self._emit_data(body, keys, KeyScope.NODE, self.config.node_exporter, weight)
            body.end_element()

        edge_count = 0
        for index, (source, target, weight) in enumerate(graph.edge_references()):
            body.start_element(
                "edge",
                [
                    ("id", edge_id(index)),
                    ("source", node_id(_endpoint_index(indices, source))),
                    ("target", node_id(_endpoint_index(indices, target))),
                ],
            )
            self._emit_data(body, keys, KeyScope.EDGE, self.config.edge_exporter, weight)
            body.end_element()
            edge_count = index + 1

        body.end_element(self_close=False)
        return RenderedBody(
            markup=body.getvalue(), keys=keys, node_count=len(indices), edge_count=edge_count
        )

    def _emit(self, graph: SourceGraph, write: Callable[[str], object]) -> None:
        rendered = self.render_body(graph)
        LOGGER.debug(
            "Rendered GraphML body with %d nodes, %d edges and %d keys",
            rendered.node_count,
            rendered.edge_count,
            len(rendered.keys),
        )

        document = XmlWriter(write, pretty_print=self.config.pretty_print_enabled)
        document.declaration()
        document.start_element("graphml", [("xmlns", NAMESPACE_URL)])
        document.raw(rendered.markup)
        for key in rendered.keys.declarations():
            document.start_element(
                "key",
                [
                    ("id", key.id),
                    ("for", key.scope.value),
                    ("attr.name", key.name),
                    ("attr.type", key.type),
                ],
            )
            document.end_element()
        document.end_element()

    @staticmethod
    def _emit_data(
        writer: XmlWriter,
        keys: KeyRegistry,
        scope: KeyScope,
        exporter: WeightExporter,
        weight: Any,
    ) -> None:
        for name, value in exporter.render(weight):
            writer.start_element("data", [("key", keys.register(scope, name))])
            writer.characters(value)
            writer.end_element(self_close=False)


def _endpoint_index(indices: Dict[Hashable, int], node: Hashable) -> int:
    try:
        return indices[node]
    except KeyError:
        raise ValueError(f"Edge endpoint {node!r} is not a node of the graph") from None


def _sink_writer(sink: Any) -> Callable[[str], object]:
    binary = isinstance(sink, (io.RawIOBase, io.BufferedIOBase))

    def write(text: str) -> object:
        try:
            return sink.write(text.encode("utf-8") if binary else text)
        except (OSError, ValueError) as exc:
            LOGGER.error("Failed to write GraphML document: %s", exc)
            raise

    return write


def to_graphml(graph: Any, config: Optional[GraphMlConfig] = None) -> str:
    """Shortcut for ``GraphMl(config).to_string(graph)``."""

    return GraphMl(config or GraphMlConfig()).to_string(graph)


__all__ = ["GraphMl", "NAMESPACE_URL", "RenderedBody", "to_graphml"]
