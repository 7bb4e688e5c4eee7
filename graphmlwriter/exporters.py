"""Strategies turning node and edge weights into GraphML attributes.

An exporter receives the weight attached to a single node or edge and returns
an ordered list of ``(attribute name, text value)`` pairs. Exporters must be
total and free of side effects; an exception raised by a custom function is a
programming error and propagates to the caller untouched.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Mapping, Protocol, Tuple, Union

RenderedAttributes = List[Tuple[str, str]]
WeightFunction = Callable[[Any], Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]]

WEIGHT_ATTRIBUTE = "weight"


class WeightExporter(Protocol):
    """Protocol implemented by every weight exporter."""

    def render(self, weight: Any) -> RenderedAttributes:  # pragma: no cover - interface
        ...


@dataclass(frozen=True)
class SuppressedWeights:
    """Exporter that never produces attributes."""

    def render(self, weight: Any) -> RenderedAttributes:
        return []


@dataclass(frozen=True)
class DisplayWeights:
    """Export the human readable form (``str``) under ``weight``."""

    name: str = WEIGHT_ATTRIBUTE

    def render(self, weight: Any) -> RenderedAttributes:
        if weight is None:
            return []
        return [(self.name, str(weight))]


@dataclass(frozen=True)
class DebugWeights:
    """Export the diagnostic form (``repr``) under ``weight``."""

    name: str = WEIGHT_ATTRIBUTE

    def render(self, weight: Any) -> RenderedAttributes:
        if weight is None:
            return []
        return [(self.name, repr(weight))]


@dataclass(frozen=True)
class CustomWeights:
    """Delegate to a caller supplied function.

    ``func`` may return a mapping or an iterable of ``(name, value)`` pairs.
    Values are converted with :func:`str`. Repeated names are kept as they
    are, each one becomes its own ``<data>`` element.
    """

    func: WeightFunction

    def render(self, weight: Any) -> RenderedAttributes:
        if weight is None:
            return []
        result = self.func(weight)
        pairs = result.items() if isinstance(result, Mapping) else result
        return [(str(name), str(value)) for name, value in pairs]


SUPPRESSED = SuppressedWeights()


def coerce_exporter(exporter: Union[WeightExporter, WeightFunction, None]) -> WeightExporter:
    """Return ``exporter`` as a :class:`WeightExporter`.

    ``None`` maps to :data:`SUPPRESSED` and bare callables are wrapped in
    :class:`CustomWeights`.
    """

    if exporter is None:
        return SUPPRESSED
    if hasattr(exporter, "render"):
        return exporter  # type: ignore[return-value]
    if callable(exporter):
        return CustomWeights(func=exporter)
    raise TypeError(f"Unsupported weight exporter: {exporter!r}")


_NAMED_EXPORTERS: dict[str, WeightExporter] = {
    "none": SUPPRESSED,
    "display": DisplayWeights(),
    "debug": DebugWeights(),
}


def exporter_by_name(name: str) -> WeightExporter:
    """Look up one of the built-in exporters by its short name."""

    try:
        return _NAMED_EXPORTERS[name.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown weight exporter '{name}', expected one of: {', '.join(_NAMED_EXPORTERS)}"
        ) from None


__all__ = [
    "CustomWeights",
    "DebugWeights",
    "DisplayWeights",
    "RenderedAttributes",
    "SUPPRESSED",
    "SuppressedWeights",
    "WEIGHT_ATTRIBUTE",
    "WeightExporter",
    "WeightFunction",
    "coerce_exporter",
    "exporter_by_name",
]
