"""Emission settings and environment helpers.

:class:`GraphMlConfig` is the immutable settings object consumed by
:class:`graphmlwriter.emit.GraphMl`. Every setter returns an updated copy, so a
configuration can be shared and reused across emissions.

Environment variables defined in a project-level ``.env`` file are loaded
before they are read. Consumers should rely on the ``get_env`` helper instead
of using :func:`os.getenv` directly so that the configuration is loaded in a
single, well-defined place.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from .exporters import (
    SUPPRESSED,
    DebugWeights,
    DisplayWeights,
    WeightExporter,
    WeightFunction,
    coerce_exporter,
    exporter_by_name,
)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@lru_cache(maxsize=1)
def _load_environment() -> None:
    """Load environment variables from the project's ``.env`` file.

    The loader first attempts to read ``.env`` from the repository root.  If the
    file does not exist we still call :func:`load_dotenv` to allow the default
    discovery mechanism to run.  Subsequent calls are cached so the file is only
    read once per process.
    """

    project_root = Path(__file__).resolve().parents[1]
    env_path = project_root / ".env"

    if env_path.exists():
        load_dotenv(env_path, override=False)
    else:
        load_dotenv(override=False)


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Return the value for ``key`` from the environment.

    Parameters
    ----------
    key:
        The name of the environment variable to look up.
    default:
        The value to return when ``key`` is not present.
    """

    _load_environment()
    return os.environ.get(key, default)


def _parse_flag(key: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{key} must be a boolean flag, got {value!r}")


def _parse_exporter(key: str, value: str) -> WeightExporter:
    try:
        return exporter_by_name(value)
    except ValueError as exc:
        raise ValueError(f"{key}: {exc}") from None


ExporterLike = Union[WeightExporter, WeightFunction, None]


@dataclass(frozen=True)
class GraphMlConfig:
    """Settings selecting what gets exported and how it is formatted.

    The default writes a compact document and suppresses node and edge
    weights. Setters are independent of each other; the last call for a given
    option wins.
    """

    pretty_print_enabled: bool = False
    node_exporter: WeightExporter = field(default=SUPPRESSED)
    edge_exporter: WeightExporter = field(default=SUPPRESSED)

    @classmethod
    def from_env(cls) -> "GraphMlConfig":
        """Build a configuration from ``GRAPHML_*`` environment variables.

        ``GRAPHML_PRETTY_PRINT`` takes a boolean flag, ``GRAPHML_NODE_WEIGHTS``
        and ``GRAPHML_EDGE_WEIGHTS`` one of ``none``, ``display`` or ``debug``.
        Unset variables keep the defaults.
        """

        config = cls()
        pretty = get_env("GRAPHML_PRETTY_PRINT")
        if pretty is not None:
            config = config.pretty_print(_parse_flag("GRAPHML_PRETTY_PRINT", pretty))
        node_weights = get_env("GRAPHML_NODE_WEIGHTS")
        if node_weights is not None:
            config = config.export_node_weights(_parse_exporter("GRAPHML_NODE_WEIGHTS", node_weights))
        edge_weights = get_env("GRAPHML_EDGE_WEIGHTS")
        if edge_weights is not None:
            config = config.export_edge_weights(_parse_exporter("GRAPHML_EDGE_WEIGHTS", edge_weights))
        return config

    def pretty_print(self, state: bool = True) -> "GraphMlConfig":
        """Enable or disable indentation of the output."""

        return replace(self, pretty_print_enabled=bool(state))

    def export_node_weights(self, exporter: ExporterLike) -> "GraphMlConfig":
        """Use ``exporter`` (or a plain function) for node weights."""

        return replace(self, node_exporter=coerce_exporter(exporter))

    def export_edge_weights(self, exporter: ExporterLike) -> "GraphMlConfig":
        """Use ``exporter`` (or a plain function) for edge weights."""

        return replace(self, edge_exporter=coerce_exporter(exporter))

    def export_node_weights_display(self) -> "GraphMlConfig":
        return self.export_node_weights(DisplayWeights())

    def export_edge_weights_display(self) -> "GraphMlConfig":
        return self.export_edge_weights(DisplayWeights())

    def export_node_weights_debug(self) -> "GraphMlConfig":
        return self.export_node_weights(DebugWeights())

    def export_edge_weights_debug(self) -> "GraphMlConfig":
        return self.export_edge_weights(DebugWeights())

    def suppress_node_weights(self) -> "GraphMlConfig":
        return self.export_node_weights(SUPPRESSED)

    def suppress_edge_weights(self) -> "GraphMlConfig":
        return self.export_edge_weights(SUPPRESSED)


__all__ = ["GraphMlConfig", "get_env"]
