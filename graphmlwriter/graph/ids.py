"""Identifier helpers for emitted GraphML elements."""
from __future__ import annotations


def node_id(index: int) -> str:
    """Return the document identifier of the node at ``index``."""

    return f"n{index}"


def edge_id(index: int) -> str:
    """Return the document identifier of the edge at ``index``."""

    return f"e{index}"
