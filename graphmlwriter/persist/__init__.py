"""Persistence utilities for graphmlwriter."""

from .export import GraphExporter

__all__ = ["GraphExporter"]
