"""Minimal streaming XML writer used by the GraphML emitter."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple
from xml.sax.saxutils import escape as _sax_escape

INDENT = "  "
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

_EXTRA_ENTITIES = {'"': "&quot;", "'": "&apos;"}
REPLACEMENT_CHARACTER = "\ufffd"

# Code points outside the XML 1.0 Char production, lone surrogates included.
_INVALID_XML_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def escape(text: str) -> str:
    """Replace ``& < > " '`` with their XML entity references.

    Characters XML 1.0 cannot represent are replaced with U+FFFD so the
    document stays well-formed whatever text the caller supplies.
    """

    return _sax_escape(_INVALID_XML_CHARS.sub(REPLACEMENT_CHARACTER, text), _EXTRA_ENTITIES)


@dataclass
class _OpenElement:
    name: str
    has_children: bool = False


class XmlWriter:
    """Append XML events to a buffer or to a ``write`` callable.

    Start tags are kept open until the next event so that elements without
    content can be written in the short ``<name ... />`` form. With
    ``pretty_print`` enabled every start tag is placed on its own line,
    indented by ``INDENT`` per nesting level; ``depth`` offsets that level for
    fragments that are later embedded into a larger document.
    """

    def __init__(
        self,
        write: Optional[Callable[[str], object]] = None,
        *,
        pretty_print: bool = False,
        depth: int = 0,
    ) -> None:
        self._chunks: List[str] = []
        self._write = write if write is not None else self._chunks.append
        self.pretty_print = pretty_print
        self._depth = depth
        self._stack: List[_OpenElement] = []
        self._start_open = False
        self._started = False

    def declaration(self) -> None:
        """Write the XML declaration."""

        self._emit(XML_DECLARATION)

    def start_element(self, name: str, attributes: Iterable[Tuple[str, str]] = ()) -> None:
        self._close_start_tag()
        if self._stack:
            self._stack[-1].has_children = True
        self._newline(self._depth + len(self._stack))
        rendered = "".join(f' {key}="{escape(value)}"' for key, value in attributes)
        self._emit(f"<{name}{rendered}")
        self._stack.append(_OpenElement(name))
        self._start_open = True

    def characters(self, text: str) -> None:
        self._close_start_tag()
        self._emit(escape(text))

    def raw(self, fragment: str) -> None:
        """Insert pre-rendered markup as children of the current element."""

        self._close_start_tag()
        if self._stack:
            self._stack[-1].has_children = True
        self._emit(fragment)

    def end_element(self, *, self_close: bool = True) -> None:
        element = self._stack.pop()
        if self._start_open:
            self._start_open = False
            self._emit(" />" if self_close else f"></{element.name}>")
            return
        if element.has_children:
            self._newline(self._depth + len(self._stack))
        self._emit(f"</{element.name}>")

    def getvalue(self) -> str:
        """Return everything buffered so far."""

        return "".join(self._chunks)

    def _close_start_tag(self) -> None:
        if self._start_open:
            self._emit(">")
            self._start_open = False

    def _newline(self, level: int) -> None:
        if self.pretty_print and (self._started or self._depth):
            self._emit("\n" + INDENT * level)

    def _emit(self, text: str) -> None:
        self._started = True
        self._write(text)


__all__ = ["INDENT", "REPLACEMENT_CHARACTER", "XML_DECLARATION", "XmlWriter", "escape"]
