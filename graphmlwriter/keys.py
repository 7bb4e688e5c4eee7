"""Bookkeeping for the ``<key>`` declarations of a GraphML document."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple

# Key ids are declared as xs:NMTOKEN in the GraphML schema.
_NMTOKEN = re.compile(r"[\w.\-:]+\Z")


class KeyScope(str, Enum):
    """Element kind an attribute key applies to."""

    NODE = "node"
    EDGE = "edge"


@dataclass(frozen=True)
class AttributeKey:
    """A declared attribute, referenced by ``<data key="...">`` elements."""

    id: str
    scope: KeyScope
    name: str
    type: str = "string"


@dataclass
class KeyRegistry:
    """Collect distinct ``(scope, name)`` pairs in first-seen order.

    The registry lives for exactly one emission. Identifiers default to the
    attribute name; a name already claimed by the other scope gets a
    ``_<scope>`` suffix so ids stay unique within the document. Names that
    are not valid NMTOKENs (spaces, markup characters) get ``k<index>``.
    """

    _keys: Dict[Tuple[KeyScope, str], AttributeKey] = field(default_factory=dict)
    _ids: set[str] = field(default_factory=set)

    def register(self, scope: KeyScope, name: str) -> str:
        """Return the key id for ``(scope, name)``, allocating it on first use."""

        existing = self._keys.get((scope, name))
        if existing is not None:
            return existing.id
        key = AttributeKey(id=self._allocate_id(scope, name), scope=scope, name=name)
        self._keys[(scope, name)] = key
        self._ids.add(key.id)
        return key.id

    def declarations(self) -> Tuple[AttributeKey, ...]:
        """Return the registered keys in discovery order."""

        return tuple(self._keys.values())

    def __len__(self) -> int:
        return len(self._keys)

    def _allocate_id(self, scope: KeyScope, name: str) -> str:
        if not _NMTOKEN.match(name):
            return self._fallback_id()
        if name not in self._ids:
            return name
        candidate = f"{name}_{scope.value}"
        suffix = 1
        while candidate in self._ids:
            suffix += 1
            candidate = f"{name}_{scope.value}_{suffix}"
        return candidate

    def _fallback_id(self) -> str:
        index = len(self._keys)
        while f"k{index}" in self._ids:
            index += 1
        return f"k{index}"


__all__ = ["AttributeKey", "KeyRegistry", "KeyScope"]
