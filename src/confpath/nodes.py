"""Immutable value tree built from parsed YAML data."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Any, Union

from confpath.errors import ConfigParseError

__all__ = ["Scalar", "Sequence", "Mapping", "ValueNode", "build_tree", "scalar_text"]


@dataclass(frozen=True)
class Scalar:
    """A leaf value held in its canonical textual form."""

    text: str

    def to_python(self) -> str:
        return self.text


@dataclass(frozen=True)
class Sequence:
    """An ordered list of child nodes."""

    items: tuple[ValueNode, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True)
class Mapping:
    """An insertion-ordered mapping of string keys to child nodes.

    Entries are exposed through a read-only proxy over a private copy, so the
    node cannot be changed after construction.
    """

    entries: MappingProxyType[str, ValueNode] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def get(self, key: str) -> ValueNode | None:
        """Return the child stored under ``key``, or None."""
        return self.entries.get(key)

    def keys(self) -> list[str]:
        return list(self.entries)

    def to_python(self) -> dict[str, Any]:
        return {key: node.to_python() for key, node in self.entries.items()}


ValueNode = Union[Scalar, Sequence, Mapping]


def scalar_text(value: Any) -> str:
    """Render a parsed YAML scalar in its canonical textual form.

    Booleans become ``true``/``false``, integers plain decimal, floats their
    shortest round-trip form (``.inf``/``.nan`` for non-finite values), and
    null the empty string. ``date``/``datetime`` objects render as ISO 8601;
    ``load_tree`` never produces them since it keeps YAML timestamps as the
    text written in the file.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return ".nan"
        if math.isinf(value):
            return ".inf" if value > 0 else "-.inf"
        return repr(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str):
        return value
    return str(value)


def build_tree(data: Any) -> ValueNode:
    """Convert plain Python data (as returned by ``yaml.safe_load``) into a value tree.

    Raises:
        ConfigParseError: If the data contains itself, e.g. through a
            recursive YAML alias, or if two keys of one mapping render to
            the same text (``1`` and ``'1'``).
    """
    return _build(data, set())


def _build(data: Any, active: set[int]) -> ValueNode:
    if isinstance(data, (Scalar, Sequence, Mapping)):
        return data
    if not isinstance(data, (dict, list, tuple)):
        return Scalar(scalar_text(data))

    marker = id(data)
    if marker in active:
        raise ConfigParseError(message="Recursive alias detected while building value tree")
    active.add(marker)
    try:
        if isinstance(data, dict):
            return Mapping(_build_entries(data, active))
        return Sequence(tuple(_build(item, active) for item in data))
    finally:
        active.discard(marker)


def _build_entries(data: dict[Any, Any], active: set[int]) -> dict[str, ValueNode]:
    entries: dict[str, ValueNode] = {}
    for key, value in data.items():
        text = scalar_text(key)
        if text in entries:
            raise ConfigParseError(message=f"Mapping keys collide as '{text}' after conversion to text")
        entries[text] = _build(value, active)
    return entries
