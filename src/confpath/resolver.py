"""Walks a value tree along a parsed path expression."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from confpath.errors import PathNotFoundError
from confpath.nodes import Mapping, ValueNode
from confpath.path import PathExpression

__all__ = ["Single", "Multiple", "ResolvedValue", "resolve"]


@dataclass(frozen=True)
class Single:
    """Result of a path whose final segment names one key."""

    node: ValueNode

    @property
    def nodes(self) -> tuple[ValueNode, ...]:
        return (self.node,)

    @property
    def first(self) -> ValueNode:
        return self.node


@dataclass(frozen=True)
class Multiple:
    """Result of a path whose final segment names several ``+``-joined keys, in declared order."""

    nodes: tuple[ValueNode, ...]

    @property
    def first(self) -> ValueNode:
        return self.nodes[0]


ResolvedValue = Union[Single, Multiple]


def resolve(tree: ValueNode, expr: PathExpression) -> ResolvedValue:
    """Resolve ``expr`` against ``tree``.

    Resolution is all-or-nothing: if any terminal key is missing, no partial
    result is returned. The empty path never resolves, even when the tree
    holds an empty-string key.

    Raises:
        PathNotFoundError: If the path is empty, a navigation segment or
            terminal key is absent, or a node on the way is not a mapping.
    """
    if not expr.path:
        raise PathNotFoundError(path=expr.path, segment="")

    context = tree
    for segment in expr.navigation:
        context = _lookup(context, segment, expr.path)

    found = tuple(_lookup(context, key, expr.path) for key in expr.terminal_keys)
    if len(found) == 1:
        return Single(found[0])
    return Multiple(found)


def _lookup(context: ValueNode, key: str, path: str) -> ValueNode:
    if not isinstance(context, Mapping):
        raise PathNotFoundError(path=path, segment=key)
    node = context.get(key)
    if node is None:
        raise PathNotFoundError(path=path, segment=key)
    return node
