"""Conversion of resolved nodes into display strings."""

from __future__ import annotations

from confpath.nodes import Mapping, Scalar, Sequence, ValueNode

__all__ = ["to_display_string", "to_display_list"]


def to_display_string(node: ValueNode) -> str:
    """Return the flat text of a scalar; composite nodes have none and give ``""``."""
    if isinstance(node, Scalar):
        return node.text
    if isinstance(node, (Sequence, Mapping)):
        return ""
    raise TypeError(f"Unsupported value node type: {type(node).__name__}")


def to_display_list(node: ValueNode) -> list[str]:
    """Return the display string of every item of a sequence, or ``[]`` for anything else."""
    if isinstance(node, Sequence):
        return [to_display_string(item) for item in node.items]
    if isinstance(node, (Scalar, Mapping)):
        return []
    raise TypeError(f"Unsupported value node type: {type(node).__name__}")
