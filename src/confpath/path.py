"""Path expression parsing."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["PathExpression", "parse_path", "KEY_JOINER"]

KEY_JOINER = "+"


@dataclass(frozen=True)
class PathExpression:
    """A parsed path: navigation segments followed by one or more terminal keys.

    ``segments`` holds the raw split of the path; only the last one is split
    again on ``+`` into ``terminal_keys``.
    """

    path: str
    segments: tuple[str, ...]
    terminal_keys: tuple[str, ...]

    @property
    def navigation(self) -> tuple[str, ...]:
        """Every segment except the last."""
        return self.segments[:-1]

    @property
    def is_multi(self) -> bool:
        return len(self.terminal_keys) > 1


def parse_path(path: str, separator: str = "/") -> PathExpression:
    """Split ``path`` on ``separator`` and expand the final segment on ``+``.

    Parsing never fails. An empty path gives a single empty segment, which
    no mapping key can match. A ``+`` in a non-final segment is kept as part
    of the key.
    """
    segments = tuple(path.split(separator))
    terminal_keys = tuple(segments[-1].split(KEY_JOINER))
    return PathExpression(path=path, segments=segments, terminal_keys=terminal_keys)
