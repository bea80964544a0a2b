"""Positional ``{}`` template substitution."""

from __future__ import annotations

from collections.abc import Sequence

from confpath.errors import FormatArityError

__all__ = ["format_template", "count_placeholders"]

_PLACEHOLDER = None


def _tokenize(template: str) -> list[str | None]:
    """Split a template into literal chunks and placeholder markers (None).

    ``{{`` and ``}}`` collapse to a single literal brace and ``{}`` is a
    placeholder. Scanning is left to right, so ``{{}`` reads as ``{`` then a
    lone ``}``. Any other brace is literal text.
    """
    tokens: list[str | None] = []
    literal: list[str] = []
    i = 0
    length = len(template)
    while i < length:
        pair = template[i : i + 2]
        if pair in ("{{", "}}"):
            literal.append(pair[0])
            i += 2
        elif pair == "{}":
            tokens.append("".join(literal))
            literal = []
            tokens.append(_PLACEHOLDER)
            i += 2
        else:
            literal.append(template[i])
            i += 1
    tokens.append("".join(literal))
    return tokens


def count_placeholders(template: str) -> int:
    """Return the number of ``{}`` placeholders in ``template``."""
    return sum(1 for token in _tokenize(template) if token is _PLACEHOLDER)


def format_template(template: str, values: Sequence[str]) -> str:
    """Substitute ``values`` into the ``{}`` placeholders of ``template`` left to right.

    Raises:
        FormatArityError: If the placeholder count differs from ``len(values)``.
    """
    tokens = _tokenize(template)
    expected = sum(1 for token in tokens if token is _PLACEHOLDER)
    if expected != len(values):
        raise FormatArityError(expected=expected, actual=len(values))

    remaining = iter(values)
    return "".join(next(remaining) if token is _PLACEHOLDER else token for token in tokens)
