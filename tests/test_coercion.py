"""Tests for display-string coercion."""

from __future__ import annotations

import pytest

from confpath.coercion import to_display_list, to_display_string
from confpath.nodes import Mapping, Scalar, Sequence, build_tree


class TestToDisplayString:
    def test_scalar_text_unchanged(self) -> None:
        assert to_display_string(Scalar("1000")) == "1000"

    def test_empty_scalar(self) -> None:
        assert to_display_string(build_tree(None)) == ""

    def test_sequence_is_empty(self) -> None:
        assert to_display_string(build_tree([1, 2])) == ""

    def test_mapping_is_empty(self) -> None:
        assert to_display_string(build_tree({"a": 1})) == ""

    def test_unknown_node_type(self) -> None:
        with pytest.raises(TypeError):
            to_display_string("raw")  # type: ignore[arg-type]


class TestToDisplayList:
    def test_sequence_items(self) -> None:
        assert to_display_list(build_tree(["a", 2, True, None])) == ["a", "2", "true", ""]

    def test_nested_composites_become_empty(self) -> None:
        assert to_display_list(build_tree([{"a": 1}, [1]])) == ["", ""]

    @pytest.mark.parametrize("node", [Scalar("x"), Mapping({"a": Scalar("1")}), Sequence(())])
    def test_non_sequence_or_empty(self, node) -> None:
        assert to_display_list(node) == []
