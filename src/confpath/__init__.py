"""confpath - path-addressed access to YAML configuration with template formatting."""

from __future__ import annotations

# Document
from confpath.document import ConfigDocument

# Value tree
from confpath.nodes import Mapping, Scalar, Sequence, ValueNode, build_tree

# Paths and resolution
from confpath.path import PathExpression, parse_path
from confpath.resolver import Multiple, ResolvedValue, Single, resolve

# Rendering
from confpath.coercion import to_display_list, to_display_string
from confpath.formatter import count_placeholders, format_template

# Loading
from confpath.loader import ConfigOptions, load_tree, render_filename

# Errors
from confpath.errors import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfPathError,
    ErrorCodes,
    FormatArityError,
    PathNotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    # Document
    "ConfigDocument",
    # Value tree
    "Scalar",
    "Sequence",
    "Mapping",
    "ValueNode",
    "build_tree",
    # Paths and resolution
    "PathExpression",
    "parse_path",
    "Single",
    "Multiple",
    "ResolvedValue",
    "resolve",
    # Rendering
    "to_display_string",
    "to_display_list",
    "format_template",
    "count_placeholders",
    # Loading
    "ConfigOptions",
    "load_tree",
    "render_filename",
    # Errors
    "ErrorCodes",
    "ConfPathError",
    "PathNotFoundError",
    "FormatArityError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
]
