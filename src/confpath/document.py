"""ConfigDocument: path-addressed read access to a loaded configuration tree."""

from __future__ import annotations

import logging
from collections.abc import Mapping as MappingABC
from pathlib import Path
from typing import Any

from confpath.coercion import to_display_list, to_display_string
from confpath.errors import PathNotFoundError
from confpath.formatter import format_template
from confpath.loader import DEFAULT_FILENAME, DEFAULT_SEPARATOR, ConfigOptions, load_tree, render_filename
from confpath.nodes import ValueNode, build_tree
from confpath.path import parse_path
from confpath.resolver import ResolvedValue, resolve

__all__ = ["ConfigDocument"]

logger = logging.getLogger(__name__)


class ConfigDocument:
    """Read-only accessor over a configuration value tree.

    Paths are separator-delimited keys (``db/redis/port``). The final segment
    may join several sibling keys with ``+`` (``db/redis/server+port``) to
    fetch them in one lookup, which is mostly useful with :meth:`fmt`.

    Lookup misses are routine: :meth:`get` returns None and :meth:`str`,
    :meth:`list` and :meth:`fmt` return empty results. Only a template whose
    placeholder count does not match the number of keys raises.

    The document never changes after construction and can be shared between
    threads without locking.
    """

    def __init__(
        self,
        root: ValueNode,
        separator: str = DEFAULT_SEPARATOR,
        environment: str | None = None,
        filename: str | None = None,
    ) -> None:
        options = ConfigOptions.build(separator=separator, environment=environment)
        self._root = root
        self._separator = options.separator
        self._environment = options.environment
        self._filename = filename

    @classmethod
    def from_file(
        cls,
        filename: str | Path = DEFAULT_FILENAME,
        separator: str = DEFAULT_SEPARATOR,
        environment: str | None = None,
    ) -> ConfigDocument:
        """Load a YAML file, substituting ``{env}`` in its name with ``environment``.

        Example::

            config = ConfigDocument.from_file("config.{env}.yaml", environment="prod")
            config.str("app/port")

        Raises:
            ConfigError: If the options are invalid.
            ConfigNotFoundError: If the file cannot be read.
            ConfigParseError: If the file is not valid YAML.
        """
        options = ConfigOptions.build(filename=str(filename), separator=separator, environment=environment)
        resolved = render_filename(options.filename, options.environment)
        logger.debug(f"Loading configuration '{resolved}' (environment={options.environment})")
        root = load_tree(resolved)
        return cls(root, separator=options.separator, environment=options.environment, filename=resolved)

    @classmethod
    def from_mapping(
        cls,
        data: MappingABC[Any, Any],
        separator: str = DEFAULT_SEPARATOR,
        environment: str | None = None,
    ) -> ConfigDocument:
        """Build a document from already-parsed data."""
        return cls(build_tree(dict(data)), separator=separator, environment=environment)

    @property
    def root(self) -> ValueNode:
        return self._root

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def filename(self) -> str | None:
        """The resolved filename the document was loaded from, if any."""
        return self._filename

    def environment(self) -> str | None:
        """Return the environment tag given at construction."""
        return self._environment

    def get(self, path: str) -> ResolvedValue | None:
        """Resolve ``path``, returning None when any segment or key is missing."""
        try:
            return resolve(self._root, parse_path(path, self._separator))
        except PathNotFoundError as exc:
            logger.debug(f"Config lookup miss: {exc.message}")
            return None

    def str(self, path: str) -> str:
        """Return the display string at ``path``.

        Mappings and sequences give ``""``, as does a missing path. For a
        multi-key path only the first key is used.
        """
        resolved = self.get(path)
        if resolved is None:
            return ""
        return to_display_string(resolved.first)

    def list(self, path: str) -> list[str]:
        """Return the display strings of the sequence at ``path``, or ``[]``."""
        resolved = self.get(path)
        if resolved is None:
            return []
        return to_display_list(resolved.first)

    def fmt(self, template: str, path: str) -> str:
        """Fill the ``{}`` placeholders of ``template`` with the values at ``path``.

        Values are substituted in the order their keys appear in the final
        ``+``-joined segment; ``{{`` and ``}}`` produce literal braces::

            config.fmt("{}:{}", "db/redis/server+port")  # "127.0.0.1:6379"

        Returns ``""`` when the path cannot be resolved.

        Raises:
            FormatArityError: If the number of placeholders differs from the
                number of resolved values.
        """
        resolved = self.get(path)
        if resolved is None:
            return ""
        values = [to_display_string(node) for node in resolved.nodes]
        return format_template(template, values)

    def __repr__(self) -> str:
        return (
            f"ConfigDocument(filename={self._filename!r}, separator={self._separator!r}, "
            f"environment={self._environment!r})"
        )
