"""Configuration file loading: filename rendering, YAML parsing and option validation."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from confpath.errors import ConfigError, ConfigNotFoundError, ConfigParseError
from confpath.nodes import Mapping, ValueNode, build_tree

__all__ = ["ConfigOptions", "DEFAULT_FILENAME", "DEFAULT_SEPARATOR", "render_filename", "read_yaml", "load_tree"]

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "config.yaml"
DEFAULT_SEPARATOR = "/"
ENV_TOKEN = "{env}"

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _ConfigYamlLoader(yaml.SafeLoader):
    """SafeLoader that keeps timestamps as the text written in the file."""


_ConfigYamlLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class ConfigOptions(BaseModel):
    """Validated construction options for a ConfigDocument."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    filename: str = DEFAULT_FILENAME
    separator: str = Field(default=DEFAULT_SEPARATOR, min_length=1)
    environment: str | None = None

    @field_validator("environment")
    @classmethod
    def _environment_not_empty(cls, value: str | None) -> str | None:
        if value is not None and not value:
            raise ValueError("environment must not be empty")
        return value

    @classmethod
    def build(cls, **kwargs: object) -> ConfigOptions:
        """Validate options, re-raising pydantic errors as ConfigError."""
        try:
            return cls(**kwargs)
        except ValidationError as exc:
            raise ConfigError(message=f"Invalid configuration options: {exc}", cause=exc) from exc


def render_filename(filename: str, environment: str | None) -> str:
    """Replace every ``{env}`` token in ``filename`` with ``environment``."""
    if environment is None:
        return filename
    return filename.replace(ENV_TOKEN, environment)


def read_yaml(path: str | Path) -> object:
    """Read and parse a YAML file with safe loading.

    Timestamps stay strings exactly as written. An empty or comment-only
    file yields an empty dict.
    """
    file_path = Path(path)
    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigNotFoundError(config_path=str(file_path), cause=exc) from exc

    try:
        data = yaml.load(content, Loader=_ConfigYamlLoader)
    except yaml.YAMLError as exc:
        raise ConfigParseError(
            message=f"Invalid YAML in {file_path}: {exc}",
            config_path=str(file_path),
            cause=exc,
        ) from exc

    if data is None:
        return {}
    return data


def load_tree(path: str | Path) -> ValueNode:
    """Read a YAML file and build its value tree."""
    data = read_yaml(path)
    try:
        tree = build_tree(data)
    except ConfigParseError as exc:
        raise ConfigParseError(
            message=f"{exc.message} in {path}",
            config_path=str(path),
            cause=exc,
        ) from exc

    if not isinstance(tree, Mapping):
        logger.warning(f"Configuration root in '{path}' is a {type(tree).__name__}, not a mapping")
    logger.debug(f"Loaded configuration from '{path}'")
    return tree
