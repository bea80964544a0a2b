"""Tests for the example configuration in examples/confpath/."""

from __future__ import annotations

import importlib.util
import pathlib

from confpath import ConfigDocument

PROJECT_ROOT = pathlib.Path(__file__).resolve().parent.parent.parent
EXAMPLE_DIR = PROJECT_ROOT / "examples" / "confpath"


def _load_example_module(relative_path: str):
    """Load a Python module from a path relative to PROJECT_ROOT using importlib."""
    full_path = PROJECT_ROOT / relative_path
    spec = importlib.util.spec_from_file_location(full_path.stem, str(full_path))
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


class TestExampleConfig:
    def test_scalars(self):
        config = ConfigDocument.from_file(EXAMPLE_DIR / "config.yaml")
        assert config.str("app/port") == "1000"
        assert config.str("app/debug") == "false"
        assert config.str("app/ratio") == "0.75"
        assert config.str("db/redis") == ""

    def test_hosts_list(self):
        config = ConfigDocument.from_file(EXAMPLE_DIR / "config.yaml")
        assert config.list("app/hosts") == ["alpha.internal", "beta.internal"]


class TestConnectionStrings:
    def test_redis_address(self):
        mod = _load_example_module("examples/confpath/connection_strings.py")
        config = ConfigDocument.from_file(mod.CONFIG_FILE)
        assert mod.redis_address(config) == "127.0.0.1:6379"

    def test_sql_connection_string(self):
        mod = _load_example_module("examples/confpath/connection_strings.py")
        config = ConfigDocument.from_file(mod.CONFIG_FILE)
        assert (
            mod.sql_connection_string(config)
            == "Driver={SQL Server};Server=127.0.0.1;Database=my_db;Uid=user;Pwd=Pa$$w0rd!;"
        )
