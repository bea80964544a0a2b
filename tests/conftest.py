"""Shared fixtures for the confpath test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from confpath import ConfigDocument

from yaml_helpers import write_yaml


# === Data ===


SAMPLE_DATA: dict[str, Any] = {
    "app": {
        "port": 1000,
        "name": "inventory",
        "debug": False,
        "ratio": 0.5,
        "hosts": ["alpha", "beta", 3],
    },
    "db": {
        "redis": {"server": "127.0.0.1", "port": 6379},
        "sql": {
            "driver": "SQL Server",
            "server": "127.0.0.1",
            "database": "my_db",
            "username": "user",
            "password": "Pa$$w0rd!",
        },
    },
}



# === Fixtures ===


@pytest.fixture
def sample_data() -> dict[str, Any]:
    return SAMPLE_DATA


@pytest.fixture
def config() -> ConfigDocument:
    return ConfigDocument.from_mapping(SAMPLE_DATA)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    return write_yaml(tmp_path / "config.yaml", SAMPLE_DATA)
