"""Build connection strings from examples/confpath/config.yaml."""

from __future__ import annotations

import pathlib

from confpath import ConfigDocument

CONFIG_FILE = pathlib.Path(__file__).resolve().parent / "config.yaml"


def redis_address(config: ConfigDocument) -> str:
    return config.fmt("{}:{}", "db/redis/server+port")


def sql_connection_string(config: ConfigDocument) -> str:
    return config.fmt(
        "Driver={{{}}};Server={};Database={};Uid={};Pwd={};",
        "db/sql/driver+server+database+username+password",
    )


if __name__ == "__main__":
    config = ConfigDocument.from_file(CONFIG_FILE)
    print(redis_address(config))
    print(sql_connection_string(config))
