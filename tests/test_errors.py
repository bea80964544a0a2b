"""Tests for the confpath error hierarchy."""

from __future__ import annotations

import pytest

from confpath.errors import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfPathError,
    ErrorCodes,
    FormatArityError,
    PathNotFoundError,
)


class TestErrorHierarchy:
    @pytest.mark.parametrize(
        "error",
        [
            PathNotFoundError(path="a/b", segment="b"),
            FormatArityError(expected=2, actual=1),
            ConfigError(message="bad"),
            ConfigNotFoundError(config_path="missing.yaml"),
            ConfigParseError(message="broken"),
        ],
    )
    def test_all_errors_derive_from_base(self, error: ConfPathError) -> None:
        assert isinstance(error, ConfPathError)
        assert isinstance(error, Exception)
        assert error.timestamp

    def test_str_includes_code(self) -> None:
        err = ConfigError(message="separator must not be empty")
        assert str(err) == "[CONFIG_INVALID] separator must not be empty"


class TestPathNotFoundError:
    def test_details(self) -> None:
        err = PathNotFoundError(path="db/redis/host", segment="host")
        assert err.code == ErrorCodes.PATH_NOT_FOUND
        assert err.path == "db/redis/host"
        assert err.segment == "host"
        assert "host" in err.message


class TestFormatArityError:
    def test_details(self) -> None:
        err = FormatArityError(expected=3, actual=2)
        assert err.code == ErrorCodes.FORMAT_ARITY_MISMATCH
        assert err.expected == 3
        assert err.actual == 2
        assert err.details == {"expected": 3, "actual": 2}

    def test_cause_is_kept(self) -> None:
        cause = ValueError("inner")
        err = FormatArityError(expected=1, actual=0, cause=cause)
        assert err.cause is cause


class TestConfigErrors:
    def test_not_found_details(self) -> None:
        err = ConfigNotFoundError(config_path="config.prod.yaml")
        assert err.code == ErrorCodes.CONFIG_NOT_FOUND
        assert err.details["config_path"] == "config.prod.yaml"

    def test_parse_error_optional_path(self) -> None:
        err = ConfigParseError(message="broken")
        assert err.code == ErrorCodes.CONFIG_PARSE_ERROR
        assert err.details["config_path"] is None


class TestErrorCodes:
    def test_codes_are_immutable(self) -> None:
        with pytest.raises(AttributeError):
            ErrorCodes().PATH_NOT_FOUND = "other"
