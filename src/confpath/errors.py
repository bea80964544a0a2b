"""Error hierarchy for confpath."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "ConfPathError",
    "PathNotFoundError",
    "FormatArityError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ErrorCodes",
]


class ConfPathError(Exception):
    """Base error for all confpath errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class PathNotFoundError(ConfPathError):
    """Raised when a path segment or terminal key cannot be resolved."""

    def __init__(self, path: str, segment: str, **kwargs: Any) -> None:
        super().__init__(
            code="PATH_NOT_FOUND",
            message=f"Path '{path}' not found at segment '{segment}'",
            details={"path": path, "segment": segment},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The full path string that was looked up."""
        return self.details["path"]

    @property
    def segment(self) -> str:
        """The segment or key where resolution stopped."""
        return self.details["segment"]


class FormatArityError(ConfPathError):
    """Raised when a template's placeholder count differs from the value count."""

    def __init__(self, expected: int, actual: int, **kwargs: Any) -> None:
        super().__init__(
            code="FORMAT_ARITY_MISMATCH",
            message=f"Template has {expected} placeholder(s) but {actual} value(s) were given",
            details={"expected": expected, "actual": actual},
            **kwargs,
        )

    @property
    def expected(self) -> int:
        """Number of placeholders found in the template."""
        return self.details["expected"]

    @property
    def actual(self) -> int:
        """Number of values supplied."""
        return self.details["actual"]


class ConfigError(ConfPathError):
    """Raised when construction options are invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class ConfigNotFoundError(ConfPathError):
    """Raised when a configuration file cannot be found or read."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigParseError(ConfPathError):
    """Raised when configuration content cannot be turned into a value tree."""

    def __init__(self, message: str, config_path: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_PARSE_ERROR",
            message=message,
            details={"config_path": config_path},
            **kwargs,
        )


class ErrorCodes:
    """All confpath error codes as constants.

    Example:
        if error.code == ErrorCodes.PATH_NOT_FOUND:
            use_default()
    """

    PATH_NOT_FOUND = "PATH_NOT_FOUND"
    FORMAT_ARITY_MISMATCH = "FORMAT_ARITY_MISMATCH"
    CONFIG_INVALID = "CONFIG_INVALID"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_PARSE_ERROR = "CONFIG_PARSE_ERROR"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
