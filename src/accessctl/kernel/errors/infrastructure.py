"""Infrastructure errors – directory backend failures."""

from __future__ import annotations

from typing import Any

from accessctl.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class DirectoryError(InfrastructureError):
    """The directory backend failed or answered unexpectedly."""

    default_code = "directory_error"


class DirectoryConnectionError(DirectoryError):
    """Failed to reach the directory server."""

    default_code = "directory_connection_error"

    def __init__(
        self,
        server: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not connect to '{server}'", **kwargs)
        self.server = server


class DirectoryTimeoutError(DirectoryError):
    """A directory operation exceeded its deadline."""

    default_code = "directory_timeout"


class IncorrectResultSizeError(DirectoryError):
    """A single-entry search did not return exactly ``expected`` entries."""

    default_code = "incorrect_result_size"

    def __init__(self, expected: int, actual: int, **kwargs: Any) -> None:
        super().__init__(
            f"Incorrect result size: expected {expected}, actual {actual}",
            detail={"expected": expected, "actual": actual},
            **kwargs,
        )
        self.expected = expected
        self.actual = actual


__all__ = [
    "DirectoryConnectionError",
    "DirectoryError",
    "DirectoryTimeoutError",
    "IncorrectResultSizeError",
    "InfrastructureError",
]
