"""Domain errors – invalid roles, grants and distinguished names."""

from __future__ import annotations

from typing import Any

from accessctl.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidDnError(DomainError):
    """A distinguished name could not be assembled or parsed."""

    default_code = "invalid_dn"

    def __init__(self, value: str, reason: str, **kwargs: Any) -> None:
        super().__init__(f"Invalid DN {value!r}: {reason}", **kwargs)
        self.value = value
        self.reason = reason


__all__ = ["DomainError", "InvalidDnError", "ValidationError"]
