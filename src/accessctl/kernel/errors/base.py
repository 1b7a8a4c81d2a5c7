"""Root error class for the accessctl error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context; must be JSON-serialisable.
        cause: Original exception, also set as ``__cause__``.

    :meth:`to_dict` nests a cause that is itself a :class:`BaseError`, so a
    wrapped directory failure keeps its own code.  :meth:`log_fields` is the
    flat form bound onto structlog events.
    """

    default_code: str = "accessctl_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if isinstance(self.cause, BaseError):
            payload["cause"] = self.cause.to_dict()
        elif self.cause is not None:
            payload["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return payload

    def log_fields(self) -> dict[str, Any]:
        fields: dict[str, Any] = {"error_code": self.code, "error": self.message}
        if self.detail:
            fields["error_detail"] = self.detail
        return fields


__all__ = ["BaseError"]
