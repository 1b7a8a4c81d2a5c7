"""Kernel security – Authorization kinds and authorization sets."""
from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from accessctl.kernel.errors import ValidationError


class Authorization(str, Enum):
    """Atomic action a caller may exercise on a resource."""

    READ = "READ"
    WRITE = "WRITE"
    EXECUTE = "EXECUTE"
    CREATE = "CREATE"


# Derived from the enum so it tracks new members automatically.
ALL_AUTHORIZATIONS: frozenset[Authorization] = frozenset(Authorization)
NO_AUTHORIZATIONS: frozenset[Authorization] = frozenset()


def parse_authorizations(
    values: Iterable[Authorization | str] | Authorization | str,
) -> frozenset[Authorization]:
    """Coerce enum members or case-insensitive names into an authorization set.

    A single name is read as a one-element set.  Raises
    :class:`ValidationError` listing every unknown name.
    """
    if isinstance(values, str):
        values = [values]
    result: set[Authorization] = set()
    unknown: list[str] = []
    for value in values:
        if isinstance(value, Authorization):
            result.add(value)
            continue
        try:
            result.add(Authorization(str(value).strip().upper()))
        except ValueError:
            unknown.append(str(value))
    if unknown:
        raise ValidationError(
            "Unknown authorization kind",
            errors=[{"field": "authorization", "value": v} for v in unknown],
        )
    return frozenset(result)


__all__ = [
    "ALL_AUTHORIZATIONS",
    "Authorization",
    "NO_AUTHORIZATIONS",
    "parse_authorizations",
]
