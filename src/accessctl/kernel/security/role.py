"""Kernel security – Role and RoleSource."""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from enum import Enum

from accessctl.kernel.errors import ValidationError


class RoleSource(str, Enum):
    """Where a role assignment came from."""

    EXTERNAL = "EXTERNAL"
    DIRECTORY = "DIRECTORY"
    STATIC = "STATIC"
    FILE = "FILE"


def normalize_role_name(raw: str) -> str:
    return raw.strip().lower()


def normalize_memberships(raw: Iterable[str] | str | None) -> list[str]:
    """Trim, lower-case and deduplicate group names, dropping blanks.

    First-seen order is preserved.  A bare string is one group name.
    """
    if isinstance(raw, str):
        raw = [raw]
    seen: dict[str, None] = {}
    for value in raw or ():
        name = normalize_role_name(value)
        if name:
            seen.setdefault(name, None)
    return list(seen)


@dataclasses.dataclass(frozen=True)
class Role:
    """Named group membership grant.

    The name is trimmed and lower-cased on construction.  ``source`` is
    provenance for display only: two roles with the same normalized name
    compare and hash equal whatever their source.
    """

    name: str
    source: RoleSource = dataclasses.field(default=RoleSource.EXTERNAL, compare=False)

    def __post_init__(self) -> None:
        normalized = normalize_role_name(self.name)
        if not normalized:
            raise ValidationError("Role name must not be blank", errors=[{"field": "name", "value": self.name}])
        object.__setattr__(self, "name", normalized)

    def __str__(self) -> str:
        return self.name


__all__ = ["Role", "RoleSource", "normalize_memberships", "normalize_role_name"]
