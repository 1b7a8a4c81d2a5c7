"""Kernel security – ExternalIdentity and IdentityPermission."""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from typing import TYPE_CHECKING

from accessctl.kernel.security.role import Role

if TYPE_CHECKING:
    from accessctl.kernel.security.resources import Resource, View


@dataclasses.dataclass
class ExternalIdentity:
    """Identity whose roles come from an external membership source.

    Created with an empty role list and populated once by role resolution
    (see :class:`~accessctl.roles.merger.IdentityRoleMerger`).
    """
    id: str
    roles: list[Role] = dataclasses.field(default_factory=list)


@dataclasses.dataclass(frozen=True)
class IdentityPermission:
    """Identity together with the roles used to evaluate resource views."""
    id: str
    roles: frozenset[Role] = frozenset()
    is_admin: bool = False

    def has_role(self, role: str | Role) -> bool:
        return (role if isinstance(role, Role) else Role(role)) in self.roles

    def view_of(self, resource: "Resource") -> "View":
        return resource.get_view(self.roles, self.is_admin)

    def views_of(self, resources: Iterable["Resource"]) -> list["View"]:
        return [self.view_of(r) for r in resources]


__all__ = ["ExternalIdentity", "IdentityPermission"]
