"""Roles – UserRolesProvider port and a static, in-process provider."""
from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping
from typing import Protocol

from accessctl.kernel.security import ExternalIdentity, Role, RoleSource
from accessctl.roles.merger import roles_from_memberships


class UserRolesProvider(Protocol):
    """Port: resolve the roles held by external identities."""

    async def load_roles(self, identity: ExternalIdentity) -> list[Role]: ...

    async def multi_load_roles(self, identities: Collection[ExternalIdentity]) -> dict[str, list[Role]]: ...


class StaticUserRolesProvider:
    """Serves fixed role assignments keyed by identity id.

    Example::

        provider = StaticUserRolesProvider({"alice": ["ops", "Dev "]})
        await provider.load_roles(ExternalIdentity("alice"))
        # [Role("ops"), Role("dev")]
    """

    def __init__(self, assignments: Mapping[str, Iterable[str]] | None = None) -> None:
        self._assignments: dict[str, list[Role]] = {
            identity_id: roles_from_memberships(groups, RoleSource.STATIC)
            for identity_id, groups in (assignments or {}).items()
        }

    async def load_roles(self, identity: ExternalIdentity) -> list[Role]:
        return list(self._assignments.get(identity.id, ()))

    async def multi_load_roles(self, identities: Collection[ExternalIdentity]) -> dict[str, list[Role]]:
        return {identity.id: await self.load_roles(identity) for identity in identities}


__all__ = ["StaticUserRolesProvider", "UserRolesProvider"]
