"""Roles – normalization of raw memberships and merge into identities."""
from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from accessctl.kernel.security import ExternalIdentity, Role, RoleSource, normalize_memberships


def roles_from_memberships(raw: Iterable[str] | str | None, source: RoleSource) -> list[Role]:
    """Turn raw group strings into deduplicated roles tagged with *source*."""
    return [Role(name, source) for name in normalize_memberships(raw)]


def dedupe_roles(roles: Iterable[Role]) -> list[Role]:
    """Drop repeated role names, keeping the first occurrence (and its source)."""
    seen: dict[Role, None] = {}
    for role in roles:
        seen.setdefault(role, None)
    return list(seen)


class IdentityRoleMerger:
    """Attaches resolved roles to :class:`ExternalIdentity` instances.

    Every merge replaces the identity's role list, so resolving the same
    identity twice leaves it in the same state.
    """

    def merge(
        self,
        identity: ExternalIdentity,
        raw: Iterable[str] | None,
        source: RoleSource = RoleSource.EXTERNAL,
    ) -> ExternalIdentity:
        identity.roles = roles_from_memberships(raw, source)
        return identity

    def merge_roles(self, identity: ExternalIdentity, roles: Iterable[Role]) -> ExternalIdentity:
        identity.roles = dedupe_roles(roles)
        return identity

    def apply(
        self,
        identities: Iterable[ExternalIdentity],
        resolved: Mapping[str, Sequence[Role]],
    ) -> list[ExternalIdentity]:
        """Attach a batch result; identities missing from *resolved* get no roles."""
        return [self.merge_roles(identity, resolved.get(identity.id, ())) for identity in identities]


__all__ = ["IdentityRoleMerger", "dedupe_roles", "roles_from_memberships"]
