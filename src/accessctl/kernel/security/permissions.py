"""Kernel security – Permissions.

A :class:`Permissions` value is the per-resource mapping from normalized role
name to the set of :class:`~accessctl.kernel.security.authorization.Authorization`
kinds that role unlocks.  It answers one question: *given these caller roles,
which authorizations apply?*

Example::

    perms = Permissions.from_grants({
        "ops": [Authorization.READ, Authorization.WRITE],
        "admin": ALL_AUTHORIZATIONS,
    })
    perms.resolve({Role("Ops")}, is_admin=False)
    # frozenset({Authorization.READ, Authorization.WRITE})
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any, ClassVar

from accessctl.kernel.security.authorization import (
    ALL_AUTHORIZATIONS,
    NO_AUTHORIZATIONS,
    Authorization,
    parse_authorizations,
)
from accessctl.kernel.security.role import Role, normalize_role_name


def _role_name(role: Role | str) -> str:
    return role.name if isinstance(role, Role) else normalize_role_name(role)


class Permissions:
    """Immutable role → authorization-set mapping.

    Keys are normalized role names; values are parsed with
    :func:`~accessctl.kernel.security.authorization.parse_authorizations`, and an
    unknown authorization name raises
    :class:`~accessctl.kernel.errors.ValidationError`.
    """

    EMPTY: ClassVar["Permissions"]

    __slots__ = ("_grants",)

    def __init__(
        self, grants: Mapping[str, Iterable[Authorization | str]] | None = None
    ) -> None:
        merged: dict[str, frozenset[Authorization]] = {}
        for role, authorizations in (grants or {}).items():
            name = normalize_role_name(role)
            if not name:
                continue
            merged[name] = merged.get(name, NO_AUTHORIZATIONS) | parse_authorizations(authorizations)
        self._grants: Mapping[str, frozenset[Authorization]] = MappingProxyType(merged)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def from_grants(
        cls, grants: Mapping[str, Iterable[Authorization | str]]
    ) -> "Permissions":
        """Build from a role-keyed mapping; names may be enum members or strings."""
        return cls(grants)

    @classmethod
    def from_authorization_map(
        cls, by_authorization: Mapping[Authorization | str, Iterable[str]]
    ) -> "Permissions":
        """Build from the authorization-keyed storage form (``READ -> [roles]``)."""
        grants: dict[str, set[Authorization]] = {}
        for authorization, roles in by_authorization.items():
            (kind,) = parse_authorizations([authorization])
            for role in [roles] if isinstance(roles, str) else roles:
                grants.setdefault(normalize_role_name(role), set()).add(kind)
        return cls({role: frozenset(kinds) for role, kinds in grants.items()})

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def resolve(self, user_roles: Iterable[Role | str], is_admin: bool) -> frozenset[Authorization]:
        """Return the authorizations *user_roles* unlock; admins get everything."""
        if is_admin:
            return ALL_AUTHORIZATIONS
        return self.get_authorizations(user_roles)

    def get_authorizations(self, user_roles: Iterable[Role | str]) -> frozenset[Authorization]:
        result: frozenset[Authorization] = NO_AUTHORIZATIONS
        for name in {_role_name(role) for role in user_roles}:
            result = result | self._grants.get(name, NO_AUTHORIZATIONS)
        return result

    def roles_with(self, authorization: Authorization) -> frozenset[str]:
        """Role names granted *authorization*."""
        return frozenset(role for role, auths in self._grants.items() if authorization in auths)

    def all_roles(self) -> frozenset[str]:
        return frozenset(self._grants)

    def is_restricted(self) -> bool:
        """``True`` when at least one role is granted something."""
        return any(self._grants.values())

    def to_dict(self) -> dict[str, Any]:
        return {role: sorted(a.value for a in auths) for role, auths in sorted(self._grants.items())}

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Permissions):
            return NotImplemented
        return dict(self._grants) == dict(other._grants)

    def __hash__(self) -> int:
        return hash(frozenset(self._grants.items()))

    def __len__(self) -> int:
        return len(self._grants)

    def __repr__(self) -> str:
        return f"Permissions({self.to_dict()!r})"


Permissions.EMPTY = Permissions()


__all__ = ["Permissions"]
