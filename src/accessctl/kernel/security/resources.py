"""Kernel security – protected resources and their caller-scoped views.

The resource kinds form a closed set (:data:`Resource`).  Each kind is an
independent frozen dataclass that satisfies :class:`Viewable`; nothing is
shared through a base class.

Identity of a resource is ``(resource_type, name)``: every other field is
declared with ``compare=False`` so it takes no part in equality or hashing.

A view is built on demand and carries copies only (a name plus a resolved
authorization set, or a membership list), never the resource's
:class:`~accessctl.kernel.security.permissions.Permissions`.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from enum import Enum
from typing import Any, Protocol, Union

from accessctl.kernel.security.authorization import Authorization
from accessctl.kernel.security.identity import IdentityPermission
from accessctl.kernel.security.permissions import Permissions
from accessctl.kernel.security.role import Role, RoleSource, normalize_memberships


class ResourceType(str, Enum):
    ACCOUNT = "ACCOUNT"
    PIPELINE = "PIPELINE"
    SERVICE_ACCOUNT = "SERVICE_ACCOUNT"


class Viewable(Protocol):
    """Anything that can project itself for a given caller."""

    def get_view(self, user_roles: Iterable[Role | str], is_admin: bool) -> "View": ...


# ---------------------------------------------------------------------------
# Views
# ---------------------------------------------------------------------------


def _authorizations_dict(name: str, authorizations: frozenset[Authorization]) -> dict[str, Any]:
    return {"name": name, "authorizations": sorted(a.value for a in authorizations)}


@dataclasses.dataclass(frozen=True)
class AccountView:
    name: str
    authorizations: frozenset[Authorization]

    def to_dict(self) -> dict[str, Any]:
        return _authorizations_dict(self.name, self.authorizations)


@dataclasses.dataclass(frozen=True)
class PipelineView:
    name: str
    authorizations: frozenset[Authorization]

    def to_dict(self) -> dict[str, Any]:
        return _authorizations_dict(self.name, self.authorizations)


@dataclasses.dataclass(frozen=True)
class ServiceAccountView:
    name: str
    member_of: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "memberOf": list(self.member_of)}


View = Union[AccountView, PipelineView, ServiceAccountView]


# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class Account:
    """Cloud account; ``cloud_provider`` is descriptive only."""

    name: str
    cloud_provider: str | None = dataclasses.field(default=None, compare=False)
    permissions: Permissions = dataclasses.field(default=Permissions.EMPTY, compare=False)
    resource_type: ResourceType = dataclasses.field(default=ResourceType.ACCOUNT, init=False)

    def get_view(self, user_roles: Iterable[Role | str], is_admin: bool) -> AccountView:
        return AccountView(self.name, self.permissions.resolve(user_roles, is_admin))


@dataclasses.dataclass(frozen=True)
class Pipeline:
    name: str
    permissions: Permissions = dataclasses.field(default=Permissions.EMPTY, compare=False)
    resource_type: ResourceType = dataclasses.field(default=ResourceType.PIPELINE, init=False)

    def get_view(self, user_roles: Iterable[Role | str], is_admin: bool) -> PipelineView:
        return PipelineView(self.name, self.permissions.resolve(user_roles, is_admin))


@dataclasses.dataclass(frozen=True)
class ServiceAccount:
    """Non-human principal defined by the groups it is a member of.

    ``member_of`` accepts a single group name or any iterable of them, normalized
    (trimmed, lower-cased, blanks dropped, deduplicated) on construction.
    """

    name: str
    member_of: frozenset[str] = dataclasses.field(default=frozenset(), compare=False)
    resource_type: ResourceType = dataclasses.field(default=ResourceType.SERVICE_ACCOUNT, init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "member_of", frozenset(normalize_memberships(self.member_of)))

    def get_view(self, user_roles: Iterable[Role | str], is_admin: bool) -> ServiceAccountView:  # noqa: ARG002
        return ServiceAccountView(self.name, tuple(sorted(self.member_of)))

    def to_identity_permission(self) -> IdentityPermission:
        roles = frozenset(Role(group, RoleSource.EXTERNAL) for group in self.member_of)
        return IdentityPermission(id=self.name, roles=roles)


Resource = Union[Account, Pipeline, ServiceAccount]


__all__ = [
    "Account",
    "AccountView",
    "Pipeline",
    "PipelineView",
    "Resource",
    "ResourceType",
    "ServiceAccount",
    "ServiceAccountView",
    "View",
    "Viewable",
]
