"""Roles – resolution of external role memberships."""
from accessctl.roles.merger import IdentityRoleMerger, dedupe_roles, roles_from_memberships
from accessctl.roles.provider import StaticUserRolesProvider, UserRolesProvider
from accessctl.roles.strategy import LookupStrategy, choose_strategy

__all__ = [
    "IdentityRoleMerger",
    "LookupStrategy",
    "StaticUserRolesProvider",
    "UserRolesProvider",
    "choose_strategy",
    "dedupe_roles",
    "roles_from_memberships",
]
