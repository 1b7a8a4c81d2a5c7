"""Kernel security – Authorization, Role, Permissions, resources and views."""
from accessctl.kernel.security.authorization import (
    ALL_AUTHORIZATIONS,
    NO_AUTHORIZATIONS,
    Authorization,
    parse_authorizations,
)
from accessctl.kernel.security.role import Role, RoleSource, normalize_memberships, normalize_role_name
from accessctl.kernel.security.permissions import Permissions
from accessctl.kernel.security.identity import ExternalIdentity, IdentityPermission
from accessctl.kernel.security.resources import (
    Account,
    AccountView,
    Pipeline,
    PipelineView,
    Resource,
    ResourceType,
    ServiceAccount,
    ServiceAccountView,
    View,
    Viewable,
)

__all__ = [
    "ALL_AUTHORIZATIONS",
    "Account",
    "AccountView",
    "Authorization",
    "ExternalIdentity",
    "IdentityPermission",
    "NO_AUTHORIZATIONS",
    "Permissions",
    "Pipeline",
    "PipelineView",
    "Resource",
    "ResourceType",
    "Role",
    "RoleSource",
    "ServiceAccount",
    "ServiceAccountView",
    "View",
    "Viewable",
    "normalize_memberships",
    "normalize_role_name",
    "parse_authorizations",
]
