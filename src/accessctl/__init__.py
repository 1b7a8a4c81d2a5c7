"""
accessctl – access-control evaluation core.

Import path convention::

    from accessctl.kernel.security import Account, Authorization, Permissions, Role
    from accessctl.roles import IdentityRoleMerger, choose_strategy
    from accessctl.roles.directory import DirectoryUserRolesProvider
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
