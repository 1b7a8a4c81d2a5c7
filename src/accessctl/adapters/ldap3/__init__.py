"""ldap3 adapter – DirectoryClient over an LDAP server."""
from accessctl.adapters.ldap3.client import Ldap3DirectoryClient

__all__ = ["Ldap3DirectoryClient"]
