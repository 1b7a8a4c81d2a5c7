"""Directory-backed role resolution."""
from accessctl.roles.directory.dn import (
    DnPattern,
    decode_dn_value,
    encode_dn_value,
    encode_filter_value,
    format_filter,
    join_dn,
    parse_root_dn_from_url,
)
from accessctl.roles.directory.port import Attributes, AttributesMapper, DirectoryClient
from accessctl.roles.directory.provider import DirectoryUserRolesProvider
from accessctl.roles.directory.settings import DirectorySettings

__all__ = [
    "Attributes",
    "AttributesMapper",
    "DirectoryClient",
    "DirectorySettings",
    "DirectoryUserRolesProvider",
    "DnPattern",
    "decode_dn_value",
    "encode_dn_value",
    "encode_filter_value",
    "format_filter",
    "join_dn",
    "parse_root_dn_from_url",
]
