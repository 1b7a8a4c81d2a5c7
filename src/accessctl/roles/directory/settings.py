"""Directory – DirectorySettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from accessctl.config.settings import Settings


@dataclasses.dataclass
class DirectorySettings(Settings):
    """Connection and search settings for directory-backed role resolution.

    An empty ``group_search_base`` disables group lookups entirely, and an
    empty ``group_user_attribute`` rules out the bulk group scan.
    """

    _prefix: ClassVar[str] = "DIRECTORY"

    url: str = ""
    user_dn_pattern: str = "uid={0},ou=users"
    user_search_base: str = ""
    user_search_filter: str = ""
    group_search_base: str = ""
    group_search_filter: str = "(uniqueMember={0})"
    group_role_attribute: str = "cn"
    group_user_attribute: str = ""
    threshold_to_use_group_membership: int = 1000
    fan_out_concurrency: int = 8

    def _validate(self) -> None:
        if self.threshold_to_use_group_membership < 0:
            self._reject("threshold_to_use_group_membership", "must be >= 0")
        if self.fan_out_concurrency < 1:
            self._reject("fan_out_concurrency", "must be >= 1")
        if not self.group_role_attribute:
            self._reject("group_role_attribute", "must not be empty")

    @property
    def group_search_enabled(self) -> bool:
        return bool(self.group_search_base)


__all__ = ["DirectorySettings"]
