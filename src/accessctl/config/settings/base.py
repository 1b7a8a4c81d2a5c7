"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import NoReturn

from accessctl.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Dataclass settings read from ``<PREFIX>_<FIELD>`` environment variables.

    Subclasses set ``_prefix`` and override :meth:`_validate`; validation
    failures go through :meth:`_reject` so they name the variable to fix.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_var(cls, field_name: str) -> str:
        """``DirectorySettings.env_var("url") == "DIRECTORY_URL"``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    def _reject(self, field_name: str, reason: str) -> NoReturn:
        raise InvalidSettingValueError(
            field_name,
            getattr(self, field_name),
            reason,
            env_var=self.env_var(field_name),
        )


__all__ = ["Settings"]
