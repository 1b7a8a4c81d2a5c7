"""Config settings – SettingsLoader port and EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from accessctl.config.settings.base import Settings
from accessctl.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables.

    ``DirectorySettings.group_search_base`` is read from
    ``DIRECTORY_GROUP_SEARCH_BASE``; absent variables keep the field default.
    """

    def __init__(self, environ: dict[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = settings_class.env_var(field.name)
            raw = environ.get(env_key)

            if raw is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
                ):
                    raise MissingRequiredSettingError(field.name, env_var=env_key)
                continue

            kwargs[field.name] = self._coerce(field.name, env_key, raw, field.type)

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}", cause=exc) from exc

    def _coerce(self, name: str, env_key: str, value: str, type_hint: Any) -> Any:
        hint = type_hint if isinstance(type_hint, str) else getattr(type_hint, "__name__", "")
        origin = getattr(type_hint, "__origin__", None)
        if hint == "bool":
            return value.strip().lower() in ("1", "true", "yes", "on")
        if hint == "int":
            try:
                return int(value)
            except ValueError as exc:
                raise InvalidSettingValueError(
                    name, value, "expected an integer", env_var=env_key
                ) from exc
        if origin is list or hint.startswith("list"):
            return [v.strip() for v in value.split(",") if v.strip()]
        return value


__all__ = ["EnvSettingsLoader", "SettingsLoader"]
