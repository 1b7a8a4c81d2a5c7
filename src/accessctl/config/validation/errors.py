"""Config validation errors.

Setting errors name the dataclass field and, where known, the environment
variable it is read from (``fan_out_concurrency`` /
``DIRECTORY_FAN_OUT_CONCURRENCY``).
"""
from __future__ import annotations

from accessctl.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Raised when configuration is invalid or loading failed."""
    default_code = "config_error"


def _label(setting_name: str, env_var: str | None) -> str:
    return f"'{setting_name}' ({env_var})" if env_var else f"'{setting_name}'"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, *, env_var: str | None = None) -> None:
        super().__init__(
            f"Required setting {_label(setting_name, env_var)} is missing",
            detail={"setting": setting_name, "env_var": env_var},
        )
        self.setting_name = setting_name
        self.env_var = env_var


class InvalidSettingValueError(ConfigError):
    """A setting is present but its value is rejected."""
    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting_name: str,
        value: object,
        reason: str,
        *,
        env_var: str | None = None,
    ) -> None:
        super().__init__(
            f"Setting {_label(setting_name, env_var)} has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "env_var": env_var, "value": repr(value), "reason": reason},
        )
        self.setting_name = setting_name
        self.env_var = env_var
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
