"""Config validation errors raised while loading search settings.

Every error names the dataclass field and, where one applies, the
environment variable it is read from (``SEARCH_MAX_LIMIT`` and so on), so
an operator can fix the deployment without reading code.
"""
from __future__ import annotations

from mp_search.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Search settings could not be loaded or failed validation."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A field without a default has no environment variable set."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, *, env_key: str | None = None) -> None:
        env_key = env_key or setting_name
        super().__init__(
            f"Setting '{setting_name}' is required; set {env_key}",
            detail={"setting": setting_name, "env_key": env_key},
        )
        self.setting_name = setting_name
        self.env_key = env_key


class InvalidSettingValueError(ConfigError):
    """A value is present but unusable, e.g. a negative ``max_limit``."""
    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting_name: str,
        value: object,
        reason: str,
        *,
        env_key: str | None = None,
    ) -> None:
        source = f" (from {env_key})" if env_key else ""
        super().__init__(
            f"Setting '{setting_name}'{source} has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "env_key": env_key, "value": value, "reason": reason},
        )
        self.setting_name = setting_name
        self.env_key = env_key
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
