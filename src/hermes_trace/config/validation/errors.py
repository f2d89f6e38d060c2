"""Config validation errors.

Messages and ``detail`` name the offending setting but never echo its
value; ``InvalidSettingValueError.value`` keeps it for callers that need it.
"""
from hermes_trace.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or failed validation."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        self.setting_name = setting_name
        super().__init__(f"{setting_name} is required but not set", detail={"setting": setting_name})


class InvalidSettingValueError(ConfigError):
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        self.setting_name = setting_name
        self.value = value
        self.reason = reason
        super().__init__(
            f"invalid value for {setting_name}: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
