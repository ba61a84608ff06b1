"""Errors raised while loading or validating settings."""
from fluent_optional.errors import OptionalError


class ConfigError(OptionalError):
    """Settings could not be loaded or failed validation."""
    code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """An environment variable backing a field without default is unset."""
    code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Environment variable '{setting_name}' is required", setting=setting_name
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting's raw value cannot be parsed or is not allowed."""
    code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            setting=setting_name,
            value=value,
            reason=reason,
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
