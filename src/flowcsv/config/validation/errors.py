"""Errors raised while loading ``CSV_EXPORT_*`` / ``SALESFORCE_*`` settings.

Setting values are never echoed into messages; a bad ``SALESFORCE_PASSWORD``
must not end up in the CLI's stderr or the JSON log.
"""
from flowcsv.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """No environment variable or ``.env`` entry supplies *setting_name*."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"{setting_name} is not set; export it or add it to the .env file",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name} is invalid: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
