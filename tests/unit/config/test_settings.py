"""Unit tests for settings loading, the settings factory and ExportSettings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

import pytest

from flowcsv.adapters.salesforce import SalesforceSettings
from flowcsv.application.export import ExportSettings
from flowcsv.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
    SettingsFactory,
)
from flowcsv.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    debug: bool = False


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


class TestSettings:
    def test_env_key_uses_prefix(self) -> None:
        assert ExportSettings.env_key("log_level") == "CSV_EXPORT_LOG_LEVEL"
        assert AppSettings.env_key("port") == "APP_PORT"

    def test_env_key_without_prefix(self) -> None:
        assert Settings.env_key("debug") == "DEBUG"

    def test_required_fields(self) -> None:
        assert SalesforceSettings.required_fields() == ["username", "password", "security_token"]
        assert AppSettings.required_fields() == []


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_defaults_when_unset(self) -> None:
        settings = EnvSettingsLoader({}).load(AppSettings)
        assert settings == AppSettings()

    def test_coerces_types(self) -> None:
        settings = EnvSettingsLoader({"APP_HOST": "h", "APP_PORT": "9000", "APP_DEBUG": "yes"}).load(AppSettings)
        assert settings.host == "h"
        assert settings.port == 9000
        assert settings.debug is True

    @pytest.mark.parametrize("falsy", ["false", "0", "no", "OFF"])
    def test_bool_false(self, falsy: str) -> None:
        assert EnvSettingsLoader({"APP_DEBUG": falsy}).load(AppSettings).debug is False

    def test_bad_bool_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"APP_DEBUG": "maybe"}).load(AppSettings)

    def test_bad_int_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"APP_PORT": "eighty"}).load(AppSettings)

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "example.com")
        assert EnvSettingsLoader().load(AppSettings).host == "example.com"

    def test_missing_required(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(SalesforceSettings)
        assert exc_info.value.setting_name == "SALESFORCE_USERNAME"


class TestDotenvSettingsLoader:
    def test_loads_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CSV_EXPORT_DOWNLOAD_URL_PREFIX", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("CSV_EXPORT_DOWNLOAD_URL_PREFIX=/files/\n")
        settings = DotenvSettingsLoader(str(env_file)).load(ExportSettings)
        assert settings.download_url_prefix == "/files/"
        monkeypatch.delenv("CSV_EXPORT_DOWNLOAD_URL_PREFIX", raising=False)


# ---------------------------------------------------------------------------
# SettingsFactory
# ---------------------------------------------------------------------------


class TestSettingsFactory:
    def test_overrides_win(self) -> None:
        settings = SettingsFactory.create(
            AppSettings, [EnvSettingsLoader({"APP_PORT": "1"})], overrides={"port": 2}
        )
        assert settings.port == 2

    def test_overrides_fill_required_fields(self) -> None:
        settings = SettingsFactory.create(
            SalesforceSettings,
            [EnvSettingsLoader({})],
            overrides={"username": "a@b.co", "password": "p", "security_token": "t"},
        )
        assert settings.domain == "login"

    def test_missing_required_after_merge(self) -> None:
        with pytest.raises(MissingRequiredSettingError, match="SALESFORCE_USERNAME"):
            SettingsFactory.create(SalesforceSettings, [EnvSettingsLoader({})])

    def test_invalid_value_propagates(self) -> None:
        with pytest.raises(ConfigError):
            SettingsFactory.create(ExportSettings, [EnvSettingsLoader({"CSV_EXPORT_LOG_LEVEL": "LOUD"})])

    def test_invalid_value_is_not_echoed(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader({"CSV_EXPORT_ROLLBACK_ON_FAILURE": "s3cr3t"}).load(ExportSettings)
        err = exc_info.value
        assert err.setting_name == "CSV_EXPORT_ROLLBACK_ON_FAILURE"
        assert err.detail == {"setting": "CSV_EXPORT_ROLLBACK_ON_FAILURE", "reason": "expected a boolean"}
        assert "s3cr3t" not in str(err)


# ---------------------------------------------------------------------------
# ExportSettings
# ---------------------------------------------------------------------------


class TestExportSettings:
    def test_defaults(self) -> None:
        settings = ExportSettings()
        assert settings.download_url_prefix == "/sfc/servlet.shepherd/document/download/"
        assert settings.rollback_on_failure is True
        assert settings.log_level_number == 20

    def test_from_env(self) -> None:
        settings = EnvSettingsLoader(
            {"CSV_EXPORT_ROLLBACK_ON_FAILURE": "false", "CSV_EXPORT_LOG_LEVEL": "debug"}
        ).load(ExportSettings)
        assert settings.rollback_on_failure is False
        assert settings.log_level_number == 10

    def test_blank_content_type_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            ExportSettings(content_type=" ")
