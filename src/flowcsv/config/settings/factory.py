"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from flowcsv.config.settings.base import Settings
from flowcsv.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from flowcsv.config.validation.errors import (
    ConfigError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)


class SettingsFactory:
    """Merge loader output with explicit overrides into one settings object.

    Loaders are applied in order and later loaders win on overlapping fields.
    *overrides* take the highest priority.  A loader that fails because a
    required value is missing is skipped so that later sources (or overrides)
    can still supply it; any other configuration error propagates.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Parameters
        ----------
        settings_cls:
            The :class:`~flowcsv.config.settings.base.Settings` subclass to
            construct.
        loaders:
            Ordered loaders; defaults to a single :class:`EnvSettingsLoader`.
        overrides:
            Explicit key-value pairs applied after all loaders.

        Raises
        ------
        MissingRequiredSettingError
            When a required field is absent after all sources are merged.
        ConfigError
            On any other construction failure.
        """
        merged: dict[str, Any] = {}

        for loader in loaders if loaders is not None else [EnvSettingsLoader()]:
            try:
                instance = loader.load(settings_cls)
            except MissingRequiredSettingError:
                continue
            for field in dataclasses.fields(instance):  # type: ignore[arg-type]
                merged[field.name] = getattr(instance, field.name)

        if overrides:
            merged.update(overrides)

        for name in settings_cls.required_fields():
            if name not in merged:
                raise MissingRequiredSettingError(settings_cls.env_key(name))

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}") from exc


__all__ = ["SettingsFactory"]
