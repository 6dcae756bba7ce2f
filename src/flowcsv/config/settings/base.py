"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Dataclass read from ``<PREFIX>_<FIELD>`` variables.

    Fields without a default are required.  ``_validate`` runs after
    construction, whichever loader built the instance.
    """

    _prefix: ClassVar[str] = ""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """``env_key("log_level")`` is ``CSV_EXPORT_LOG_LEVEL`` for ``ExportSettings``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    @classmethod
    def required_fields(cls) -> list[str]:
        return [
            f.name
            for f in dataclasses.fields(cls)
            if f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
        ]

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        pass


__all__ = ["Settings"]
