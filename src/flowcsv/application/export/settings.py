"""Application export – ExportSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from flowcsv.config.settings import Settings
from flowcsv.config.validation import InvalidSettingValueError

__all__ = ["DEFAULT_DOWNLOAD_URL_PREFIX", "ExportSettings"]

DEFAULT_DOWNLOAD_URL_PREFIX = "/sfc/servlet.shepherd/document/download/"

_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclasses.dataclass
class ExportSettings(Settings):
    """Settings for :class:`~flowcsv.application.export.CsvExportAction`.

    Read from ``CSV_EXPORT_*`` environment variables.
    """

    _prefix: ClassVar[str] = "CSV_EXPORT"

    download_url_prefix: str = DEFAULT_DOWNLOAD_URL_PREFIX
    rollback_on_failure: bool = True
    log_level: str = "INFO"
    content_type: str = "text/csv"

    def _validate(self) -> None:
        if self.log_level.upper() not in _LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(_LEVELS)}"
            )
        if not self.content_type.strip():
            raise InvalidSettingValueError("content_type", self.content_type, "must not be blank")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())
