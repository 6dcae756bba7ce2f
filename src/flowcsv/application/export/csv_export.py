"""Application export – CsvDocumentBuilder."""
from __future__ import annotations

import csv
import io
from datetime import date, datetime
from typing import Any, Iterable, Sequence

from flowcsv.application.export.records import FieldSource
from flowcsv.kernel.types import Err
from flowcsv.observability.logging import get_logger

__all__ = ["ERROR_SENTINEL", "CsvDocumentBuilder", "format_value"]

ERROR_SENTINEL = "ERROR"
DELIMITER = ","
LINE_TERMINATOR = "\n"

_log = get_logger(__name__)


def format_value(value: Any) -> str:
    """Render a present field value as text."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


class CsvDocumentBuilder:
    """Serialises records into a CSV document, one row per record.

    The header is the field names joined with commas.  Absent values become
    empty cells and values a record cannot produce become ``ERROR``.  Body
    rows go through :func:`csv.writer` with minimal quoting, so a cell holding
    the delimiter, a quote or a newline is quoted and a lone empty cell is
    written as ``""`` to keep its column.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def build(self, field_names: Sequence[str], records: Iterable[FieldSource]) -> str:
        buf = io.StringIO()
        buf.write(DELIMITER.join(field_names))
        buf.write(LINE_TERMINATOR)

        writer = csv.writer(
            buf,
            delimiter=DELIMITER,
            lineterminator=LINE_TERMINATOR,
            quoting=csv.QUOTE_MINIMAL,
        )
        for record in records:
            writer.writerow([self._cell(record, name) for name in field_names])
        return buf.getvalue()

    def encode(self, document: str) -> bytes:
        return document.encode(self._encoding)

    @staticmethod
    def _cell(record: FieldSource, field_name: str) -> str:
        result = record.get(field_name)
        if isinstance(result, Err):
            _log.debug(
                "csv_export.field_lookup_failed",
                field=field_name,
                error=result.error.message,
            )
            return ERROR_SENTINEL
        return result.value.map(format_value).unwrap_or("")
