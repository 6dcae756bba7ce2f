"""Application export – CsvExportedEvent."""
from __future__ import annotations

from dataclasses import dataclass

__all__ = ["CsvExportedEvent"]


@dataclass(frozen=True)
class CsvExportedEvent:
    """Emitted after a CSV file was stored (and linked, when requested)."""

    document_id: str
    version_id: str
    file_name: str
    row_count: int
    size_bytes: int
    checksum_sha256: str
    linked_entity_id: str | None = None
