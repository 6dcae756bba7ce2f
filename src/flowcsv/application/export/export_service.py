"""Application export – CsvExportAction, the batch entry point called by flows."""
from __future__ import annotations

from typing import Any, Mapping, Sequence

from flowcsv.application.export.csv_export import CsvDocumentBuilder
from flowcsv.application.export.events import CsvExportedEvent
from flowcsv.application.export.request import (
    ExportRequest,
    ExportResponse,
    ValidatedExport,
    validate_batch,
)
from flowcsv.application.export.settings import ExportSettings
from flowcsv.application.files import FileArtifact, FileStore, ShareType
from flowcsv.kernel.types import Err
from flowcsv.observability.logging import get_logger

__all__ = ["CsvExportAction"]

_log = get_logger(__name__)


class CsvExportAction:
    """Turns a batch of export requests into stored CSV files.

    The whole batch is validated before anything is written; the first invalid
    request raises :class:`~flowcsv.kernel.errors.ExportValidationError` and no
    file is stored.  Valid requests are then processed in order and answered
    with a parallel list of :class:`ExportResponse`.

    Storage errors propagate to the caller.  With
    ``settings.rollback_on_failure`` set, files already stored for earlier
    requests of the same batch are deleted first.
    """

    def __init__(
        self,
        store: FileStore,
        settings: ExportSettings | None = None,
        builder: CsvDocumentBuilder | None = None,
    ) -> None:
        self._store = store
        self._settings = settings or ExportSettings()
        self._builder = builder or CsvDocumentBuilder()
        self.events: list[CsvExportedEvent] = []

    def invoke(
        self, requests: Sequence[ExportRequest | Mapping[str, Any]]
    ) -> list[ExportResponse]:
        batch = [r if isinstance(r, ExportRequest) else ExportRequest.from_dict(r) for r in requests]
        _log.info("csv_export.batch_started", requests=len(batch))

        validated = validate_batch(batch)
        if isinstance(validated, Err):
            error = validated.error
            _log.warning(
                "csv_export.batch_rejected",
                index=error.index,
                field=error.field,
                reason=error.message,
            )
            raise error

        saved: list[str] = []
        events: list[CsvExportedEvent] = []
        responses: list[ExportResponse] = []
        try:
            for export in validated.value:
                responses.append(self._process(export, saved, events))
        except Exception:
            if self._settings.rollback_on_failure:
                self._rollback(saved)
            raise

        self.events.extend(events)
        _log.info("csv_export.batch_completed", files=len(responses))
        return responses

    def export_one(self, request: ExportRequest | Mapping[str, Any]) -> ExportResponse:
        return self.invoke([request])[0]

    def download_url(self, document_id: str) -> str:
        return self._settings.download_url_prefix + document_id

    def _process(
        self,
        export: ValidatedExport,
        saved: list[str],
        events: list[CsvExportedEvent],
    ) -> ExportResponse:
        document = self._builder.build(export.field_names, export.records)
        artifact = FileArtifact.csv(
            export.file_name,
            self._builder.encode(document),
            content_type=self._settings.content_type,
        )

        stored = self._store.save(artifact)
        saved.append(stored.document_id)
        _log.info(
            "csv_export.artifact_saved",
            index=export.index,
            document_id=stored.document_id,
            file_name=export.file_name,
            rows=len(export.records),
            size_bytes=artifact.size_bytes,
        )

        if export.record_id is not None:
            link_id = self._store.link(stored.document_id, export.record_id, ShareType.VIEWER)
            _log.info(
                "csv_export.artifact_linked",
                document_id=stored.document_id,
                linked_entity_id=export.record_id,
                link_id=link_id,
            )

        events.append(
            CsvExportedEvent(
                document_id=stored.document_id,
                version_id=stored.version_id,
                file_name=export.file_name,
                row_count=len(export.records),
                size_bytes=artifact.size_bytes,
                checksum_sha256=artifact.checksum_sha256,
                linked_entity_id=export.record_id,
            )
        )
        return ExportResponse(
            artifact_id=stored.document_id,
            download_url=self.download_url(stored.document_id),
        )

    def _rollback(self, document_ids: list[str]) -> None:
        for document_id in reversed(document_ids):
            try:
                self._store.delete(document_id)
            except Exception as exc:  # noqa: BLE001 – keep the original failure
                _log.error("csv_export.rollback_failed", document_id=document_id, error=repr(exc))
            else:
                _log.warning("csv_export.rollback", document_id=document_id)
