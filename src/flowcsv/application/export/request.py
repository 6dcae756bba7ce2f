"""Application export – ExportRequest, ExportResponse and batch validation."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from flowcsv.application.export.records import FieldSource, as_field_source
from flowcsv.kernel.errors import ExportValidationError
from flowcsv.kernel.types import Err, Ok, Result

__all__ = [
    "CSV_SUFFIX",
    "ExportRequest",
    "ExportResponse",
    "ValidatedExport",
    "normalize_file_name",
    "validate_batch",
    "validate_request",
]

CSV_SUFFIX = ".csv"

NO_RECORDS = "No records provided for CSV generation."
NO_FIELD_NAMES = "No field names provided."
BLANK_FILE_NAME = "File name cannot be blank."


@dataclass
class ExportRequest:
    """One flow input: records to serialise, the columns to pull and where to file it."""

    records: Sequence[Any] | None
    field_names: Sequence[str] | None
    file_name: str | None
    record_id: str | None = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ExportRequest":
        """Accept flow-style camelCase keys as well as snake_case ones."""
        return cls(
            records=payload.get("records"),
            field_names=payload.get("fieldNames", payload.get("field_names")),
            file_name=payload.get("fileName", payload.get("file_name")),
            record_id=payload.get("recordId", payload.get("record_id")),
        )


@dataclass(frozen=True)
class ExportResponse:
    """One flow output, parallel to the request that produced it."""

    artifact_id: str
    download_url: str

    def to_dict(self) -> dict[str, str]:
        return {"artifactId": self.artifact_id, "downloadUrl": self.download_url}


@dataclass(frozen=True)
class ValidatedExport:
    """An :class:`ExportRequest` that passed validation, with its name normalised."""

    records: tuple[FieldSource, ...]
    field_names: tuple[str, ...]
    file_name: str
    record_id: str | None = None
    index: int = field(default=0, compare=False)


def normalize_file_name(name: str) -> str:
    """Append ``.csv`` unless *name* already ends with it (case-sensitive)."""
    return name if name.endswith(CSV_SUFFIX) else name + CSV_SUFFIX


def _text(value: Any) -> str | None:
    return None if value is None else str(value)


def _is_blank(value: Any) -> bool:
    text = _text(value)
    return text is None or not text.strip()


def _as_sequence(value: Any) -> Sequence[Any]:
    """A lone string or record from a flow counts as a one-item collection."""
    if value is None:
        return ()
    if isinstance(value, (str, Mapping)):
        return (value,)
    return value


def validate_request(
    request: ExportRequest, index: int = 0
) -> Result[ValidatedExport, ExportValidationError]:
    records = _as_sequence(request.records)
    field_names = _as_sequence(request.field_names)
    if not records:
        return Err(ExportValidationError(NO_RECORDS, field="records", index=index))
    if not field_names:
        return Err(ExportValidationError(NO_FIELD_NAMES, field="field_names", index=index))
    if _is_blank(request.file_name):
        return Err(ExportValidationError(BLANK_FILE_NAME, field="file_name", index=index))
    return Ok(
        ValidatedExport(
            records=tuple(as_field_source(r) for r in records),
            field_names=tuple(str(name) for name in field_names),
            file_name=normalize_file_name(str(request.file_name)),
            record_id=None if _is_blank(request.record_id) else _text(request.record_id),
            index=index,
        )
    )


def validate_batch(
    requests: Sequence[ExportRequest],
) -> Result[list[ValidatedExport], ExportValidationError]:
    """Validate every request in order; stop at the first failure."""
    validated: list[ValidatedExport] = []
    for index, request in enumerate(requests):
        result = validate_request(request, index)
        if isinstance(result, Err):
            return result
        validated.append(result.value)
    return Ok(validated)
