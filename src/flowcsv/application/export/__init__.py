"""Application export – CSV export action and its building blocks."""
from flowcsv.application.export.records import (
    AttributeRecord,
    FieldSource,
    MappingRecord,
    SObjectRecord,
    as_field_source,
)
from flowcsv.application.export.request import (
    ExportRequest,
    ExportResponse,
    ValidatedExport,
    normalize_file_name,
    validate_batch,
    validate_request,
)
from flowcsv.application.export.csv_export import ERROR_SENTINEL, CsvDocumentBuilder, format_value
from flowcsv.application.export.events import CsvExportedEvent
from flowcsv.application.export.settings import ExportSettings
from flowcsv.application.export.export_service import CsvExportAction

__all__ = [
    "ERROR_SENTINEL",
    "AttributeRecord",
    "CsvDocumentBuilder",
    "CsvExportAction",
    "CsvExportedEvent",
    "ExportRequest",
    "ExportResponse",
    "ExportSettings",
    "FieldSource",
    "MappingRecord",
    "SObjectRecord",
    "ValidatedExport",
    "as_field_source",
    "format_value",
    "normalize_file_name",
    "validate_batch",
    "validate_request",
]
