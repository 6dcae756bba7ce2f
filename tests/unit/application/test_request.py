"""Unit tests for ExportRequest validation and file name normalisation."""
from __future__ import annotations

import pytest

from flowcsv.application.export import (
    ExportRequest,
    ExportResponse,
    MappingRecord,
    normalize_file_name,
    validate_batch,
    validate_request,
)
from flowcsv.kernel.errors import ExportValidationError
from flowcsv.kernel.types import Err, Ok


def _request(**overrides) -> ExportRequest:
    base = dict(records=[{"Name": "Acme"}], field_names=["Name"], file_name="report", record_id=None)
    base.update(overrides)
    return ExportRequest(**base)


# ---------------------------------------------------------------------------
# normalize_file_name
# ---------------------------------------------------------------------------
class TestNormalizeFileName:
    def test_appends_suffix(self):
        assert normalize_file_name("report") == "report.csv"

    def test_keeps_existing_suffix(self):
        assert normalize_file_name("report.csv") == "report.csv"

    def test_suffix_check_is_case_sensitive(self):
        assert normalize_file_name("report.CSV") == "report.CSV.csv"

    def test_other_extension(self):
        assert normalize_file_name("report.txt") == "report.txt.csv"


# ---------------------------------------------------------------------------
# validate_request
# ---------------------------------------------------------------------------
class TestValidateRequest:
    @pytest.mark.parametrize("records", [None, []])
    def test_no_records(self, records):
        result = validate_request(_request(records=records))
        assert isinstance(result, Err)
        assert result.error.message == "No records provided for CSV generation."
        assert result.error.field == "records"

    @pytest.mark.parametrize("field_names", [None, []])
    def test_no_field_names(self, field_names):
        result = validate_request(_request(field_names=field_names))
        assert isinstance(result, Err)
        assert result.error.message == "No field names provided."

    @pytest.mark.parametrize("file_name", [None, "", "   ", "\t\n"])
    def test_blank_file_name(self, file_name):
        result = validate_request(_request(file_name=file_name))
        assert isinstance(result, Err)
        assert result.error.message == "File name cannot be blank."

    def test_records_checked_before_field_names(self):
        result = validate_request(_request(records=[], field_names=[], file_name=""))
        assert result.error.field == "records"

    def test_valid_request_is_normalised(self):
        result = validate_request(_request(record_id="001000000000001AAA"), index=4)
        assert isinstance(result, Ok)
        export = result.value
        assert export.file_name == "report.csv"
        assert export.field_names == ("Name",)
        assert export.record_id == "001000000000001AAA"
        assert export.index == 4
        assert isinstance(export.records[0], MappingRecord)

    @pytest.mark.parametrize("record_id", [None, "", "  "])
    def test_blank_record_id_means_no_link(self, record_id):
        assert validate_request(_request(record_id=record_id)).value.record_id is None

    def test_lone_field_name_string_is_one_column(self):
        export = validate_request(_request(field_names="Name")).value
        assert export.field_names == ("Name",)

    def test_non_string_field_names_are_stringified(self):
        export = validate_request(_request(field_names=["Name", 7])).value
        assert export.field_names == ("Name", "7")

    def test_lone_record_mapping_is_one_row(self):
        export = validate_request(_request(records={"Name": "Acme"})).value
        assert len(export.records) == 1
        assert export.records[0].get("Name").value.unwrap() == "Acme"

    def test_numeric_record_id_is_coerced(self):
        assert validate_request(_request(record_id=12345)).value.record_id == "12345"

    def test_numeric_file_name_is_coerced(self):
        assert validate_request(_request(file_name=2024)).value.file_name == "2024.csv"


# ---------------------------------------------------------------------------
# validate_batch
# ---------------------------------------------------------------------------
class TestValidateBatch:
    def test_all_valid_keeps_order(self):
        result = validate_batch([_request(file_name="a"), _request(file_name="b")])
        assert [e.file_name for e in result.value] == ["a.csv", "b.csv"]

    def test_stops_at_first_invalid(self):
        result = validate_batch(
            [_request(), _request(field_names=[]), _request(file_name="")]
        )
        assert isinstance(result, Err)
        assert isinstance(result.error, ExportValidationError)
        assert result.error.index == 1
        assert result.error.message == "No field names provided."

    def test_empty_batch(self):
        assert validate_batch([]).value == []


# ---------------------------------------------------------------------------
# ExportRequest / ExportResponse
# ---------------------------------------------------------------------------
class TestExportRequestFromDict:
    def test_camel_case_keys(self):
        req = ExportRequest.from_dict(
            {"records": [{"a": 1}], "fieldNames": ["a"], "fileName": "f", "recordId": "001"}
        )
        assert req.field_names == ["a"]
        assert req.file_name == "f"
        assert req.record_id == "001"

    def test_snake_case_keys(self):
        req = ExportRequest.from_dict({"records": [], "field_names": ["a"], "file_name": "f"})
        assert req.field_names == ["a"]
        assert req.record_id is None


class TestExportResponse:
    def test_to_dict(self):
        resp = ExportResponse(artifact_id="069x", download_url="/d/069x")
        assert resp.to_dict() == {"artifactId": "069x", "downloadUrl": "/d/069x"}
