"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from flowcsv.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ExportValidationError,
    ExternalServiceError,
    FieldAccessError,
    InfrastructureError,
    ValidationError,
)


# ---------------------------------------------------------------------------
# BaseError
# ---------------------------------------------------------------------------


class TestBaseError:
    def test_default_code(self) -> None:
        err = BaseError("boom")
        assert err.code == "base_error"
        assert err.message == "boom"
        assert err.detail == {}

    def test_str_is_json(self) -> None:
        err = BaseError("boom", code="custom", detail={"k": 1})
        payload = json.loads(str(err))
        assert payload == {"code": "custom", "message": "boom", "detail": {"k": 1}}

    def test_cause_is_chained(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrapped", cause=cause)
        assert err.__cause__ is cause
        assert "RuntimeError" in err.to_dict()["cause"]

    def test_repr(self) -> None:
        assert repr(DomainError("x")) == "DomainError(code='domain_error', message='x')"


# ---------------------------------------------------------------------------
# ExportValidationError
# ---------------------------------------------------------------------------


class TestExportValidationError:
    def test_is_validation_error(self) -> None:
        err = ExportValidationError("No field names provided.", field="field_names", index=3)
        assert isinstance(err, ValidationError)
        assert isinstance(err, DomainError)
        assert err.field == "field_names"
        assert err.index == 3

    def test_message_is_kept_verbatim(self) -> None:
        err = ExportValidationError("File name cannot be blank.", field="file_name")
        assert err.message == "File name cannot be blank."
        assert err.args == ("File name cannot be blank.",)

    def test_to_dict_lists_field_error(self) -> None:
        err = ExportValidationError("No records provided for CSV generation.", field="records", index=1)
        payload = err.to_dict()
        assert payload["code"] == "export_validation_error"
        assert payload["errors"] == [
            {"field": "records", "index": 1, "message": "No records provided for CSV generation."}
        ]

    def test_can_be_raised_and_caught_as_base_error(self) -> None:
        with pytest.raises(BaseError):
            raise ExportValidationError("x", field="records")


# ---------------------------------------------------------------------------
# FieldAccessError / ExternalServiceError
# ---------------------------------------------------------------------------


class TestFieldAccessError:
    def test_default_message_includes_record_type(self) -> None:
        err = FieldAccessError("Phone", record_type="Account")
        assert err.message == "Invalid field 'Account.Phone'"
        assert err.field == "Phone"
        assert err.record_type == "Account"

    def test_default_message_without_type(self) -> None:
        assert FieldAccessError("Phone").message == "Invalid field 'Phone'"


class TestExternalServiceError:
    def test_hierarchy_and_fields(self) -> None:
        err = ExternalServiceError("salesforce", status_code=503)
        assert isinstance(err, InfrastructureError)
        assert not isinstance(err, ApplicationError)
        assert err.service == "salesforce"
        assert err.status_code == 503
        assert err.message == "External service 'salesforce' error"
