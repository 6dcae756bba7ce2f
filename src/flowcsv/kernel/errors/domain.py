"""Domain errors — export input rules and record field access."""

from __future__ import annotations

from typing import Any

from flowcsv.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class ExportValidationError(ValidationError):
    """An export request in a batch was rejected before any file was written.

    ``field`` names the offending input (``records``, ``field_names`` or
    ``file_name``); ``index`` is the request's position in the batch.
    """

    default_code = "export_validation_error"

    def __init__(self, message: str, *, field: str, index: int = 0, **kwargs: Any) -> None:
        kwargs.setdefault("errors", [{"field": field, "index": index, "message": message}])
        super().__init__(message, **kwargs)
        self.field = field
        self.index = index


class FieldAccessError(DomainError):
    """A record could not produce a value for the requested field."""

    default_code = "field_access_error"

    def __init__(
        self,
        field: str,
        message: str | None = None,
        *,
        record_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        target = f"{record_type}.{field}" if record_type else field
        super().__init__(message or f"Invalid field '{target}'", **kwargs)
        self.field = field
        self.record_type = record_type


__all__ = [
    "DomainError",
    "ExportValidationError",
    "FieldAccessError",
    "ValidationError",
]
