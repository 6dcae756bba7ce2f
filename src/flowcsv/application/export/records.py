"""Application export – record adapters exposing field lookup by name.

Every record handed to the exporter is wrapped in a :class:`FieldSource`.
Lookups never raise: they return ``Ok(Some(value))`` for a present value,
``Ok(Nothing())`` for an absent or null value, and ``Err(FieldAccessError)``
when the record's shape has no such field.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from flowcsv.kernel.errors import FieldAccessError
from flowcsv.kernel.types import Err, Nothing, Ok, Option, Result, from_nullable

__all__ = [
    "AttributeRecord",
    "FieldLookup",
    "FieldSource",
    "MappingRecord",
    "SObjectRecord",
    "as_field_source",
]

type FieldLookup = Result[Option[Any], FieldAccessError]

_ATTRIBUTES_KEY = "attributes"


@runtime_checkable
class FieldSource(Protocol):
    """Port: a record whose fields can be read by name."""

    def get(self, field_name: str) -> FieldLookup: ...


class MappingRecord:
    """A plain ``dict`` row; any missing key reads as absent."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any]) -> None:
        self._data = data

    def get(self, field_name: str) -> FieldLookup:
        return Ok(from_nullable(self._data.get(field_name)))

    def __repr__(self) -> str:
        return f"MappingRecord({dict(self._data)!r})"


class SObjectRecord:
    """A Salesforce-style record with a fixed shape.

    Field names are matched case-insensitively, as the platform does.  A name
    outside the record's shape is a lookup error; a name inside the shape whose
    value is null reads as absent.  Dotted names (``Account.Owner.Name``) walk
    parent relationships; a null relationship reads as absent.
    """

    __slots__ = ("_fields", "_index", "sobject_type")

    def __init__(
        self,
        fields: Mapping[str, Any],
        sobject_type: str | None = None,
        shape: frozenset[str] | None = None,
    ) -> None:
        self._fields = {k: v for k, v in fields.items() if k != _ATTRIBUTES_KEY}
        self.sobject_type = sobject_type
        names = shape if shape is not None else frozenset(self._fields)
        self._index = {name.lower(): name for name in names}

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "SObjectRecord":
        """Build from a REST/SOQL record (``{"attributes": {...}, "Name": ...}``)."""
        attributes = payload.get(_ATTRIBUTES_KEY) or {}
        return cls(payload, sobject_type=attributes.get("type"))

    @property
    def shape(self) -> frozenset[str]:
        return frozenset(self._index.values())

    def get(self, field_name: str) -> FieldLookup:
        head, _, rest = field_name.partition(".")
        key = self._index.get(head.lower())
        if key is None:
            return Err(FieldAccessError(field_name, record_type=self.sobject_type))
        value = self._fields.get(key)
        if not rest:
            return Ok(from_nullable(value))
        if value is None:
            return Ok(Nothing())
        if isinstance(value, SObjectRecord):
            parent = value
        elif isinstance(value, Mapping):
            parent = SObjectRecord.from_api(value)
        else:
            return Err(
                FieldAccessError(
                    field_name,
                    f"'{key}' is not a relationship",
                    record_type=self.sobject_type,
                )
            )
        result = parent.get(rest)
        if isinstance(result, Err):
            return Err(FieldAccessError(field_name, record_type=self.sobject_type, cause=result.error))
        return result

    def __repr__(self) -> str:
        return f"SObjectRecord(type={self.sobject_type!r}, fields={self._fields!r})"


class AttributeRecord:
    """Any Python object; fields are attributes.

    A missing attribute is a lookup error, a ``None`` attribute is absent.
    """

    __slots__ = ("_obj",)

    def __init__(self, obj: Any) -> None:
        self._obj = obj

    def get(self, field_name: str) -> FieldLookup:
        try:
            value = getattr(self._obj, field_name)
        except AttributeError as exc:
            return Err(
                FieldAccessError(field_name, record_type=type(self._obj).__name__, cause=exc)
            )
        return Ok(from_nullable(value))

    def __repr__(self) -> str:
        return f"AttributeRecord({self._obj!r})"


def as_field_source(record: Any) -> FieldSource:
    """Wrap *record* in the adapter matching its shape."""
    if isinstance(record, (MappingRecord, SObjectRecord, AttributeRecord)):
        return record
    if isinstance(record, Mapping):
        if _ATTRIBUTES_KEY in record:
            return SObjectRecord.from_api(record)
        return MappingRecord(record)
    if isinstance(record, FieldSource):
        return record
    return AttributeRecord(record)
