"""Observability – structured logging helpers."""
from flowcsv.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from flowcsv.observability.logging.factory import JsonLoggerFactory
from flowcsv.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
