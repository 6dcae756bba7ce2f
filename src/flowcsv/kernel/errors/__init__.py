"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError            (domain.py)
    │   ├── ValidationError
    │   │   └── ExportValidationError
    │   └── FieldAccessError
    ├── ApplicationError       (application.py)
    └── InfrastructureError    (infrastructure.py)
        └── ExternalServiceError
"""

from flowcsv.kernel.errors.application import ApplicationError
from flowcsv.kernel.errors.base import BaseError
from flowcsv.kernel.errors.domain import (
    DomainError,
    ExportValidationError,
    FieldAccessError,
    ValidationError,
)
from flowcsv.kernel.errors.infrastructure import (
    ExternalServiceError,
    InfrastructureError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ExportValidationError",
    "ExternalServiceError",
    "FieldAccessError",
    "InfrastructureError",
    "ValidationError",
]
