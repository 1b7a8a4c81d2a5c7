"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                  (domain.py)
    │   ├── ValidationError
    │   └── InvalidDnError
    ├── ApplicationError             (application.py)
    │   └── PartialResolutionError
    └── InfrastructureError          (infrastructure.py)
        └── DirectoryError
            ├── DirectoryConnectionError
            ├── DirectoryTimeoutError
            └── IncorrectResultSizeError
"""

from accessctl.kernel.errors.application import ApplicationError, PartialResolutionError
from accessctl.kernel.errors.base import BaseError
from accessctl.kernel.errors.domain import DomainError, InvalidDnError, ValidationError
from accessctl.kernel.errors.infrastructure import (
    DirectoryConnectionError,
    DirectoryError,
    DirectoryTimeoutError,
    IncorrectResultSizeError,
    InfrastructureError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DirectoryConnectionError",
    "DirectoryError",
    "DirectoryTimeoutError",
    "DomainError",
    "IncorrectResultSizeError",
    "InfrastructureError",
    "InvalidDnError",
    "PartialResolutionError",
    "ValidationError",
]
