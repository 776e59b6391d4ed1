"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   └── AbortedError
    └── InfrastructureError  (infrastructure.py)
        ├── TimeoutError
        └── ExternalServiceError
"""

from datadog_util.kernel.errors.application import AbortedError, ApplicationError
from datadog_util.kernel.errors.base import BaseError
from datadog_util.kernel.errors.infrastructure import (
    ExternalServiceError,
    InfrastructureError,
    TimeoutError,
)

__all__ = [
    "AbortedError",
    "ApplicationError",
    "BaseError",
    "ExternalServiceError",
    "InfrastructureError",
    "TimeoutError",
]
