"""Core shared kernel.

Foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error classes for application-level error handling
- Settings and enums

The core module has NO dependencies on other application layers.
"""

from storefront.core.enums import ErrorCode
from storefront.core.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from storefront.core.result import Failure, Result, Success

__all__ = [
    "ConflictError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
    "ValidationError",
]
