"""Common error classes used across the application layer.

Error Types:
- ValidationError: Entity or value object invariant violated
- NotFoundError: Resource not found
- ConflictError: Resource already exists

Usage:
    from storefront.core.errors import NotFoundError
    from storefront.core.enums import ErrorCode
    from storefront.core.result import Failure

    return Failure(error=NotFoundError(
        code=ErrorCode.CUSTOMER_NOT_FOUND,
        message="Customer not found",
        resource_type="Customer",
        resource_id=customer_id,
    ))
"""

from dataclasses import dataclass

from storefront.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (Customer, Product, Order).
        resource_id: ID of the resource that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate identity).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource in conflict.
        details: Additional context.
    """

    resource_type: str
