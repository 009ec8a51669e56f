"""Base error returned (never raised) by storefront command handlers.

Entities raise ValueError when an invariant is broken; command handlers
translate that, and lookups that come back empty, into a DomainError
carried by Failure. ``code`` is the stable key callers branch on;
``message`` is the entity's own wording (e.g. "Price must be greater
than or equal to zero").

Usage:
    Failure(
        error=ValidationError(
            code=ErrorCode.INVALID_PRICE,
            message="Price cannot have more than 2 decimal places",
        )
    )
"""

from dataclasses import dataclass

from storefront.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Rejected storefront command.

    Attributes:
        code: ErrorCode (e.g. CUSTOMER_NOT_FOUND, INVALID_ORDER).
        message: Human-readable reason.
        details: Extra string context, if any.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
