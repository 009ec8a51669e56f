"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_PRICE = "invalid_price"
    INVALID_ORDER = "invalid_order"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    CUSTOMER_NOT_FOUND = "customer_not_found"
    PRODUCT_NOT_FOUND = "product_not_found"

    # Conflict errors
    CUSTOMER_ALREADY_EXISTS = "customer_already_exists"
    PRODUCT_ALREADY_EXISTS = "product_already_exists"
    ORDER_ALREADY_EXISTS = "order_already_exists"
