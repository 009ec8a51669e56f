"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from storefront.core.enums import ErrorCode, Environment
"""

from storefront.core.enums.environment import Environment
from storefront.core.enums.error_code import ErrorCode
from storefront.core.enums.event_failure_policy import HandlerFailurePolicy

__all__ = ["ErrorCode", "Environment", "HandlerFailurePolicy"]
