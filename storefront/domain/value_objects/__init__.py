"""Value objects (immutable, compared by value)."""

from storefront.domain.value_objects.address import Address

__all__ = ["Address"]
