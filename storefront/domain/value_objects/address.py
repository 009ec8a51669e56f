"""Immutable postal Address value object.

Addresses have no identity: two addresses with the same street, number,
zip code, and city are the same address. Changing a customer's address
means replacing the value object, never mutating it.

Usage:
    from storefront.domain.value_objects import Address

    address = Address(street="Street 1", number=1, zip_code="Zipcode 1", city="City 1")
    str(address)  # "Street 1, 1, Zipcode 1 City 1"
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class Address:
    """Postal address validated at construction.

    Attributes:
        street: Street name.
        number: Street number (positive).
        zip_code: Postal code.
        city: City name.

    Raises:
        ValueError: If any field is empty or number is not positive.
    """

    street: str
    number: int
    zip_code: str
    city: str

    def __post_init__(self) -> None:
        """Validate address after initialization.

        Raises:
            ValueError: If any field is empty or number is not positive.
        """
        if not self.street or not self.street.strip():
            raise ValueError("Street is required")

        if isinstance(self.number, bool) or not isinstance(self.number, int):
            raise ValueError("Number must be an integer")

        if self.number <= 0:
            raise ValueError("Number must be greater than zero")

        if not self.zip_code or not self.zip_code.strip():
            raise ValueError("Zip code is required")

        if not self.city or not self.city.strip():
            raise ValueError("City is required")

    def __str__(self) -> str:
        """Single-line postal representation."""
        return f"{self.street}, {self.number}, {self.zip_code} {self.city}"
