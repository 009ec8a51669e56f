"""Shared domain type helpers.

Monetary amounts are Decimal throughout the domain. Floats introduce
rounding errors, so callers passing int/float are converted through str.
"""

from decimal import Decimal, InvalidOperation

CENTS = Decimal("0.01")


def to_amount(value: Decimal | int | float | str, field_name: str = "amount") -> Decimal:
    """Convert a numeric value to a finite Decimal.

    Args:
        value: Number to convert.
        field_name: Field name used in error messages.

    Returns:
        Decimal value.

    Raises:
        ValueError: If value is not a number, NaN, or infinite.
    """
    if isinstance(value, bool):
        raise ValueError(f"{field_name.capitalize()} must be a valid number")

    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value))
        except (InvalidOperation, TypeError) as e:
            raise ValueError(f"{field_name.capitalize()} must be a valid number") from e

    if amount.is_nan() or amount.is_infinite():
        raise ValueError(f"{field_name.capitalize()} cannot be NaN or Infinite")

    return amount


def to_price(value: Decimal | int | float | str, field_name: str = "price") -> Decimal:
    """Convert to a non-negative Decimal with at most two decimal places.

    Prices are stored as NUMERIC(12, 2); sub-cent amounts are rejected
    rather than rounded.

    Args:
        value: Number to convert.
        field_name: Field name used in error messages.

    Returns:
        Decimal value.

    Raises:
        ValueError: If value is not a finite number, is negative, or has
            more than two decimal places.
    """
    amount = to_amount(value, field_name)
    label = field_name.capitalize()

    if amount < 0:
        raise ValueError(f"{label} must be greater than or equal to zero")

    try:
        in_cents = amount.quantize(CENTS)
    except InvalidOperation as e:
        raise ValueError(f"{label} is too large") from e

    if in_cents != amount:
        raise ValueError(f"{label} cannot have more than 2 decimal places")

    return amount
