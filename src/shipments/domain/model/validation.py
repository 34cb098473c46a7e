"""Field-level validation rules for shipments.

The date check is a format check: it does not know how many days each
month has, so ``2024-02-31`` is accepted. Existing data files rely on
that, so it is kept as is.
"""

from __future__ import annotations

from shipments.domain.exceptions import ValidationError
from shipments.domain.model.shipment import Shipment

MIN_CATEGORY = 0
MAX_CATEGORY = 9
DATE_LENGTH = 10

_SEPARATOR_POSITIONS = (4, 7)
_DIGITS = frozenset("0123456789")


def date_problem(value: str) -> str | None:
    """Return why ``value`` is not a ``YYYY-MM-DD`` date, or None if it is."""
    if len(value) != DATE_LENGTH:
        return "length"
    for pos in _SEPARATOR_POSITIONS:
        if value[pos] != "-":
            return "separator"
    for pos, char in enumerate(value):
        if pos in _SEPARATOR_POSITIONS:
            continue
        if char not in _DIGITS:
            return "digit"
    if not 1 <= int(value[5:7]) <= 12:
        return "month"
    if not 1 <= int(value[8:10]) <= 31:
        return "day"
    return None


def is_valid_date(value: str) -> bool:
    return date_problem(value) is None


def is_valid_category(value: int) -> bool:
    return MIN_CATEGORY <= value <= MAX_CATEGORY


def is_valid_quantity(value: int) -> bool:
    return value > 0


def validate_shipment(
    category: int,
    quantity: int,
    expiry_date: str,
    supplier_id: int,
) -> Shipment:
    """Build a Shipment, raising ValidationError on the first bad field."""
    if not is_valid_category(category):
        raise ValidationError(
            f"Category must be between {MIN_CATEGORY} and {MAX_CATEGORY}, got {category}"
        )
    if not is_valid_quantity(quantity):
        raise ValidationError(f"Quantity must be positive, got {quantity}")
    problem = date_problem(expiry_date)
    if problem is not None:
        raise ValidationError(
            f"Invalid expiry date {expiry_date!r} ({problem}); expected YYYY-MM-DD"
        )
    return Shipment(
        category=category,
        quantity=quantity,
        expiry_date=expiry_date,
        supplier_id=supplier_id,
    )
