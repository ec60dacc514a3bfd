"""Shared service helpers and dict -> model mappers."""

from decimal import Decimal, InvalidOperation
from typing import Optional

from car_rental.models.car import Car, CarCategory
from car_rental.models.customer import Customer


# -------- numeric helpers --------
def to_decimal(value) -> Decimal:
    """Convert int/float/str to Decimal through its text form (37.6 -> Decimal('37.6'))."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_decimal_safe(value) -> Optional[Decimal]:
    """Safely convert to Decimal; return None if invalid."""
    try:
        return to_decimal(value)
    except (TypeError, ValueError, InvalidOperation):
        return None


def _first(d: dict, *keys, default=None):
    """Value of the first key present in ``d`` (camelCase and snake_case records)."""
    for k in keys:
        if k in d:
            return d[k]
    return default


# -------- dict -> rich model mappers --------
def car_from_dict(d: Optional[dict]) -> Optional[Car]:
    """Map a stored car dict to a Car."""
    if not d:
        return None
    return Car(
        id=str(d.get("id")),
        name=d.get("name") or "",
        release_year=int(_first(d, "releaseYear", "release_year", default=0) or 0),
        available=bool(d.get("available", True)),
        gas_available=bool(_first(d, "gasAvailable", "gas_available", default=True)),
    )


def category_from_dict(d: Optional[dict]) -> Optional[CarCategory]:
    """Map a stored car category dict to a CarCategory."""
    if not d:
        return None
    price = to_decimal_safe(d.get("price"))
    if price is None or not price.is_finite() or price < 0:
        raise ValueError(f"car category {d.get('id')!r} has invalid price {d.get('price')!r}")
    return CarCategory(
        id=str(d.get("id")),
        name=d.get("name") or "",
        car_ids=tuple(str(i) for i in (_first(d, "carIds", "car_ids", default=()) or ())),
        price=price,
    )


def customer_from_dict(d: Optional[dict]) -> Optional[Customer]:
    """Map a stored customer dict to a Customer."""
    if not d:
        return None
    age = d.get("age")
    if isinstance(age, bool) or not isinstance(age, int) or age < 0:
        raise ValueError(f"customer {d.get('id')!r} has invalid age {age!r}")
    return Customer(
        id=str(d.get("id")),
        name=d.get("name") or "",
        age=age,
    )
