from dataclasses import dataclass, field
from decimal import Decimal
from typing import Tuple


@dataclass(frozen=True)
class Car:
    """
    A rentable car as stored in the repository.
    Pricing only relies on its identity; the other fields are carried through
    to the transaction untouched.
    """
    id: str
    name: str = ""
    release_year: int = 0
    available: bool = True
    gas_available: bool = True


@dataclass(frozen=True)
class CarCategory:
    """
    A pool of candidate cars sharing one base daily rate.
    """
    id: str
    name: str = ""
    car_ids: Tuple[str, ...] = field(default_factory=tuple)
    price: Decimal = Decimal("0")  # base rate per day
