from dataclasses import dataclass

from .car import Car
from .customer import Customer


@dataclass(frozen=True)
class Transaction:
    """Result of a completed rental: who rents, which car, until when, for how much."""
    customer: Customer
    car: Car
    due_date: str  # localized long-form date
    amount: str  # localized currency text
