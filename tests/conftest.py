import sys, pathlib

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from datetime import date
from decimal import Decimal

import pytest

from car_rental.models.car import Car, CarCategory
from car_rental.models.customer import Customer
from car_rental.services.car_service import CarService
from car_rental.utils.clock import FixedClock
from car_rental.utils.formatters import CurrencyFormatter, DateFormatter
from car_rental.utils.random_source import FixedRandomSource


class FakeCarRepository:
    """In-memory stand-in for the JSON repository; records every lookup."""

    def __init__(self, cars=()):
        self.cars = {c.id: c for c in cars}
        self.calls = []

    def find(self, item_id=None):
        self.calls.append(item_id)
        if item_id is None:
            return list(self.cars.values())
        return self.cars.get(item_id)


@pytest.fixture
def valid_car():
    return Car(
        id="2d7f6b2c-8d3e-4b61-9c3a-5e0f1a2b3c4d",
        name="Ford Ka",
        release_year=2020,
        available=True,
        gas_available=True,
    )


@pytest.fixture
def valid_car_category(valid_car):
    return CarCategory(
        id="7a1e4c9b-3d2f-4e8a-b6c5-9f0e1d2c3b4a",
        name="Hatch",
        car_ids=(valid_car.id, "b1e2c3d4-0000-4000-8000-000000000002", "b1e2c3d4-0000-4000-8000-000000000003"),
        price=Decimal("37.6"),
    )


@pytest.fixture
def valid_customer():
    return Customer(id="c0ffee00-1111-4222-8333-444455556666", name="Erick", age=20)


@pytest.fixture
def fake_repository(valid_car):
    return FakeCarRepository([valid_car])


@pytest.fixture
def car_service(fake_repository):
    """
    Service with deterministic collaborators:
    clock fixed at 2020-11-05 and the random draw pinned to index 0.
    """
    return CarService(
        car_repository=fake_repository,
        currency_formatter=CurrencyFormatter("pt_BR", "BRL"),
        date_formatter=DateFormatter("pt_BR"),
        clock=FixedClock(date(2020, 11, 5)),
        random_source=FixedRandomSource(0),
    )


def plain(text: str) -> str:
    """Babel separates symbol and amount with a non-breaking space."""
    return text.replace("\xa0", " ")
