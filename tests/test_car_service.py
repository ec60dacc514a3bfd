"""
Car service tests: random selection, final price by age bracket, and the
full rent flow with a fixed clock.
"""

from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from car_rental.exceptions import (
    CarNotFoundError,
    InvalidRentalRequestError,
    NoMatchingTaxRuleError,
    RepositoryError,
)
from car_rental.models.tax import TaxRule, TaxTable
from car_rental.models.transaction import Transaction
from car_rental.services.car_service import CarService
from car_rental.utils.clock import FixedClock
from car_rental.utils.random_source import SystemRandomSource
from conftest import FakeCarRepository, plain


def test_random_position_within_bounds(fake_repository):
    """Every draw over many runs falls inside [0, len(data))."""
    service = CarService(fake_repository, random_source=SystemRandomSource(seed=42))
    data = [0, 1, 2, 3, 4]
    seen = set()
    for _ in range(500):
        result = service.get_random_position_from_array(data)
        assert 0 <= result < len(data)
        seen.add(result)
    # every position is reachable
    assert seen == set(range(len(data)))


def test_select_first_id_when_draw_is_zero(car_service, valid_car_category, monkeypatch):
    calls = []

    def fake_position(items):
        calls.append(items)
        return 0

    monkeypatch.setattr(car_service, "get_random_position_from_array", fake_position)

    result = car_service.select_random_car(valid_car_category)

    assert len(calls) == 1
    assert result == valid_car_category.car_ids[0]


def test_select_random_car_rejects_empty_pool(car_service, valid_car_category):
    empty = replace(valid_car_category, car_ids=())
    with pytest.raises(InvalidRentalRequestError):
        car_service.select_random_car(empty)


def test_get_available_car(car_service, fake_repository, valid_car, valid_car_category, monkeypatch):
    """The id picked from the category is resolved through the repository."""
    category = replace(valid_car_category, car_ids=(valid_car.id,))
    picks = []
    original = car_service.select_random_car

    def spy(cat):
        picks.append(cat)
        return original(cat)

    monkeypatch.setattr(car_service, "select_random_car", spy)

    result = car_service.get_available_car(category)

    assert len(picks) == 1
    assert fake_repository.calls == [valid_car.id]
    assert result == valid_car


def test_get_available_car_not_found(car_service, valid_car_category):
    category = replace(valid_car_category, car_ids=("does-not-exist",))
    with pytest.raises(CarNotFoundError) as exc:
        car_service.get_available_car(category)
    assert exc.value.car_id == "does-not-exist"


def test_calculate_final_price(car_service, valid_customer, valid_car_category, monkeypatch):
    """age 50, bracket 40-50 x1.3, 37.6/day for 5 days -> 244.40"""
    customer = replace(valid_customer, age=50)
    category = replace(valid_car_category, price=Decimal("37.6"))
    monkeypatch.setattr(car_service, "tax_table", TaxTable([TaxRule(40, 50, Decimal("1.3"))]))

    result = car_service.calculate_final_price(customer, category, 5)

    assert result == car_service.currency_format.format(Decimal("244.40"))
    assert plain(result) == "R$ 244,40"


def test_calculate_final_price_default_brackets(car_service, valid_customer, valid_car_category):
    # 26-30 -> 1.5 ; 37.6 * 1.5 * 2 = 112.80
    customer = replace(valid_customer, age=28)
    assert plain(car_service.calculate_final_price(customer, valid_car_category, 2)) == "R$ 112,80"


@pytest.mark.parametrize("age", [17, 101, 0])
def test_no_matching_tax_rule(car_service, valid_customer, valid_car_category, age):
    customer = replace(valid_customer, age=age)
    with pytest.raises(NoMatchingTaxRuleError) as exc:
        car_service.calculate_final_price(customer, valid_car_category, 5)
    assert exc.value.age == age


@pytest.mark.parametrize("days", [0, -3])
def test_non_positive_days_rejected(car_service, valid_customer, valid_car_category, days):
    with pytest.raises(InvalidRentalRequestError):
        car_service.calculate_final_price(valid_customer, valid_car_category, days)


def test_negative_age_rejected(car_service, valid_customer, valid_car_category):
    customer = replace(valid_customer, age=-1)
    with pytest.raises(InvalidRentalRequestError):
        car_service.calculate_final_price(customer, valid_car_category, 5)


def test_rent_returns_full_transaction(car_service, valid_car, valid_car_category, valid_customer):
    """
    Clock fixed at 2020-11-05, age 20 (x1.1), 37.6/day for 5 days:
    due on 10 Nov 2020 for 206.80.
    """
    category = replace(valid_car_category, price=Decimal("37.6"), car_ids=(valid_car.id,))

    result = car_service.rent(valid_customer, category, 5)

    expected = Transaction(
        customer=valid_customer,
        car=valid_car,
        due_date="10 de novembro de 2020",
        amount=car_service.currency_format.format(Decimal("206.8")),
    )
    assert result == expected
    assert plain(result.amount) == "R$ 206,80"


def test_rent_due_date_crosses_month(car_service, valid_car, valid_car_category, valid_customer, monkeypatch):
    monkeypatch.setattr(car_service, "clock", FixedClock(date(2020, 12, 30)))
    category = replace(valid_car_category, car_ids=(valid_car.id,))

    result = car_service.rent(valid_customer, category, 3)

    assert result.due_date == "2 de janeiro de 2021"


def test_rent_propagates_car_not_found(car_service, valid_car_category, valid_customer):
    category = replace(valid_car_category, car_ids=("missing",))
    with pytest.raises(CarNotFoundError):
        car_service.rent(valid_customer, category, 5)


def test_rent_propagates_repository_failure(car_service, valid_car_category, valid_customer, monkeypatch):
    """A failing data source aborts the rental without retrying."""
    repo = FakeCarRepository()

    def broken_find(item_id=None):
        repo.calls.append(item_id)
        raise RepositoryError("Error: data source unavailable")

    monkeypatch.setattr(repo, "find", broken_find)
    monkeypatch.setattr(car_service, "car_repository", repo)

    with pytest.raises(RepositoryError):
        car_service.rent(valid_customer, valid_car_category, 5)
    assert len(repo.calls) == 1


def test_rent_aborts_when_no_tax_rule(car_service, valid_car, valid_car_category, valid_customer):
    category = replace(valid_car_category, car_ids=(valid_car.id,))
    customer = replace(valid_customer, age=16)
    with pytest.raises(NoMatchingTaxRuleError):
        car_service.rent(customer, category, 5)


def test_missing_car_logged(car_service, valid_car_category, caplog):
    category = replace(valid_car_category, car_ids=("ghost",))
    with caplog.at_level("WARNING", logger="car_rental.services.car_service"):
        with pytest.raises(CarNotFoundError):
            car_service.get_available_car(category)
    assert "ghost" in caplog.text


def test_half_cent_rounds_up(car_service, valid_customer, valid_car_category):
    """22.15 * 1.1 = 24.365 is charged as 24,37, matching commercial rounding."""
    category = replace(valid_car_category, price=Decimal("22.15"))

    result = car_service.calculate_final_price(valid_customer, category, 1)

    assert plain(result) == "R$ 24,37"
