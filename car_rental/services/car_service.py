"""Car selection and rental pricing."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional, Sequence

from car_rental.exceptions import CarNotFoundError, InvalidRentalRequestError
from car_rental.models.car import Car, CarCategory
from car_rental.models.customer import Customer
from car_rental.models.repository import Repository
from car_rental.models.tax import TaxTable, default_tax_table
from car_rental.models.transaction import Transaction
from car_rental.services.common import to_decimal
from car_rental.utils.clock import Clock, SystemClock
from car_rental.utils.formatters import CurrencyFormatter, DateFormatter
from car_rental.utils.random_source import RandomSource, SystemRandomSource

logger = logging.getLogger(__name__)


class CarService:
    """
    Pick a car from a category, price the rental by customer age and build
    the resulting transaction.

    Every collaborator is injected; nothing is changed after construction,
    so one instance can serve interleaved calls.
    """

    def __init__(
            self,
            car_repository: Repository[Car],
            tax_table: Optional[TaxTable] = None,
            currency_formatter: Optional[CurrencyFormatter] = None,
            date_formatter: Optional[DateFormatter] = None,
            clock: Optional[Clock] = None,
            random_source: Optional[RandomSource] = None,
    ):
        self.car_repository = car_repository
        self.tax_table = tax_table if tax_table is not None else default_tax_table()
        self.currency_format = currency_formatter or CurrencyFormatter()
        self.date_format = date_formatter or DateFormatter()
        self.clock = clock or SystemClock()
        self.random_source = random_source or SystemRandomSource()

    # -------- selection --------
    def get_random_position_from_array(self, items: Sequence) -> int:
        """Uniform index in [0, len(items))."""
        return self.random_source.index(len(items))

    def select_random_car(self, category: CarCategory) -> str:
        """Return one id drawn from the category's pool; draws are independent."""
        if not category.car_ids:
            raise InvalidRentalRequestError(
                f"Error: car category {category.id!r} has no cars"
            )
        index = self.get_random_position_from_array(category.car_ids)
        car_id = category.car_ids[index]
        logger.debug("Picked car %s (index %d) from category %s", car_id, index, category.id)
        return car_id

    def get_available_car(self, category: CarCategory) -> Car:
        """Pick a car id and resolve it; a missing record raises CarNotFoundError."""
        car_id = self.select_random_car(category)
        car = self.car_repository.find(car_id)
        if car is None:
            logger.warning("Car %s from category %s is not in the repository", car_id, category.id)
            raise CarNotFoundError(car_id=car_id)
        return car

    # -------- pricing --------
    def _final_amount(self, customer: Customer, category: CarCategory, number_of_days: int) -> Decimal:
        if number_of_days <= 0:
            raise InvalidRentalRequestError(
                f"Error: number of days must be positive, got {number_of_days}"
            )
        if customer.age < 0:
            raise InvalidRentalRequestError(f"Error: invalid customer age {customer.age}")

        multiplier = self.tax_table.multiplier_for(customer.age)
        return to_decimal(category.price) * number_of_days * multiplier

    def calculate_final_price(self, customer: Customer, category: CarCategory, number_of_days: int) -> str:
        """
        price * age multiplier * days, as localized currency text.
        Raises NoMatchingTaxRuleError when no bracket covers the customer's age.
        """
        return self.currency_format.format(
            self._final_amount(customer, category, number_of_days)
        )

    # -------- rental --------
    def due_date_for(self, number_of_days: int) -> str:
        """Today plus ``number_of_days`` calendar days, in the long locale style."""
        return self.date_format.format_offset(self.clock.today(), number_of_days)

    def rent(self, customer: Customer, category: CarCategory, number_of_days: int) -> Transaction:
        """
        Select a car, price it and stamp a due date.
        Any failure propagates; no partial transaction is ever returned.
        """
        car = self.get_available_car(category)
        amount = self.calculate_final_price(customer, category, number_of_days)
        due_date = self.due_date_for(number_of_days)

        transaction = Transaction(
            customer=customer,
            car=car,
            due_date=due_date,
            amount=amount,
        )
        logger.info("Rented car %s to customer %s for %d days: %s",
                    car.id, customer.id, number_of_days, amount)
        return transaction
