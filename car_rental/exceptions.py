"""
Custom exception classes for the car rental pricing service.

Each error is raised where the condition is detected and propagated to the
caller unchanged; the service never recovers from them internally.
"""

from typing import Optional


class CarRentalError(Exception):
    """Base class for every error raised by the pricing service."""

    default_message = "Error: car rental failure"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class CarNotFoundError(CarRentalError):
    """Raised when a car ID cannot be found in the repository."""

    default_message = "Error: car not found"

    def __init__(self, message: Optional[str] = None, car_id: Optional[str] = None) -> None:
        self.car_id = car_id
        if message is None and car_id is not None:
            message = f"Error: car {car_id!r} not found"
        super().__init__(message)


class NoMatchingTaxRuleError(CarRentalError):
    """Raised when a customer's age is outside every tax bracket."""

    default_message = "Error: no tax rule matches the customer's age"

    def __init__(self, message: Optional[str] = None, age: Optional[int] = None) -> None:
        self.age = age
        if message is None and age is not None:
            message = f"Error: no tax rule matches age {age}"
        super().__init__(message)


class InvalidTaxTableError(CarRentalError):
    """Raised when the tax table holds a malformed or overlapping rule."""

    default_message = "Error: invalid tax table"


class InvalidRentalRequestError(CarRentalError):
    """Raised for an empty car pool, a non-positive day count or a negative age."""

    default_message = "Error: invalid rental request"


class RepositoryError(CarRentalError):
    """Raised when a data file is missing or cannot be parsed."""

    default_message = "Error: data source unavailable"
