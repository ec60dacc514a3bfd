"""Car rental pricing service: pick a car, price it by age bracket, stamp a due date."""

from .config import Config
from .utils.constants import DataFile
from .models.repository import car_repository
from .models.tax import default_tax_table
from .services.car_service import CarService
from .utils.clock import SystemClock
from .utils.formatters import CurrencyFormatter, DateFormatter
from .utils.random_source import SystemRandomSource


def create_service(config=Config, **overrides):
    """
    Build a CarService wired from ``config``.
    Keyword overrides replace individual collaborators (``car_repository``,
    ``tax_table``, ``clock``...).
    """
    deps = dict(
        tax_table=default_tax_table(),
        currency_formatter=CurrencyFormatter(config.LOCALE, config.CURRENCY),
        date_formatter=DateFormatter(config.LOCALE),
        clock=SystemClock(config.TIMEZONE),
        random_source=SystemRandomSource(),
    )
    deps.update(overrides)
    if "car_repository" not in deps:
        deps["car_repository"] = car_repository(config.data_file(DataFile.CARS))
    return CarService(**deps)


__all__ = ["CarService", "Config", "create_service"]
