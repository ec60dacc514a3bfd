"""Environment-driven settings and logging setup."""

import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from car_rental.utils.constants import (
    DEFAULT_CURRENCY,
    DEFAULT_LOCALE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TIMEZONE,
)

# Load environment variables from .env file in project root
BASE_DIR = Path(__file__).resolve().parents[1]
load_dotenv(BASE_DIR / ".env")


class Config:
    """
    Configuration management for the car rental pricing service.

    DATA_DIR defaults to the database/ folder of a source checkout. The
    folder is not shipped inside the wheel, so an installed package needs
    CAR_RENTAL_DATA_DIR pointing at a directory holding the JSON files.
    """

    # Reference data (cars.json, carCategories.json, customers.json)
    DATA_DIR = Path(os.getenv("CAR_RENTAL_DATA_DIR") or BASE_DIR / "database")

    # Display
    LOCALE = os.getenv("CAR_RENTAL_LOCALE", DEFAULT_LOCALE)
    CURRENCY = os.getenv("CAR_RENTAL_CURRENCY", DEFAULT_CURRENCY)
    TIMEZONE = os.getenv("CAR_RENTAL_TIMEZONE", DEFAULT_TIMEZONE)

    LOG_LEVEL = os.getenv("CAR_RENTAL_LOG_LEVEL", DEFAULT_LOG_LEVEL)

    @classmethod
    def data_file(cls, name: str) -> Path:
        """Absolute path of a reference data file inside DATA_DIR."""
        return Path(cls.DATA_DIR) / name


def setup_logging(level=None):
    """Send log records to stderr with a single handler on the root logger."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    )

    root = logging.getLogger()
    root.setLevel(level or Config.LOG_LEVEL)
    # Remove existing handlers to avoid duplication
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
