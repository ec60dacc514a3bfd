"""Sources of "today" for due-date computation."""
from abc import ABC, abstractmethod
from datetime import date, datetime

import pytz

from car_rental.utils.constants import DEFAULT_TIMEZONE


class Clock(ABC):
    """Anything with a ``today() -> date`` method."""

    @abstractmethod
    def today(self) -> date:
        ...


class SystemClock(Clock):
    """
    Wall-clock date in a fixed timezone, so the due date does not depend on
    the host's local zone.
    """

    def __init__(self, timezone: str = DEFAULT_TIMEZONE):
        self.tz = pytz.timezone(timezone)

    def now(self) -> datetime:
        return datetime.now(self.tz)

    def today(self) -> date:
        return self.now().date()


class FixedClock(Clock):
    """Always returns the same date (tests, replays)."""

    def __init__(self, fixed: date):
        if isinstance(fixed, datetime):
            fixed = fixed.date()
        self.fixed = fixed

    def today(self) -> date:
        return self.fixed
