"""Locale-aware currency and date formatting."""
from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

from babel.dates import format_date
from babel.numbers import format_currency, get_currency_precision

from car_rental.utils.constants import DEFAULT_CURRENCY, DEFAULT_LOCALE, DUE_DATE_STYLE


class CurrencyFormatter:
    """
    Format an amount as localized currency text.
    pt_BR/BRL: Decimal("244.4") -> "R$\xa0244,40" (symbol, grouping, two decimals).
    Half a minor unit rounds away from zero: 24.365 -> "R$\xa024,37".
    """

    def __init__(self, locale: str = DEFAULT_LOCALE, currency: str = DEFAULT_CURRENCY):
        self.locale = locale
        self.currency = currency

    def format(self, amount: Union[Decimal, float, int]) -> str:
        if isinstance(amount, float):
            # Go through the text form so 244.39999999999998 rounds like 244.4
            amount = Decimal(str(amount))
        return format_currency(self.round(amount), self.currency, locale=self.locale)

    def round(self, amount: Union[Decimal, int]) -> Decimal:
        """Quantize to the currency's minor unit (2 places for BRL), half up."""
        digits = get_currency_precision(self.currency)
        return Decimal(amount).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)


class DateFormatter:
    """
    Format a date in a fixed locale style.
    pt_BR/long: date(2020, 11, 10) -> "10 de novembro de 2020".
    """

    def __init__(self, locale: str = DEFAULT_LOCALE, style: str = DUE_DATE_STYLE):
        self.locale = locale
        self.style = style

    def format(self, value: Union[date, datetime]) -> str:
        if isinstance(value, datetime):
            value = value.date()
        return format_date(value, format=self.style, locale=self.locale)

    def format_offset(self, start: Union[date, datetime], days: int) -> str:
        """Format ``start`` shifted by ``days`` calendar days."""
        return self.format(start + timedelta(days=days))
