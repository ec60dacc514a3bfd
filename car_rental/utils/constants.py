# car_rental/utils/constants.py

"""
Global defaults for locale, currency, timezone and data files.
These constants are imported by the config layer, models and services.
"""

# Locale used for currency and date display
DEFAULT_LOCALE = "pt_BR"
DEFAULT_CURRENCY = "BRL"
DEFAULT_TIMEZONE = "America/Sao_Paulo"

# Babel date style for due dates ("10 de novembro de 2020")
DUE_DATE_STYLE = "long"

DEFAULT_LOG_LEVEL = "INFO"


class DataFile:
    CARS = "cars.json"
    CAR_CATEGORIES = "carCategories.json"
    CUSTOMERS = "customers.json"
