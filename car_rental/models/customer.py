from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:
    """
    Customer requesting a rental. Only ``age`` takes part in pricing; it selects
    the tax bracket whose multiplier is applied to the daily rate.
    """
    id: str
    name: str
    age: int
