"""Read-only, file-backed repositories over the static reference data."""

from __future__ import annotations

import json
import logging
import os
from abc import ABC, abstractmethod
from typing import Callable, Generic, List, Optional, TypeVar, Union

from car_rental.config import Config
from car_rental.exceptions import RepositoryError
from car_rental.models.car import Car, CarCategory
from car_rental.models.customer import Customer
from car_rental.services.common import car_from_dict, category_from_dict, customer_from_dict
from car_rental.utils.constants import DataFile

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Lookup capability: one record by id, or every record when no id is given."""

    @abstractmethod
    def find(self, item_id: Optional[str] = None) -> Union[Optional[T], List[T]]:
        ...


class JsonRepository(Repository[T]):
    """
    Repository over a JSON array of objects, each carrying an ``id`` key.

    The file is read once at construction and kept in memory. A missing or
    malformed file, or a record the factory rejects, raises RepositoryError
    instead of starting empty.
    """

    def __init__(self, path: Union[str, os.PathLike], factory: Callable[[dict], T]):
        self.path = str(path)
        self._factory = factory
        self._items: dict[str, T] = {}
        self._load()

    # ---------- Loading ----------
    def _load(self) -> None:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise RepositoryError(f"Error: data file {self.path} not found") from e
        except (OSError, json.JSONDecodeError) as e:
            raise RepositoryError(f"Error: cannot read {self.path} ({e})") from e

        if not isinstance(data, list):
            raise RepositoryError(
                f"Error: {self.path} must hold a JSON array, got {type(data).__name__}"
            )

        for raw in data:
            if not isinstance(raw, dict) or "id" not in raw:
                raise RepositoryError(f"Error: record without id in {self.path}")
            try:
                self._items[str(raw["id"])] = self._factory(raw)
            except (TypeError, ValueError) as e:
                raise RepositoryError(f"Error: bad record in {self.path} ({e})") from e

        logger.info("Loaded %d records from %s", len(self._items), self.path)

    # ---------- Lookup ----------
    def find(self, item_id: Optional[str] = None):
        """
        Return the record with ``item_id`` or None when absent.
        Called without an id, return every record in file order.
        """
        if item_id is None:
            return list(self._items.values())
        return self._items.get(str(item_id))

    def __len__(self) -> int:
        return len(self._items)


# ---------- Factories ----------
def car_repository(path: Union[str, os.PathLike, None] = None) -> JsonRepository[Car]:
    return JsonRepository(path or Config.data_file(DataFile.CARS), car_from_dict)


def category_repository(path: Union[str, os.PathLike, None] = None) -> JsonRepository[CarCategory]:
    return JsonRepository(path or Config.data_file(DataFile.CAR_CATEGORIES), category_from_dict)


def customer_repository(path: Union[str, os.PathLike, None] = None) -> JsonRepository[Customer]:
    return JsonRepository(path or Config.data_file(DataFile.CUSTOMERS), customer_from_dict)
