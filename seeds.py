"""
seeds.py
--------
Regenerate the reference data under ``database/`` (cars, car categories,
customers). The pricing service only ever reads these files.

Usage:
    $ python seeds.py
"""

import json
import logging

from car_rental.config import Config, setup_logging
from car_rental.utils.constants import DataFile

logger = logging.getLogger("seeds")

CARS = [
    {"id": "6f1b8e2a-2f4c-4b8e-9d1a-1c0e5f7a9b01", "name": "Fiat Uno", "releaseYear": 2019,
     "available": True, "gasAvailable": True},
    {"id": "0d3c7a9e-5b21-4f6a-8c3e-7e2b9d4f1a02", "name": "VW Gol", "releaseYear": 2020,
     "available": True, "gasAvailable": True},
    {"id": "a7e4c1d9-3f82-4e5b-b6a0-2d9c8e1f3b03", "name": "Chevrolet Onix", "releaseYear": 2021,
     "available": True, "gasAvailable": False},
    {"id": "c95f2b17-8a4d-4c3e-a1f0-6b7d2e9c4a04", "name": "Toyota Corolla", "releaseYear": 2020,
     "available": True, "gasAvailable": True},
    {"id": "5e8a3d6c-1b7f-4a2e-9c5d-8f0b1e2a7c05", "name": "Honda Civic", "releaseYear": 2018,
     "available": True, "gasAvailable": True},
]

CAR_CATEGORIES = [
    {"id": "e1c4a7b2-9d3f-4e8a-b5c6-0f1a2b3c4d10", "name": "Economy", "price": 37.6,
     "carIds": [CARS[0]["id"], CARS[1]["id"], CARS[2]["id"]]},
    {"id": "f2d5b8c3-0e4a-4f9b-c6d7-1a2b3c4d5e20", "name": "Sedan", "price": 59.9,
     "carIds": [CARS[3]["id"], CARS[4]["id"]]},
]

CUSTOMERS = [
    {"id": "b3a1c2d4-5e6f-4a7b-8c9d-0e1f2a3b4c31", "name": "Ana Souza", "age": 20},
    {"id": "c4b2d3e5-6f7a-4b8c-9d0e-1f2a3b4c5d42", "name": "Bruno Lima", "age": 28},
    {"id": "d5c3e4f6-7a8b-4c9d-0e1f-2a3b4c5d6e53", "name": "Carla Mendes", "age": 50},
]


def write(name: str, records: list) -> None:
    """Write ``records`` as a pretty-printed JSON array into DATA_DIR/name."""
    path = Config.data_file(name)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(records, f, indent=2, ensure_ascii=False)
        f.write("\n")
    logger.info("Wrote %d records to %s", len(records), path)


def main():
    setup_logging()
    write(DataFile.CARS, CARS)
    write(DataFile.CAR_CATEGORIES, CAR_CATEGORIES)
    write(DataFile.CUSTOMERS, CUSTOMERS)
    logger.info("Seed complete.")


if __name__ == "__main__":
    main()
