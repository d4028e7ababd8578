import json
import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import TypeAdapter

from app.config import Settings
from app.models.vehicle import Vehicle
from app.schemas.vehicle import VehicleCreate

logger = logging.getLogger(__name__)

SEED_VEHICLES = [
    {"id": 1, "brand": "Toyota", "model": "Corolla", "registration": "AB123CD", "color": "red", "year": 2018,
     "passengers": 5, "max_speed": 180.0, "fuel_type": "gasoline", "transmission": "manual",
     "weight": 1300.0, "height": 1.45, "length": 4.6, "width": 1.78},
    {"id": 2, "brand": "Toyota", "model": "Yaris", "registration": "EF456GH", "color": "blue", "year": 2020,
     "passengers": 5, "max_speed": 170.0, "fuel_type": "hybrid", "transmission": "automatic",
     "weight": 1100.0, "height": 1.5, "length": 3.94, "width": 1.7},
    {"id": 3, "brand": "Fiat", "model": "Panda", "registration": "IL789MN", "color": "red", "year": 2018,
     "passengers": 4, "max_speed": 155.0, "fuel_type": "gasoline", "transmission": "manual",
     "weight": 940.0, "height": 1.55, "length": 3.65, "width": 1.64},
    {"id": 4, "brand": "Volvo", "model": "FH16", "registration": "OP012QR", "color": "white", "year": 2015,
     "passengers": 2, "max_speed": 90.0, "fuel_type": "diesel", "transmission": "automatic",
     "weight": 9000.0, "height": 3.9, "length": 6.1, "width": 2.5},
]

_vehicle_list = TypeAdapter(list[VehicleCreate])


def parse_vehicles(raw: Iterable[dict]) -> dict[int, Vehicle]:
    """Validate wire-format vehicle dicts and key them by id.

    Raises ``pydantic.ValidationError`` on a malformed entry and ``ValueError``
    on a repeated id.
    """
    vehicles: dict[int, Vehicle] = {}
    for item in _vehicle_list.validate_python(list(raw)):
        if item.id in vehicles:
            raise ValueError(f"Duplicate vehicle id in seed data: {item.id}")
        vehicles[item.id] = item.to_vehicle(item.id)
    return vehicles


def load_vehicles_file(path: str | Path) -> dict[int, Vehicle]:
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError(f"Seed file {path} must contain a JSON array")
    return parse_vehicles(raw)


def build_initial_vehicles(settings: Settings) -> dict[int, Vehicle]:
    if settings.seed_file:
        vehicles = load_vehicles_file(settings.seed_file)
        logger.info("Loaded %d vehicles from %s", len(vehicles), settings.seed_file)
        return vehicles
    if settings.seed_demo_data:
        return parse_vehicles(SEED_VEHICLES)
    return {}
