from collections.abc import Mapping
from typing import Any

from app.models.vehicle import Vehicle
from app.schemas.vehicle import VehicleResponse


def success_response(data: Any = None, message: str | None = None) -> dict:
    return {"status": "success", "data": data, "message": message}


def error_response(message: str, data: Any = None) -> dict:
    return {"status": "error", "data": data, "message": message}


def vehicles_data(vehicles: Mapping[int, Vehicle]) -> dict[str, dict]:
    """Encode vehicles as a JSON object keyed by id."""
    return {str(key): VehicleResponse.from_vehicle(value).model_dump() for key, value in sorted(vehicles.items())}
