import math

from fastapi import APIRouter, Depends, Response

from app.dependencies import get_vehicle_service
from app.schemas.vehicle import (
    BrandAverageResponse,
    VehicleBatchCreate,
    VehicleCreate,
    VehicleResponse,
    VehicleUpdate,
)
from app.services.vehicle_service import VehicleService
from app.utils.exceptions import AppException
from app.utils.response import success_response, vehicles_data

router = APIRouter(prefix="/vehicles", tags=["vehicles"])

# Handlers must stay ``async def``: the event loop is what serializes
# access to the in-memory store.


def parse_range(value: str | None, name: str) -> dict[str, float]:
    """Parse a ``"low-high"`` query value into ``min_<name>``/``max_<name>``.

    Either side may be empty, in which case that bound is left out.
    """
    if value is None or value == "":
        return {}
    parts = value.split("-")
    if len(parts) != 2:
        raise AppException(f"Invalid {name} range, expected low-high")

    bounds: dict[str, float] = {}
    for prefix, raw in zip(("min", "max"), parts):
        raw = raw.strip()
        if not raw:
            continue
        try:
            bound = float(raw)
        except ValueError:
            raise AppException(f"Invalid {prefix} {name} provided") from None
        bounds[f"{prefix}_{name}"] = require_finite(bound, f"{prefix} {name}")
    return bounds


def require_finite(value: float, name: str) -> float:
    if not math.isfinite(value):
        raise AppException(f"Invalid {name} provided")
    return value


@router.get("")
async def get_vehicles(service: VehicleService = Depends(get_vehicle_service)):
    return success_response(data=vehicles_data(service.find_all()))


@router.post("", status_code=201)
async def create_vehicle(payload: VehicleCreate, service: VehicleService = Depends(get_vehicle_service)):
    vehicle = payload.to_vehicle(payload.id)
    service.create(vehicle)
    return success_response(
        data=VehicleResponse.from_vehicle(vehicle).model_dump(),
        message="Vehicle created",
    )


@router.post("/batch", status_code=201)
async def create_vehicles(payload: VehicleBatchCreate, service: VehicleService = Depends(get_vehicle_service)):
    vehicles = [item.to_vehicle(item.id) for item in payload.vehicles]
    service.create_multiple(vehicles)
    return success_response(
        data=vehicles_data({v.id: v for v in vehicles}),
        message="Vehicles created",
    )


@router.get("/color/{color}/year/{year}")
async def get_by_color_and_year(color: str, year: int, service: VehicleService = Depends(get_vehicle_service)):
    vehicles = service.get_by_color_and_year(color, year)
    return success_response(data=vehicles_data(vehicles))


@router.get("/brand/{brand}/between/{start_year}/{end_year}")
async def get_by_brand_between_years(
    brand: str,
    start_year: int,
    end_year: int,
    service: VehicleService = Depends(get_vehicle_service),
):
    vehicles = service.get_by_brand_between_years(brand, start_year, end_year)
    return success_response(data=vehicles_data(vehicles))


@router.get("/average_speed/brand/{brand}")
async def get_speed_avg_by_brand(brand: str, service: VehicleService = Depends(get_vehicle_service)):
    average = service.get_speed_avg_by_brand(brand)
    return success_response(data=BrandAverageResponse(brand=brand, average=average).model_dump())


@router.get("/average_capacity/brand/{brand}")
async def get_average_capacity_by_brand(brand: str, service: VehicleService = Depends(get_vehicle_service)):
    average = service.get_average_capacity_by_brand(brand)
    return success_response(data=BrandAverageResponse(brand=brand, average=average).model_dump())


@router.get("/weight")
async def list_by_weight_range(
    weight_min: float | None = None,
    weight_max: float | None = None,
    service: VehicleService = Depends(get_vehicle_service),
):
    # an absent max is sent as 0, which the store reads as unbounded
    weight_min = require_finite(weight_min or 0.0, "min weight")
    weight_max = require_finite(weight_max or 0.0, "max weight")
    vehicles = service.list_by_weight_range(weight_min, weight_max)
    return success_response(data=vehicles_data(vehicles))


@router.get("/dimensions")
async def list_by_dimensions(
    length: str | None = None,
    width: str | None = None,
    service: VehicleService = Depends(get_vehicle_service),
):
    dimensions = {**parse_range(length, "length"), **parse_range(width, "width")}
    vehicles = service.list_by_dimensions(dimensions)
    return success_response(data=vehicles_data(vehicles))


@router.put("/{vehicle_id}")
async def update_vehicle(
    vehicle_id: int,
    payload: VehicleUpdate,
    service: VehicleService = Depends(get_vehicle_service),
):
    vehicle = payload.to_vehicle(vehicle_id)
    service.update(vehicle)
    return success_response(
        data=VehicleResponse.from_vehicle(vehicle).model_dump(),
        message="Vehicle updated",
    )


@router.delete("/{vehicle_id}", status_code=204)
async def delete_vehicle(vehicle_id: int, service: VehicleService = Depends(get_vehicle_service)):
    service.delete(vehicle_id)
    return Response(status_code=204)
