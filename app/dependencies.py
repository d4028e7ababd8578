from fastapi import Request

from app.services.vehicle_service import VehicleService


async def get_vehicle_service(request: Request) -> VehicleService:
    return request.app.state.vehicle_service
