from app.repositories.vehicle_map import VehicleMap

__all__ = ["VehicleMap"]
