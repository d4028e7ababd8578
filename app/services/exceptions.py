"""Errors raised by :class:`app.services.vehicle_service.VehicleService`.

Each one is raised ``from`` the store error it translates, so that error
stays available as ``__cause__``.
"""


class ServiceError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class VehicleAlreadyExistsError(ServiceError):
    def __init__(self, vehicle_id: int):
        self.vehicle_id = vehicle_id
        super().__init__(f"Vehicle already exists: {vehicle_id}")


class VehicleNotFoundError(ServiceError):
    def __init__(self, vehicle_id: int):
        self.vehicle_id = vehicle_id
        super().__init__("Vehicle with the provided ID not found")


class VehiclesNotFoundByCriteriaError(ServiceError):
    def __init__(self, message: str = "No vehicles found with the given criteria"):
        super().__init__(message)


class NoVehiclesForBrandError(VehiclesNotFoundByCriteriaError):
    def __init__(self, brand: str):
        self.brand = brand
        super().__init__("No vehicles found with the given brand")
