"""Errors raised by the vehicle store."""


class RepositoryError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class VehicleAlreadyExistsError(RepositoryError):
    def __init__(self, vehicle_id: int):
        self.vehicle_id = vehicle_id
        super().__init__(f"Vehicle ID already present, key: {vehicle_id}")


class VehicleNotFoundError(RepositoryError):
    def __init__(self, vehicle_id: int):
        self.vehicle_id = vehicle_id
        super().__init__(f"Vehicle with ID {vehicle_id} not found")


class VehiclesNotFoundByCriteriaError(RepositoryError):
    """A criteria query matched no record."""


class NoVehiclesForBrandError(RepositoryError):
    """An average by brand had no record to average over."""

    def __init__(self, brand: str):
        self.brand = brand
        super().__init__(f"No vehicles found with the brand {brand!r}")
