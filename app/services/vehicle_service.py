"""Vehicle query service.

Sits between the HTTP routers and the store. It fills in default bounds for
the dimension query and re-raises store errors as service errors; all the
filtering happens in the store.
"""
import logging
import sys
from collections.abc import Iterable, Mapping

from app.models.vehicle import Vehicle
from app.repositories import exceptions as repo_errors
from app.repositories.vehicle_map import VehicleMap
from app.services.exceptions import (
    NoVehiclesForBrandError,
    VehicleAlreadyExistsError,
    VehicleNotFoundError,
    VehiclesNotFoundByCriteriaError,
)

logger = logging.getLogger(__name__)

DIMENSION_DEFAULTS: dict[str, float] = {
    "min_length": 0.0,
    "max_length": sys.float_info.max,
    "min_width": 0.0,
    "max_width": sys.float_info.max,
}


class VehicleService:
    def __init__(self, repository: VehicleMap):
        self.repository = repository

    def find_all(self) -> dict[int, Vehicle]:
        return self.repository.find_all()

    def create(self, vehicle: Vehicle) -> None:
        try:
            self.repository.create(vehicle)
        except repo_errors.VehicleAlreadyExistsError as err:
            logger.info("Create rejected: %s", err.message)
            raise VehicleAlreadyExistsError(err.vehicle_id) from err
        logger.info("Created vehicle %s", vehicle.id)

    def create_multiple(self, vehicles: Iterable[Vehicle]) -> None:
        """Create every vehicle in order.

        A duplicate id stops the batch with :class:`VehicleAlreadyExistsError`;
        vehicles created before it are kept.
        """
        vehicles = list(vehicles)
        try:
            self.repository.create_multiple(vehicles)
        except repo_errors.VehicleAlreadyExistsError as err:
            logger.info("Batch create stopped: %s", err.message)
            raise VehicleAlreadyExistsError(err.vehicle_id) from err
        logger.info("Created %d vehicles", len(vehicles))

    def get_by_color_and_year(self, color: str, year: int) -> dict[int, Vehicle]:
        try:
            return self.repository.get_by_color_and_year(color, year)
        except repo_errors.VehiclesNotFoundByCriteriaError as err:
            raise self._not_found_by_criteria(err) from err

    def get_by_brand_between_years(self, brand: str, year_start: int, year_end: int) -> dict[int, Vehicle]:
        try:
            return self.repository.get_by_brand_between_years(brand, year_start, year_end)
        except repo_errors.VehiclesNotFoundByCriteriaError as err:
            raise self._not_found_by_criteria(err) from err

    def get_speed_avg_by_brand(self, brand: str) -> float:
        try:
            return self.repository.get_speed_avg_by_brand(brand)
        except repo_errors.NoVehiclesForBrandError as err:
            logger.info("No vehicles to average: %s", err.message)
            raise NoVehiclesForBrandError(err.brand) from err

    def get_average_capacity_by_brand(self, brand: str) -> float:
        try:
            return self.repository.get_average_capacity_by_brand(brand)
        except repo_errors.NoVehiclesForBrandError as err:
            logger.info("No vehicles to average: %s", err.message)
            raise NoVehiclesForBrandError(err.brand) from err

    def list_by_weight_range(self, weight_min: float, weight_max: float) -> dict[int, Vehicle]:
        try:
            return self.repository.list_by_weight_range(weight_min, weight_max)
        except repo_errors.VehiclesNotFoundByCriteriaError as err:
            raise self._not_found_by_criteria(err) from err

    def list_by_dimensions(self, dimensions: Mapping[str, float]) -> dict[int, Vehicle]:
        """List vehicles whose length and width both fall in range.

        ``dimensions`` may hold any of ``min_length``, ``max_length``,
        ``min_width`` and ``max_width``. Missing minimums become 0 and missing
        maximums the largest float. Other keys are ignored.
        """
        bounds = {key: dimensions.get(key, default) for key, default in DIMENSION_DEFAULTS.items()}
        try:
            return self.repository.list_by_dimensions(
                bounds["min_length"],
                bounds["max_length"],
                bounds["min_width"],
                bounds["max_width"],
            )
        except repo_errors.VehiclesNotFoundByCriteriaError as err:
            raise self._not_found_by_criteria(err) from err

    def update(self, vehicle: Vehicle) -> None:
        try:
            self.repository.update(vehicle)
        except repo_errors.VehicleNotFoundError as err:
            logger.info("Update rejected: %s", err.message)
            raise VehicleNotFoundError(err.vehicle_id) from err
        logger.info("Updated vehicle %s", vehicle.id)

    def delete(self, vehicle_id: int) -> None:
        try:
            self.repository.delete(vehicle_id)
        except repo_errors.VehicleNotFoundError as err:
            logger.info("Delete rejected: %s", err.message)
            raise VehicleNotFoundError(err.vehicle_id) from err
        logger.info("Deleted vehicle %s", vehicle_id)

    @staticmethod
    def _not_found_by_criteria(err: repo_errors.VehiclesNotFoundByCriteriaError) -> VehiclesNotFoundByCriteriaError:
        logger.info("Criteria query matched nothing: %s", err.message)
        return VehiclesNotFoundByCriteriaError()
