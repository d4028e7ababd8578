"""In-memory vehicle store.

Records live in a plain dict keyed by vehicle id. Every query is a linear scan
over the current contents; there are no secondary indexes. Queries that match
nothing raise instead of returning an empty result.

The store has no locking of its own. Callers sharing one instance across
threads must serialize access themselves.
"""
import logging
import sys
from collections.abc import Callable, Iterable, Mapping

from app.models.vehicle import Vehicle
from app.repositories.exceptions import (
    NoVehiclesForBrandError,
    VehicleAlreadyExistsError,
    VehicleNotFoundError,
    VehiclesNotFoundByCriteriaError,
)

logger = logging.getLogger(__name__)


class VehicleMap:
    def __init__(self, db: Mapping[int, Vehicle] | None = None):
        self._db: dict[int, Vehicle] = dict(db) if db is not None else {}

    def __len__(self) -> int:
        return len(self._db)

    def find_all(self) -> dict[int, Vehicle]:
        return dict(self._db)

    def create(self, vehicle: Vehicle) -> None:
        if vehicle.id in self._db:
            raise VehicleAlreadyExistsError(vehicle.id)
        self._db[vehicle.id] = vehicle
        logger.debug("Inserted vehicle %s", vehicle.id)

    def create_multiple(self, vehicles: Iterable[Vehicle]) -> None:
        """Insert vehicles in order, stopping at the first duplicate id.

        Not atomic: vehicles inserted before the duplicate stay in the store.
        """
        for vehicle in vehicles:
            self.create(vehicle)

    def get_by_color_and_year(self, color: str, year: int) -> dict[int, Vehicle]:
        return self._filter(
            lambda v: v.color == color and v.fabrication_year == year,
            "No vehicles found with the given color and year",
        )

    def get_by_brand_between_years(self, brand: str, year_start: int, year_end: int) -> dict[int, Vehicle]:
        return self._filter(
            lambda v: v.brand == brand and year_start <= v.fabrication_year <= year_end,
            "No vehicles found with the given brand and years",
        )

    def get_speed_avg_by_brand(self, brand: str) -> float:
        return self._average_by_brand(brand, lambda v: v.max_speed)

    def get_average_capacity_by_brand(self, brand: str) -> float:
        return self._average_by_brand(brand, lambda v: float(v.capacity))

    def list_by_weight_range(self, weight_min: float, weight_max: float) -> dict[int, Vehicle]:
        # zero upper bound means "no upper bound"
        if weight_max == 0:
            weight_max = sys.float_info.max
        return self._filter(
            lambda v: weight_min <= v.weight <= weight_max,
            "No vehicles found with the given weight range",
        )

    def list_by_dimensions(
        self,
        min_length: float,
        max_length: float,
        min_width: float,
        max_width: float,
    ) -> dict[int, Vehicle]:
        return self._filter(
            lambda v: min_length <= v.length <= max_length and min_width <= v.width <= max_width,
            "No vehicles found with the given dimensions",
        )

    def update(self, vehicle: Vehicle) -> None:
        if vehicle.id not in self._db:
            raise VehicleNotFoundError(vehicle.id)
        self._db[vehicle.id] = vehicle
        logger.debug("Replaced vehicle %s", vehicle.id)

    def delete(self, vehicle_id: int) -> None:
        if vehicle_id not in self._db:
            raise VehicleNotFoundError(vehicle_id)
        del self._db[vehicle_id]
        logger.debug("Removed vehicle %s", vehicle_id)

    def _filter(self, predicate: Callable[[Vehicle], bool], empty_message: str) -> dict[int, Vehicle]:
        matches = {key: value for key, value in self._db.items() if predicate(value)}
        if not matches:
            raise VehiclesNotFoundByCriteriaError(empty_message)
        return matches

    def _average_by_brand(self, brand: str, value_of: Callable[[Vehicle], float]) -> float:
        values = [value_of(v) for v in self._db.values() if v.brand == brand]
        if not values:
            raise NoVehiclesForBrandError(brand)
        return sum(values) / len(values)
