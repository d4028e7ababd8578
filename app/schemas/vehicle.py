from pydantic import BaseModel, Field

from app.models.vehicle import Vehicle

MIN_SPEED = 0.0
MAX_SPEED = 400.0


class VehicleAttributes(BaseModel):
    brand: str
    model: str
    registration: str
    color: str
    year: int
    passengers: int
    max_speed: float = Field(gt=MIN_SPEED, le=MAX_SPEED)
    fuel_type: str
    transmission: str
    weight: float = Field(ge=0)
    height: float = Field(ge=0)
    length: float = Field(ge=0)
    width: float = Field(ge=0)

    model_config = {"allow_inf_nan": False}

    def to_vehicle(self, vehicle_id: int) -> Vehicle:
        return Vehicle(
            id=vehicle_id,
            brand=self.brand,
            model=self.model,
            registration=self.registration,
            color=self.color,
            fabrication_year=self.year,
            capacity=self.passengers,
            max_speed=self.max_speed,
            fuel_type=self.fuel_type,
            transmission=self.transmission,
            weight=self.weight,
            height=self.height,
            length=self.length,
            width=self.width,
        )


class VehicleUpdate(VehicleAttributes):
    """Body of a full replace; the id comes from the path."""


class VehicleCreate(VehicleAttributes):
    id: int


class VehicleBatchCreate(BaseModel):
    vehicles: list[VehicleCreate]


class VehicleResponse(BaseModel):
    id: int
    brand: str
    model: str
    registration: str
    color: str
    year: int
    passengers: int
    max_speed: float
    fuel_type: str
    transmission: str
    weight: float
    height: float
    length: float
    width: float

    @classmethod
    def from_vehicle(cls, vehicle: Vehicle) -> "VehicleResponse":
        return cls(
            id=vehicle.id,
            brand=vehicle.brand,
            model=vehicle.model,
            registration=vehicle.registration,
            color=vehicle.color,
            year=vehicle.fabrication_year,
            passengers=vehicle.capacity,
            max_speed=vehicle.max_speed,
            fuel_type=vehicle.fuel_type,
            transmission=vehicle.transmission,
            weight=vehicle.weight,
            height=vehicle.height,
            length=vehicle.length,
            width=vehicle.width,
        )


class BrandAverageResponse(BaseModel):
    brand: str
    average: float
