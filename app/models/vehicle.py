from pydantic import BaseModel


class Vehicle(BaseModel):
    """A vehicle record, keyed by the caller-assigned ``id``."""

    id: int
    brand: str
    model: str
    registration: str
    color: str
    fabrication_year: int
    capacity: int
    max_speed: float
    fuel_type: str
    transmission: str
    weight: float
    height: float
    length: float
    width: float

    model_config = {"frozen": True}
