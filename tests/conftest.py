import pytest

from app.models.vehicle import Vehicle


def _make_vehicle(vehicle_id: int = 1, **overrides) -> Vehicle:
    fields = {
        "id": vehicle_id,
        "brand": "Toyota",
        "model": "Corolla",
        "registration": f"REG{vehicle_id:04d}",
        "color": "red",
        "fabrication_year": 2018,
        "capacity": 5,
        "max_speed": 180.0,
        "fuel_type": "gasoline",
        "transmission": "manual",
        "weight": 1300.0,
        "height": 1.45,
        "length": 4.6,
        "width": 1.78,
    }
    fields.update(overrides)
    return Vehicle(**fields)


@pytest.fixture
def make_vehicle():
    return _make_vehicle


@pytest.fixture(autouse=True)
def fresh_vehicle_service():
    """Give each test its own store seeded with the demo fleet."""
    from app.main import app, build_vehicle_service

    app.state.vehicle_service = build_vehicle_service()
    yield app.state.vehicle_service
