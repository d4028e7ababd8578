import json

import pytest
from pydantic import ValidationError

from app.config import Settings
from app.seed import SEED_VEHICLES, build_initial_vehicles, load_vehicles_file, parse_vehicles


def test_parse_vehicles_maps_wire_names():
    vehicles = parse_vehicles(SEED_VEHICLES)

    assert sorted(vehicles) == [v["id"] for v in SEED_VEHICLES]
    corolla = vehicles[1]
    assert corolla.fabrication_year == 2018
    assert corolla.capacity == 5
    assert corolla.model == "Corolla"


def test_parse_vehicles_rejects_duplicate_ids():
    with pytest.raises(ValueError, match="Duplicate vehicle id"):
        parse_vehicles([SEED_VEHICLES[0], SEED_VEHICLES[0]])


def test_parse_vehicles_rejects_invalid_entry():
    with pytest.raises(ValidationError):
        parse_vehicles([{**SEED_VEHICLES[0], "max_speed": 1000}])


def test_load_vehicles_file(tmp_path):
    path = tmp_path / "vehicles.json"
    path.write_text(json.dumps(SEED_VEHICLES[:2]), encoding="utf-8")

    assert sorted(load_vehicles_file(path)) == [1, 2]


def test_load_vehicles_file_requires_array(tmp_path):
    path = tmp_path / "vehicles.json"
    path.write_text(json.dumps({"vehicles": SEED_VEHICLES}), encoding="utf-8")

    with pytest.raises(ValueError, match="JSON array"):
        load_vehicles_file(path)


def test_build_initial_vehicles_prefers_seed_file(tmp_path):
    path = tmp_path / "vehicles.json"
    path.write_text(json.dumps(SEED_VEHICLES[3:]), encoding="utf-8")

    vehicles = build_initial_vehicles(Settings(seed_file=str(path)))

    assert list(vehicles) == [4]


def test_build_initial_vehicles_demo_data():
    assert len(build_initial_vehicles(Settings(seed_file="", seed_demo_data=True))) == len(SEED_VEHICLES)


def test_build_initial_vehicles_empty():
    assert build_initial_vehicles(Settings(seed_file="", seed_demo_data=False)) == {}
