import csv
import json

import pytest

from courier_dispatch.utils import DataLoader


@pytest.fixture
def sample_plan(engine, sample_packages, sample_fleet):
    return engine.plan(sample_packages, sample_fleet, 100)


def test_load_packages_from_json(tmp_path):
    path = tmp_path / "packages.json"
    path.write_text(json.dumps([
        {"id": "P1", "weight": 50, "distance": 30, "offer_code": "OFR001"},
        {"id": 2, "weight": "75.5", "distance": 125},
    ]))

    packages = DataLoader.load_packages_from_json(str(path))

    assert [p.id for p in packages] == ["P1", "2"]
    assert packages[0].offer_code == "OFR001"
    assert packages[1].weight == 75.5
    assert packages[1].offer_code is None


def test_load_packages_from_csv_blank_offer(tmp_path):
    path = tmp_path / "packages.csv"
    path.write_text("id,weight,distance,offer_code\nP1,50,30,OFR001\nP2,75,125,\n")

    packages = DataLoader.load_packages_from_csv(str(path))

    assert [p.offer_code for p in packages] == ["OFR001", None]


def test_load_vehicles(tmp_path):
    json_path = tmp_path / "vehicles.json"
    json_path.write_text(json.dumps([{"id": 1, "max_speed": 70, "max_carriable_weight": 200, "name": "Van"}]))
    csv_path = tmp_path / "vehicles.csv"
    csv_path.write_text("id,max_speed,max_carriable_weight,available_time\n2,60,150,1.5\n")

    (van,) = DataLoader.load_vehicles_from_json(str(json_path))
    (truck,) = DataLoader.load_vehicles_from_csv(str(csv_path))

    assert van.display_name == "Van"
    assert van.available_time == 0.0
    assert truck.display_name == "Vehicle 02"
    assert truck.available_time == 1.5


def test_save_plan_to_json(tmp_path, sample_plan):
    path = tmp_path / "plan.json"
    DataLoader.save_plan_to_json(sample_plan, str(path))

    data = json.loads(path.read_text())
    assert [r["id"] for r in data["results"]] == ["PKG1", "PKG2", "PKG3", "PKG4", "PKG5"]
    assert data["costs"]["total_discount"] == 105


def test_save_plan_to_csv(tmp_path, sample_plan):
    path = tmp_path / "plan.csv"
    DataLoader.save_plan_to_csv(sample_plan, str(path))

    with open(path, newline="") as f:
        rows = list(csv.DictReader(f))

    assert len(rows) == 5
    assert rows[0]["trip_id"] == "T1"
    assert {rows[0]["package_id"], rows[1]["package_id"]} == {"PKG4", "PKG2"}
    assert rows[0]["estimated_delivery_time"] == "1.79"
