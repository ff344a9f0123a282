import pytest

from courier_dispatch import CourierDispatchEngine, Package, Vehicle


@pytest.fixture
def sample_packages():
    return [
        Package("PKG1", 50, 30, "OFR001"),
        Package("PKG2", 75, 125, "OFFR0008"),
        Package("PKG3", 175, 100, "OFR003"),
        Package("PKG4", 110, 60, "OFR002"),
        Package("PKG5", 155, 95, "NA"),
    ]


@pytest.fixture
def sample_fleet():
    return [
        Vehicle(id=1, max_speed=70, max_carriable_weight=200),
        Vehicle(id=2, max_speed=70, max_carriable_weight=200),
    ]


@pytest.fixture
def saturation_packages():
    return [
        Package("A", 80, 10),
        Package("B", 90, 20),
        Package("C", 50, 30),
    ]


@pytest.fixture
def single_truck():
    return [Vehicle(id=1, max_speed=50, max_carriable_weight=200)]


@pytest.fixture
def engine():
    return CourierDispatchEngine()
