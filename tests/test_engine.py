import pytest

from courier_dispatch import CourierDispatchEngine, Offer, OfferCatalog, Package, Vehicle, plan
from courier_dispatch.errors import (
    EmptyFleetError,
    ErrorKind,
    InvalidPackageError,
    InvalidVehicleError,
    UnroutablePackageError,
)


class TestCourierDispatchEngine:
    def test_sample_results(self, engine, sample_packages, sample_fleet):
        result = engine.plan(sample_packages, sample_fleet, 100)

        by_id = {r.package_id: r for r in result.results}
        assert by_id["PKG1"].total_cost == 750
        assert by_id["PKG2"].total_cost == 1475
        assert by_id["PKG3"].total_cost == 2350
        assert by_id["PKG4"].discount == pytest.approx(105)
        assert by_id["PKG4"].total_cost == pytest.approx(1395)
        assert by_id["PKG5"].total_cost == 2125

        assert by_id["PKG4"].estimated_delivery_time == pytest.approx(125 / 70)
        assert by_id["PKG3"].estimated_delivery_time == pytest.approx(225 / 70)
        assert by_id["PKG1"].vehicle_id == 2

    def test_every_package_gets_exactly_one_result(self, engine, sample_packages, sample_fleet):
        result = engine.plan(sample_packages, sample_fleet, 100)

        assert [r.package_id for r in result.results] == [p.id for p in sample_packages]
        shipped = sorted(pkg_id for s in result.shipments for pkg_id in s.package_ids)
        assert shipped == sorted(p.id for p in sample_packages)

    def test_capacity_invariant(self, engine, sample_packages, sample_fleet):
        result = engine.plan(sample_packages, sample_fleet, 100)
        capacity = {v.id: v.max_carriable_weight for v in sample_fleet}

        for shipment in result.shipments:
            assert shipment.total_weight <= capacity[shipment.vehicle_id]

    def test_availability_invariant(self, engine, sample_packages, sample_fleet):
        result = engine.plan(sample_packages, sample_fleet, 100)

        for trips in result.get_trips_per_vehicle().values():
            for previous, current in zip(trips, trips[1:]):
                assert current.departure_time >= previous.return_time

    def test_eta_is_departure_plus_one_way(self, engine, saturation_packages, single_truck):
        result = engine.plan(saturation_packages, single_truck, 100)

        for r in result.results:
            shipment = result.shipment_for(r.package_id)
            assert r.estimated_delivery_time == shipment.departure_time + shipment.one_way_time
            assert r.estimated_delivery_time < shipment.return_time

        assert result.result_for("A").estimated_delivery_time == pytest.approx(0.4)
        assert result.result_for("C").estimated_delivery_time == pytest.approx(1.4)

    def test_idempotent(self, engine, sample_packages, sample_fleet):
        first = engine.plan(sample_packages, sample_fleet, 100)
        second = engine.plan(sample_packages, sample_fleet, 100)

        assert first.shipments == second.shipments
        assert first.results == second.results

    def test_inputs_not_mutated(self, engine, sample_packages, sample_fleet):
        before = [(v.id, v.available_time) for v in sample_fleet]
        engine.plan(sample_packages, sample_fleet, 100)

        assert [(v.id, v.available_time) for v in sample_fleet] == before

    def test_empty_fleet(self, engine):
        with pytest.raises(EmptyFleetError):
            engine.plan([Package("P", 10, 10)], [], 100)

    def test_invalid_packages_reported_together(self, engine, sample_fleet):
        packages = [
            Package("ZERO", 0, 10),
            Package("NEG", 10, -1),
            Package("", 10, 10),
            Package("DUP", 10, 10),
            Package("DUP", 20, 10),
        ]
        with pytest.raises(InvalidPackageError) as exc_info:
            engine.plan(packages, sample_fleet, 100)

        errors = exc_info.value.errors
        assert set(errors) == {"ZERO", "NEG", "", "DUP"}
        assert exc_info.value.kind == ErrorKind.INVALID_PACKAGE
        assert any("Duplicate" in msg for msg in errors["DUP"])

    def test_package_validation_runs_before_fleet_check(self, engine):
        with pytest.raises(InvalidPackageError):
            engine.plan([Package("P", -1, 10)], [], 100)

    def test_invalid_vehicle(self, engine):
        vehicles = [Vehicle(id=1, max_speed=0, max_carriable_weight=200)]
        with pytest.raises(InvalidVehicleError) as exc_info:
            engine.plan([Package("P", 10, 10)], vehicles, 100)
        assert exc_info.value.identifiers == (1,)

    def test_duplicate_vehicle_ids(self, engine):
        vehicles = [Vehicle(id=1, max_speed=10, max_carriable_weight=200)] * 2
        with pytest.raises(InvalidVehicleError):
            engine.plan([Package("P", 10, 10)], vehicles, 100)

    def test_unroutable(self, engine, sample_fleet):
        with pytest.raises(UnroutablePackageError) as exc_info:
            engine.plan([Package("BIG", 500, 10), Package("SMALL", 5, 10)], sample_fleet, 100)
        assert exc_info.value.identifiers == ("BIG",)
        assert exc_info.value.to_dict()["kind"] == "UNROUTABLE_PACKAGE"

    @pytest.mark.parametrize("base_cost", [-1, float("nan"), float("inf")])
    def test_bad_base_cost(self, engine, sample_packages, sample_fleet, base_cost):
        with pytest.raises(ValueError):
            engine.plan(sample_packages, sample_fleet, base_cost)

    @pytest.mark.parametrize("bad", [float("nan"), float("inf")])
    def test_non_finite_package_measurements(self, engine, sample_fleet, bad):
        packages = [Package("BAD_DIST", 10, bad), Package("BAD_WEIGHT", bad, 10), Package("OK", 10, 10)]

        with pytest.raises(InvalidPackageError) as exc_info:
            engine.plan(packages, sample_fleet, 100)

        assert set(exc_info.value.errors) == {"BAD_DIST", "BAD_WEIGHT"}

    @pytest.mark.parametrize(
        "vehicle",
        [
            Vehicle(id=1, max_speed=float("nan"), max_carriable_weight=200),
            Vehicle(id=1, max_speed=70, max_carriable_weight=float("inf")),
            Vehicle(id=1, max_speed=70, max_carriable_weight=200, available_time=float("nan")),
        ],
    )
    def test_non_finite_vehicle_fields(self, engine, vehicle):
        with pytest.raises(InvalidVehicleError) as exc_info:
            engine.plan([Package("P", 10, 10)], [vehicle], 100)
        assert exc_info.value.identifiers == (1,)

    def test_empty_injected_catalog_is_kept(self, sample_fleet):
        engine = CourierDispatchEngine(OfferCatalog([]))
        result = engine.plan([Package("P", 100, 100, "OFR002")], sample_fleet, 100)

        assert engine.list_offers() == []
        assert result.results[0].discount == 0

    def test_list_offers(self, engine):
        assert [o.code for o in engine.list_offers()] == ["OFR001", "OFR002", "OFR003"]

    def test_plan_keeps_fleet_snapshot(self, engine, sample_packages, sample_fleet):
        result = engine.plan(sample_packages, sample_fleet, 100)

        assert [v.id for v in result.vehicles] == [1, 2]
        assert result.vehicles[0].available_time == pytest.approx((250 + 190) / 70)


def test_plan_function_with_custom_offers():
    offers = [Offer("FREE", 100, 0, 1000, 0, 1000)]
    result = plan(
        [Package("P", 10, 10, "FREE")],
        [Vehicle(id=1, max_speed=10, max_carriable_weight=100)],
        100,
        offers=offers,
    )

    assert result.results[0].total_cost == 0
    assert result.results[0].discount == 250


def test_plan_function_with_no_offers():
    result = plan(
        [Package("P", 100, 100, "OFR002")],
        [Vehicle(id=1, max_speed=10, max_carriable_weight=200)],
        100,
        offers=[],
    )

    assert result.results[0].discount == 0
    assert result.results[0].total_cost == 1600
