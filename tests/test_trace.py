import logging

from courier_dispatch import ShipmentPlanner
from courier_dispatch.trace import LoggingTraceSink, RecordingTraceSink, TraceEvent, TraceEventKind


def test_planner_emits_structured_events(saturation_packages, single_truck):
    sink = RecordingTraceSink()
    shipments = ShipmentPlanner(saturation_packages, single_truck, trace=sink).plan()

    kinds = [e.kind for e in sink.events]
    assert kinds[0] == TraceEventKind.PLANNING_STARTED
    assert kinds[-1] == TraceEventKind.PLANNING_COMPLETED

    packed = sink.events_of(TraceEventKind.PACKAGE_PACKED)
    assert sorted(e.package_ids[0] for e in packed) == ["A", "B", "C"]

    assigned = sink.events_of(TraceEventKind.VEHICLE_ASSIGNED)
    assert len(assigned) == len(shipments) == 2
    assert assigned[0].package_ids == ("B", "A")
    assert assigned[0].time == 0.0
    assert assigned[0].details["total_weight"] == 170

    advanced = sink.events_of(TraceEventKind.TIME_ADVANCED)
    assert len(advanced) == 1
    assert advanced[0].details["to"] == advanced[0].time


def test_trace_does_not_change_the_plan(sample_packages, sample_fleet):
    plain = ShipmentPlanner(sample_packages, sample_fleet).plan()
    traced = ShipmentPlanner(sample_packages, sample_fleet, trace=RecordingTraceSink()).plan()
    assert plain == traced


def test_recording_sink_clear():
    sink = RecordingTraceSink()
    sink.emit(TraceEvent(TraceEventKind.PLANNING_STARTED, 0.0))
    assert len(sink) == 1
    sink.clear()
    assert len(sink) == 0


def test_logging_sink(caplog):
    sink = LoggingTraceSink()
    with caplog.at_level(logging.DEBUG, logger="courier_dispatch.trace"):
        sink.emit(TraceEvent(TraceEventKind.VEHICLE_ASSIGNED, 1.5, vehicle_id=3, package_ids=("P1", "P2")))

    assert "vehicle_assigned @ 1.50h vehicle=3 packages=P1+P2" in caplog.text


def test_empty_recorder_is_used_by_planner(saturation_packages, single_truck):
    sink = RecordingTraceSink()
    planner = ShipmentPlanner(saturation_packages, single_truck, trace=sink)

    assert planner.trace is sink
    planner.plan()
    assert len(sink) > 0
