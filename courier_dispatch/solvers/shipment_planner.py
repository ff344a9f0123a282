"""
Shipment Planner - assigns packages to vehicle trips over a simulated clock
"""
import logging
from enum import Enum
from typing import List, Optional, Tuple

from .base_solver import BaseSolver
from .capacity_packer import CapacityPacker, PackedLoad
from .fleet_clock import FleetClock
from ..models import Package, Vehicle, Shipment
from ..constraints import ShipmentConstraintChecker
from ..errors import EmptyFleetError, UnroutablePackageError
from ..trace import NullTraceSink, TraceEvent, TraceEventKind, TraceSink

logger = logging.getLogger(__name__)


class PlannerState(Enum):
    PLANNING = "PLANNING"  # Packages remain unassigned
    WAITING = "WAITING"  # No vehicle ready; clock must advance
    ASSIGNING = "ASSIGNING"  # A ready vehicle is being loaded
    DONE = "DONE"  # Every package assigned


class ShipmentPlanner(BaseSolver):
    """
    Greedy, event-driven dispatcher.

    Algorithm:
    1. If a vehicle is ready at the current time, take the earliest-available
       one (lowest id on ties) and pack the heaviest load it can carry
    2. Otherwise advance the clock to the next vehicle return
    3. A loaded vehicle departs now, is away for 2 x one-way time, and the
       clock moves forward by the one-way time before the next assignment
    4. Stop once no packages remain
    """

    def __init__(
        self,
        packages: List[Package],
        vehicles: List[Vehicle],
        packer: CapacityPacker = None,
        trace: TraceSink = None,
    ):
        super().__init__(packages, vehicles)
        self.packer = packer if packer is not None else CapacityPacker()
        self.trace = trace if trace is not None else NullTraceSink()
        self.state = PlannerState.PLANNING
        self.current_time = 0.0
        self.fleet_snapshot: List[Vehicle] = []

    def plan(self) -> List[Shipment]:
        if not self.vehicles:
            raise EmptyFleetError()

        unroutable = ShipmentConstraintChecker.find_unroutable(self.packages, self.vehicles)
        if unroutable:
            raise UnroutablePackageError(unroutable)

        clock = FleetClock(self.vehicles)
        unassigned = list(self.packages)
        shipments: List[Shipment] = []
        self.current_time = 0.0
        self.state = PlannerState.PLANNING

        self._emit(
            TraceEventKind.PLANNING_STARTED,
            details={"packages": len(unassigned), "vehicles": len(clock)},
        )

        while unassigned:
            ready = clock.ready_vehicles(self.current_time)
            if not ready:
                self._wait(clock)
                continue

            self.state = PlannerState.ASSIGNING
            vehicle, load = self._choose_load(ready, unassigned)

            if vehicle is None:
                # Nothing left fits any ready vehicle; wait for a busy one or give up
                if not clock.busy_vehicles(self.current_time):
                    stuck = ShipmentConstraintChecker.find_unroutable(unassigned, self.vehicles)
                    raise UnroutablePackageError(stuck or [p.id for p in unassigned])
                self._wait(clock)
                continue

            shipment = self._create_shipment(list(load.packages), vehicle, self.current_time)
            available_after = clock.commit(vehicle.id, shipment.departure_time, shipment.one_way_time)
            shipments.append(shipment)

            for package in load.packages:
                self._emit(
                    TraceEventKind.PACKAGE_PACKED,
                    vehicle_id=vehicle.id,
                    package_ids=(package.id,),
                    details={"weight": package.weight, "distance": package.distance},
                )
            self._emit(
                TraceEventKind.VEHICLE_ASSIGNED,
                vehicle_id=vehicle.id,
                package_ids=tuple(shipment.package_ids),
                details={
                    "total_weight": shipment.total_weight,
                    "max_distance": shipment.max_distance,
                    "one_way_time": shipment.one_way_time,
                    "return_time": shipment.return_time,
                    "available_after": available_after,
                },
            )

            packed_ids = set(shipment.package_ids)
            unassigned = [p for p in unassigned if p.id not in packed_ids]

            self.current_time += shipment.one_way_time
            self.state = PlannerState.PLANNING

        self.state = PlannerState.DONE
        self.fleet_snapshot = clock.snapshot()

        self._emit(
            TraceEventKind.PLANNING_COMPLETED,
            details={"shipments": len(shipments)},
        )
        logger.debug("Planned %d packages into %d shipments", len(self.packages), len(shipments))

        return shipments

    def _choose_load(self, ready: List[Vehicle], pool: List[Package]) -> Tuple[Optional[Vehicle], PackedLoad]:
        """First ready vehicle (in tie-break order) that can carry something"""
        for vehicle in ready:
            load = self.packer.pack(pool, vehicle)
            if not load.is_empty:
                return vehicle, load
            logger.debug("Vehicle %s cannot carry any remaining package", vehicle.id)
        return None, PackedLoad()

    def _wait(self, clock: FleetClock):
        self.state = PlannerState.WAITING
        previous = self.current_time
        self.current_time = clock.advance_to_next_available(self.current_time)
        self._emit(TraceEventKind.TIME_ADVANCED, details={"from": previous, "to": self.current_time})

    def _emit(self, kind: TraceEventKind, vehicle_id: int = None, package_ids=(), details: dict = None):
        self.trace.emit(
            TraceEvent(
                kind=kind,
                time=self.current_time,
                vehicle_id=vehicle_id,
                package_ids=tuple(package_ids),
                details=details or {},
            )
        )
