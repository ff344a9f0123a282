from .base_solver import BaseSolver
from .capacity_packer import CapacityPacker, PackedLoad
from .fleet_clock import FleetClock
from .shipment_planner import ShipmentPlanner, PlannerState

__all__ = ["BaseSolver", "CapacityPacker", "PackedLoad", "FleetClock", "ShipmentPlanner", "PlannerState"]
