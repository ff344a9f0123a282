"""
Courier Dispatch - package pricing and capacity-constrained delivery scheduling
"""

__version__ = "1.0.0"

from courier_dispatch.models import Package, Offer, Vehicle, Shipment, DeliveryResult, DeliveryPlan
from courier_dispatch.pricing import OfferCatalog, CostCalculator
from courier_dispatch.solvers import CapacityPacker, FleetClock, ShipmentPlanner
from courier_dispatch.engine import CourierDispatchEngine, plan

__all__ = [
    "Package",
    "Offer",
    "Vehicle",
    "Shipment",
    "DeliveryResult",
    "DeliveryPlan",
    "OfferCatalog",
    "CostCalculator",
    "CapacityPacker",
    "FleetClock",
    "ShipmentPlanner",
    "CourierDispatchEngine",
    "plan",
]
