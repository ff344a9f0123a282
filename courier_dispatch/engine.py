"""
Courier Dispatch Engine - prices packages and schedules their delivery
"""
import logging
import math
from typing import Iterable, List

from .models import DeliveryPlan, Offer, Package, Vehicle
from .pricing import CostCalculator, OfferCatalog
from .constraints import InputValidator
from .solvers import CapacityPacker, ShipmentPlanner
from .aggregation import ResultAggregator
from .trace import TraceSink

logger = logging.getLogger(__name__)


class CourierDispatchEngine:
    """
    Entry point for a planning run.

    Pricing and scheduling are independent: costs never depend on the order
    in which packages ship. Both are merged into one DeliveryPlan.
    """

    def __init__(self, catalog: OfferCatalog = None, packer: CapacityPacker = None):
        self.catalog = catalog if catalog is not None else OfferCatalog.default()
        self.calculator = CostCalculator(self.catalog)
        self.packer = packer if packer is not None else CapacityPacker()
        self.validator = InputValidator()
        self.aggregator = ResultAggregator()

    def list_offers(self) -> List[Offer]:
        return self.catalog.list_offers()

    def plan(
        self,
        packages: List[Package],
        vehicles: List[Vehicle],
        base_delivery_cost: float,
        trace: TraceSink = None,
    ) -> DeliveryPlan:
        """
        Validate, price and schedule.

        Raises InvalidPackageError, EmptyFleetError, InvalidVehicleError or
        UnroutablePackageError before any shipment is created.
        """
        packages = list(packages)
        vehicles = list(vehicles)

        if not math.isfinite(base_delivery_cost) or base_delivery_cost < 0:
            raise ValueError(f"Base delivery cost must be a finite, non-negative number: {base_delivery_cost}")

        self.validator.validate(packages, vehicles)

        costs = self.calculator.price_all(packages, base_delivery_cost)

        planner = ShipmentPlanner(packages, vehicles, packer=self.packer, trace=trace)
        shipments = planner.plan()

        results = self.aggregator.aggregate(packages, shipments, costs)

        logger.debug(
            "Plan ready: %d packages, %d shipments, last drop-off at %.2fh",
            len(results),
            len(shipments),
            max((s.delivery_time for s in shipments), default=0.0),
        )

        return DeliveryPlan(
            shipments=shipments,
            results=results,
            vehicles=planner.fleet_snapshot,
            base_delivery_cost=base_delivery_cost,
        )


def plan(
    packages: List[Package],
    vehicles: List[Vehicle],
    base_delivery_cost: float,
    offers: Iterable[Offer] = None,
    trace: TraceSink = None,
) -> DeliveryPlan:
    """Run one planning pass with a fresh engine"""
    catalog = OfferCatalog(offers) if offers is not None else OfferCatalog.default()
    return CourierDispatchEngine(catalog).plan(packages, vehicles, base_delivery_cost, trace=trace)
