"""
Result Aggregator - merges pricing with schedule timing
"""
from typing import Dict, List

from ..models import CostBreakdown, DeliveryResult, Package, Shipment
from ..errors import ErrorKind, PlanningError


class ResultAggregator:
    """Builds exactly one DeliveryResult per input package"""

    def aggregate(
        self,
        packages: List[Package],
        shipments: List[Shipment],
        costs: Dict[str, CostBreakdown],
    ) -> List[DeliveryResult]:
        """
        Combine cost and timing, in input package order.

        estimated_delivery_time is the carrying shipment's departure plus its
        one-way time (never the round trip).
        """
        shipment_by_package = self._index_shipments(shipments)

        missing_shipment = [p.id for p in packages if p.id not in shipment_by_package]
        if missing_shipment:
            raise PlanningError(
                f"Packages missing from schedule: {', '.join(missing_shipment)}",
                ErrorKind.INCONSISTENT_PLAN,
                missing_shipment,
            )

        missing_cost = [p.id for p in packages if p.id not in costs]
        if missing_cost:
            raise PlanningError(
                f"Packages missing a price: {', '.join(missing_cost)}",
                ErrorKind.INCONSISTENT_PLAN,
                missing_cost,
            )

        results = []
        for package in packages:
            shipment = shipment_by_package[package.id]
            cost = costs[package.id]
            results.append(
                DeliveryResult(
                    package_id=package.id,
                    original_cost=cost.original_cost,
                    discount=cost.discount,
                    total_cost=cost.total_cost,
                    estimated_delivery_time=shipment.delivery_time,
                    vehicle_id=shipment.vehicle_id,
                )
            )

        return results

    @staticmethod
    def _index_shipments(shipments: List[Shipment]) -> Dict[str, Shipment]:
        index: Dict[str, Shipment] = {}
        duplicates = []

        for shipment in shipments:
            for package_id in shipment.package_ids:
                if package_id in index:
                    duplicates.append(package_id)
                index[package_id] = shipment

        if duplicates:
            raise PlanningError(
                f"Packages assigned to more than one shipment: {', '.join(duplicates)}",
                ErrorKind.INCONSISTENT_PLAN,
                duplicates,
            )

        return index
