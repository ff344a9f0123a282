"""
Shipment Constraint Checking Utilities
"""
from typing import Iterable, List, Tuple
from ..models import Package, Vehicle, Shipment


class ShipmentConstraintChecker:
    """Quick constraint checks for load construction"""

    @staticmethod
    def can_add_package(vehicle: Vehicle, package: Package, current_load: float) -> Tuple[bool, str]:
        """
        Check if a package can be added to a load
        Returns: (can_add, reason_if_not)
        """
        if not vehicle.can_fit_weight(package.weight, current_load):
            return False, "Exceeds vehicle capacity"
        return True, "OK"

    @staticmethod
    def can_depart(vehicle: Vehicle, departure_time: float) -> bool:
        """A vehicle may not leave before it is back from its previous trip"""
        return vehicle.available_time <= departure_time

    @staticmethod
    def carriable_by_any(package: Package, vehicles: Iterable[Vehicle]) -> bool:
        return any(v.can_fit_weight(package.weight) for v in vehicles)

    @staticmethod
    def find_unroutable(packages: Iterable[Package], vehicles: List[Vehicle]) -> List[str]:
        """Ids of packages heavier than every vehicle's capacity"""
        return [p.id for p in packages if not ShipmentConstraintChecker.carriable_by_any(p, vehicles)]

    @staticmethod
    def shipment_within_capacity(shipment: Shipment, vehicle: Vehicle) -> bool:
        return shipment.total_weight <= vehicle.max_carriable_weight
