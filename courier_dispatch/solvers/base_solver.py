"""
Base Solver Interface
"""
from abc import ABC, abstractmethod
from typing import List
from ..models import Package, Vehicle, Shipment


class BaseSolver(ABC):
    """Base class for shipment schedulers"""

    def __init__(self, packages: List[Package], vehicles: List[Vehicle]):
        # Private copies; the caller's lists and vehicles stay untouched
        self.packages = list(packages)
        self.vehicles = [v.copy() for v in vehicles]

    @abstractmethod
    def plan(self) -> List[Shipment]:
        """
        Assign every package to a shipment
        Returns: shipments in departure order
        """
        pass

    def _calculate_one_way_time(self, distance: float, vehicle: Vehicle) -> float:
        """Time to reach the farthest drop-off"""
        return vehicle.travel_time(distance)

    def _create_shipment(self, packages: List[Package], vehicle: Vehicle, departure_time: float) -> Shipment:
        """Create shipment object for a trip starting at `departure_time`"""
        max_distance = max(p.distance for p in packages)
        one_way_time = self._calculate_one_way_time(max_distance, vehicle)

        return Shipment(
            packages=tuple(packages),
            vehicle_id=vehicle.id,
            departure_time=departure_time,
            one_way_time=one_way_time,
            return_time=departure_time + 2 * one_way_time,
        )
