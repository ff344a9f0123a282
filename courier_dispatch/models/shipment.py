"""
Shipment Model
"""
from dataclasses import dataclass
from typing import List, Tuple
from .package import Package


@dataclass(frozen=True)
class Shipment:
    """One vehicle's single round trip carrying a fixed set of packages"""

    packages: Tuple[Package, ...]
    vehicle_id: int
    departure_time: float
    one_way_time: float  # Time to reach the farthest drop-off
    return_time: float  # departure_time + 2 * one_way_time

    @property
    def total_weight(self) -> float:
        return sum(p.weight for p in self.packages)

    @property
    def max_distance(self) -> float:
        if not self.packages:
            return 0.0
        return max(p.distance for p in self.packages)

    @property
    def delivery_time(self) -> float:
        """Clock time at which the shipment reaches its farthest drop-off"""
        return self.departure_time + self.one_way_time

    @property
    def package_ids(self) -> List[str]:
        return [p.id for p in self.packages]

    def contains(self, package_id: str) -> bool:
        return any(p.id == package_id for p in self.packages)

    def overlaps(self, other: "Shipment") -> bool:
        """Check if two trips occupy overlapping time on the clock"""
        return self.departure_time < other.return_time and other.departure_time < self.return_time

    def __len__(self):
        return len(self.packages)

    def __str__(self):
        packages_str = " + ".join(self.package_ids)
        return (
            f"Shipment(vehicle {self.vehicle_id}: {packages_str}, {self.total_weight:.1f}kg, "
            f"depart {self.departure_time:.2f}h, back {self.return_time:.2f}h)"
        )
