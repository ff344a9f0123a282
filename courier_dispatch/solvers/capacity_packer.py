"""
Capacity Packer - selects the packages one vehicle carries on a single trip
"""
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..models import Package, Vehicle
from ..constraints import ShipmentConstraintChecker


@dataclass(frozen=True)
class PackedLoad:
    """Subset of packages chosen for one trip"""

    packages: Tuple[Package, ...] = ()

    @property
    def total_weight(self) -> float:
        return sum(p.weight for p in self.packages)

    @property
    def max_distance(self) -> float:
        """The trip must reach the farthest drop-off"""
        if not self.packages:
            return 0.0
        return max(p.distance for p in self.packages)

    @property
    def is_empty(self) -> bool:
        return not self.packages

    def __len__(self):
        return len(self.packages)


class CapacityPacker:
    """
    Anchor heuristic for filling a vehicle without exceeding its capacity.

    Algorithm:
    1. Sort candidates by weight, heaviest first (stable, so equal weights keep pool order)
    2. For every start index i, take sorted[i] as anchor and walk forward,
       adding each package that still fits under capacity
    3. Keep the accumulation with the greatest total weight; on a tie the
       one found first (smallest i) wins

    This is an O(n^2) greedy search, not an exact subset-sum solver. It can miss
    a heavier feasible combination, e.g. capacity 12 with weights [6, 5, 4, 2]
    yields 6 + 5 = 11 rather than 6 + 4 + 2 = 12.
    """

    def pack(self, pool: Sequence[Package], vehicle: Vehicle) -> PackedLoad:
        """Select the subset of `pool` to load on `vehicle` for one trip"""
        if not pool:
            return PackedLoad()

        candidates = sorted(pool, key=lambda p: p.weight, reverse=True)

        best: List[Package] = []
        best_weight = 0.0

        for start in range(len(candidates)):
            load, load_weight = self._accumulate(candidates, start, vehicle)
            if load and load_weight > best_weight:
                best = load
                best_weight = load_weight

        return PackedLoad(packages=tuple(best))

    def _accumulate(self, candidates: List[Package], start: int, vehicle: Vehicle) -> Tuple[List[Package], float]:
        load: List[Package] = []
        load_weight = 0.0

        for package in candidates[start:]:
            can_add, _ = ShipmentConstraintChecker.can_add_package(vehicle, package, load_weight)
            if can_add:
                load.append(package)
                load_weight += package.weight

        return load, load_weight
