"""
Offer (Discount Rule) Model
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Offer:
    """A discount granted when both weight and distance fall inside the ranges"""

    code: str
    discount_percent: float
    min_distance: float
    max_distance: float
    min_weight: float
    max_weight: float

    def applies_to(self, weight: float, distance: float) -> bool:
        """Check both ranges, inclusive on each side"""
        return (
            self.min_distance <= distance <= self.max_distance
            and self.min_weight <= weight <= self.max_weight
        )

    def __str__(self):
        return (
            f"Offer({self.code}, {self.discount_percent}% off, "
            f"{self.min_distance}-{self.max_distance}km, {self.min_weight}-{self.max_weight}kg)"
        )
