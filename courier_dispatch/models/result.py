"""
Pricing and Delivery Result Models
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CostBreakdown:
    """Cost components for a single package"""

    package_id: str
    base_cost: float
    weight_cost: float
    distance_cost: float
    discount: float = 0.0
    offer_code: Optional[str] = None  # Code actually applied, None if no discount

    @property
    def original_cost(self) -> float:
        return self.base_cost + self.weight_cost + self.distance_cost

    @property
    def total_cost(self) -> float:
        return self.original_cost - self.discount

    @property
    def has_discount(self) -> bool:
        return self.discount > 0


@dataclass(frozen=True)
class DeliveryResult:
    """Final per-package outcome: cost, discount and estimated delivery time"""

    package_id: str
    original_cost: float
    discount: float
    total_cost: float
    estimated_delivery_time: float  # hours
    vehicle_id: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "id": self.package_id,
            "original_cost": round(self.original_cost, 2),
            "discount": round(self.discount, 2),
            "total_cost": round(self.total_cost, 2),
            "estimated_delivery_time": round(self.estimated_delivery_time, 2),
            "vehicle_id": self.vehicle_id,
        }

    def __str__(self):
        return (
            f"DeliveryResult({self.package_id}, discount={self.discount:.2f}, "
            f"total={self.total_cost:.2f}, eta={self.estimated_delivery_time:.2f}h)"
        )
