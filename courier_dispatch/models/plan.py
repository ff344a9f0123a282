"""
Delivery Plan Model - Represents the complete output of a planning run
"""
from dataclasses import dataclass, field
from typing import List, Dict, Optional
from .shipment import Shipment
from .result import DeliveryResult
from .vehicle import Vehicle


@dataclass
class DeliveryPlan:
    """Shipments and per-package results of one planning run"""

    shipments: List[Shipment] = field(default_factory=list)
    results: List[DeliveryResult] = field(default_factory=list)
    vehicles: List[Vehicle] = field(default_factory=list)  # Snapshot after the last commit
    base_delivery_cost: float = 0.0

    @property
    def total_trips(self) -> int:
        return len(self.shipments)

    @property
    def completion_time(self) -> float:
        """Clock time of the last drop-off"""
        if not self.shipments:
            return 0.0
        return max(s.delivery_time for s in self.shipments)

    @property
    def fleet_return_time(self) -> float:
        """Clock time at which the last vehicle is back at the depot"""
        if not self.shipments:
            return 0.0
        return max(s.return_time for s in self.shipments)

    def _vehicle_capacity(self, vehicle_id: int) -> float:
        for vehicle in self.vehicles:
            if vehicle.id == vehicle_id:
                return vehicle.max_carriable_weight
        return 0.0

    def get_shipment_utilization(self, shipment: Shipment) -> float:
        """Load of a shipment as a percentage of its vehicle's capacity"""
        capacity = self._vehicle_capacity(shipment.vehicle_id)
        if capacity == 0:
            return 0.0
        return (shipment.total_weight / capacity) * 100

    def get_average_utilization(self) -> float:
        """Get average capacity utilization across all shipments"""
        if not self.shipments:
            return 0.0
        return sum(self.get_shipment_utilization(s) for s in self.shipments) / len(self.shipments)

    def get_utilization_stats(self) -> Dict[str, float]:
        """Get detailed utilization statistics"""
        if not self.shipments:
            return {"min": 0, "max": 0, "avg": 0, "std": 0}

        utils = [self.get_shipment_utilization(s) for s in self.shipments]
        import numpy as np

        return {
            "min": min(utils),
            "max": max(utils),
            "avg": float(np.mean(utils)),
            "std": float(np.std(utils)),
        }

    def get_trips_per_vehicle(self) -> Dict[int, List[Shipment]]:
        """Group shipments by vehicle, each list in departure order"""
        trips = {v.id: [] for v in self.vehicles}
        for shipment in self.shipments:
            trips.setdefault(shipment.vehicle_id, []).append(shipment)
        for vehicle_trips in trips.values():
            vehicle_trips.sort(key=lambda s: s.departure_time)
        return trips

    def get_schedule_summary(self) -> dict:
        """Headline numbers for the whole schedule"""
        total_packages = len(self.results)
        total_weight = sum(s.total_weight for s in self.shipments)
        total_capacity = sum(v.max_carriable_weight for v in self.vehicles)
        utilization_rate = (total_weight / total_capacity) * 100 if total_capacity else 0.0

        return {
            "total_packages": total_packages,
            "total_vehicles": len(self.vehicles),
            "estimated_total_time": round(self.completion_time, 2),
            "estimated_trips": self.total_trips,
            "average_packages_per_trip": round(total_packages / self.total_trips, 2) if self.total_trips else 0.0,
            "utilization_rate": round(min(utilization_rate, 100.0), 2),
        }

    def cost_totals(self) -> Dict[str, float]:
        """Summed original cost, discount and final cost"""
        original = sum(r.original_cost for r in self.results)
        discount = sum(r.discount for r in self.results)
        final = sum(r.total_cost for r in self.results)
        return {
            "original_cost": original,
            "total_discount": discount,
            "final_cost": final,
            "savings": original - final,
        }

    def result_for(self, package_id: str) -> Optional[DeliveryResult]:
        for result in self.results:
            if result.package_id == package_id:
                return result
        return None

    def shipment_for(self, package_id: str) -> Optional[Shipment]:
        for shipment in self.shipments:
            if shipment.contains(package_id):
                return shipment
        return None

    def to_dict(self) -> dict:
        """Convert plan to dictionary for export"""
        return {
            "base_delivery_cost": self.base_delivery_cost,
            "summary": self.get_schedule_summary(),
            "costs": {k: round(v, 2) for k, v in self.cost_totals().items()},
            "average_utilization": round(self.get_average_utilization(), 2),
            "results": [r.to_dict() for r in self.results],
            "shipments": [
                {
                    "vehicle_id": s.vehicle_id,
                    "packages": s.package_ids,
                    "total_weight": round(s.total_weight, 2),
                    "max_distance": round(s.max_distance, 2),
                    "departure_time": round(s.departure_time, 2),
                    "delivery_time": round(s.delivery_time, 2),
                    "return_time": round(s.return_time, 2),
                    "utilization": round(self.get_shipment_utilization(s), 2),
                }
                for s in self.shipments
            ],
        }

    def to_dataframe(self):
        """Per-package results as a pandas DataFrame"""
        import pandas as pd

        rows = []
        for result in self.results:
            shipment = self.shipment_for(result.package_id)
            rows.append(
                {
                    "package_id": result.package_id,
                    "vehicle_id": result.vehicle_id,
                    "original_cost": result.original_cost,
                    "discount": result.discount,
                    "total_cost": result.total_cost,
                    "departure_time": shipment.departure_time if shipment else None,
                    "estimated_delivery_time": result.estimated_delivery_time,
                }
            )
        return pd.DataFrame(
            rows,
            columns=[
                "package_id",
                "vehicle_id",
                "original_cost",
                "discount",
                "total_cost",
                "departure_time",
                "estimated_delivery_time",
            ],
        )

    def __str__(self):
        return f"DeliveryPlan({len(self.results)} packages, {self.total_trips} trips, done@{self.completion_time:.2f}h)"
