"""
Vehicle (Fleet) Model
"""
from dataclasses import dataclass, replace


@dataclass
class Vehicle:
    """Represents a delivery vehicle"""

    id: int
    max_speed: float  # km/hr
    max_carriable_weight: float  # kg

    # Simulated hours until which the vehicle is out on a trip
    available_time: float = 0.0

    name: str = ""

    @property
    def display_name(self) -> str:
        return self.name or f"Vehicle {self.id:02d}"

    def can_fit_weight(self, weight: float, current_load: float = 0.0) -> bool:
        """Check if vehicle can carry additional weight"""
        return (current_load + weight) <= self.max_carriable_weight

    def travel_time(self, distance: float) -> float:
        """One-way travel time in hours for a given distance"""
        return distance / self.max_speed

    def copy(self) -> "Vehicle":
        return replace(self)

    def __str__(self):
        return (
            f"Vehicle({self.id}, {self.max_speed}km/hr, capacity={self.max_carriable_weight}kg, "
            f"available@{self.available_time:.2f}h)"
        )

    def __repr__(self):
        return self.__str__()

    def __hash__(self):
        return hash(self.id)
