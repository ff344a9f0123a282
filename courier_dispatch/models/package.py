"""
Package (Parcel) Model
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Package:
    """Represents a parcel to be priced and delivered"""

    id: str
    weight: float  # Weight in kg
    distance: float  # Distance from depot in km
    offer_code: Optional[str] = None

    def has_offer_code(self) -> bool:
        """Check if the package carries a (non-blank) offer code"""
        return bool(self.offer_code and self.offer_code.strip())

    def __str__(self):
        offer_str = f", offer={self.offer_code}" if self.has_offer_code() else ""
        return f"Package({self.id}, {self.weight}kg, {self.distance}km{offer_str})"
