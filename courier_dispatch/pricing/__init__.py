from .offer_catalog import OfferCatalog
from .cost_calculator import CostCalculator

__all__ = ["OfferCatalog", "CostCalculator"]
