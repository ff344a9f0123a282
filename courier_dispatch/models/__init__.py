from .package import Package
from .offer import Offer
from .vehicle import Vehicle
from .shipment import Shipment
from .result import CostBreakdown, DeliveryResult
from .plan import DeliveryPlan

__all__ = ["Package", "Offer", "Vehicle", "Shipment", "CostBreakdown", "DeliveryResult", "DeliveryPlan"]
