from .checker import ShipmentConstraintChecker
from .validator import InputValidator, PlanValidator, is_positive_number

__all__ = ["ShipmentConstraintChecker", "InputValidator", "PlanValidator", "is_positive_number"]
