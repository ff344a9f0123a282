"""
Planning Errors
"""
from enum import Enum
from typing import Dict, Iterable, List, Tuple


class ErrorKind(Enum):
    """Failure categories surfaced to callers"""

    INVALID_PACKAGE = "INVALID_PACKAGE"
    INVALID_VEHICLE = "INVALID_VEHICLE"
    EMPTY_FLEET = "EMPTY_FLEET"
    UNROUTABLE_PACKAGE = "UNROUTABLE_PACKAGE"
    INCONSISTENT_PLAN = "INCONSISTENT_PLAN"


class PlanningError(Exception):
    """Base class for structured planning failures (kind + offending identifiers)"""

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.INCONSISTENT_PLAN, identifiers: Iterable = ()):
        super().__init__(message)
        self.kind = kind
        self.identifiers: Tuple = tuple(identifiers)

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "message": str(self), "identifiers": list(self.identifiers)}


class InvalidPackageError(PlanningError):
    """One or more packages failed validation"""

    def __init__(self, errors: Dict[str, List[str]]):
        self.errors = dict(errors)
        details = "; ".join(f"{pkg_id or '<blank>'}: {', '.join(msgs)}" for pkg_id, msgs in self.errors.items())
        super().__init__(f"Package validation failed: {details}", ErrorKind.INVALID_PACKAGE, self.errors.keys())


class InvalidVehicleError(PlanningError):
    """One or more vehicles failed validation"""

    def __init__(self, errors: Dict[int, List[str]]):
        self.errors = dict(errors)
        details = "; ".join(f"{vehicle_id}: {', '.join(msgs)}" for vehicle_id, msgs in self.errors.items())
        super().__init__(f"Vehicle validation failed: {details}", ErrorKind.INVALID_VEHICLE, self.errors.keys())


class EmptyFleetError(PlanningError):
    def __init__(self):
        super().__init__("No vehicles supplied", ErrorKind.EMPTY_FLEET)


class UnroutablePackageError(PlanningError):
    """Packages that no vehicle in the fleet can carry"""

    def __init__(self, package_ids: Iterable[str]):
        package_ids = list(package_ids)
        super().__init__(
            f"Packages exceed the capacity of every vehicle: {', '.join(package_ids)}",
            ErrorKind.UNROUTABLE_PACKAGE,
            package_ids,
        )


class BatchFormatError(ValueError):
    """Malformed batch text input"""

    def __init__(self, message: str, line_number: int = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
