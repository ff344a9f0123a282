"""
Constraint Validation System
"""
import logging
import math
from collections import Counter
from typing import Dict, List, Tuple

from ..models import Package, Vehicle, Shipment
from ..errors import EmptyFleetError, InvalidPackageError, InvalidVehicleError, UnroutablePackageError
from .checker import ShipmentConstraintChecker

logger = logging.getLogger(__name__)


def is_positive_number(value) -> bool:
    """Finite and > 0; rejects NaN, infinities and bools"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


class InputValidator:
    """Rejects bad packages and fleets before any shipment is created"""

    @staticmethod
    def package_errors(package: Package) -> List[str]:
        errors = []

        if not package.id or not str(package.id).strip():
            errors.append("Package ID is required")

        if not is_positive_number(package.weight):
            errors.append("Package weight must be a positive number")

        if not is_positive_number(package.distance):
            errors.append("Package distance must be a positive number")

        return errors

    @staticmethod
    def vehicle_errors(vehicle: Vehicle) -> List[str]:
        errors = []

        if not is_positive_number(vehicle.max_speed):
            errors.append("Vehicle speed must be a positive number")

        if not is_positive_number(vehicle.max_carriable_weight):
            errors.append("Vehicle capacity must be a positive number")

        if not math.isfinite(vehicle.available_time) or vehicle.available_time < 0:
            errors.append("Vehicle available time must be a finite, non-negative number")

        return errors

    def validate_packages(self, packages: List[Package]):
        """Raise InvalidPackageError listing every offending package"""
        errors: Dict[str, List[str]] = {}

        for package in packages:
            package_errors = self.package_errors(package)
            if package_errors:
                errors.setdefault(package.id, []).extend(package_errors)

        counts = Counter(p.id for p in packages)
        for package_id, count in counts.items():
            if count > 1 and package_id:
                errors.setdefault(package_id, []).append(f"Duplicate package ID (appears {count} times)")

        if errors:
            raise InvalidPackageError(errors)

    def validate_vehicles(self, vehicles: List[Vehicle]):
        """Raise EmptyFleetError or InvalidVehicleError"""
        if not vehicles:
            raise EmptyFleetError()

        errors: Dict[int, List[str]] = {}
        for vehicle in vehicles:
            vehicle_errors = self.vehicle_errors(vehicle)
            if vehicle_errors:
                errors.setdefault(vehicle.id, []).extend(vehicle_errors)

        counts = Counter(v.id for v in vehicles)
        for vehicle_id, count in counts.items():
            if count > 1:
                errors.setdefault(vehicle_id, []).append(f"Duplicate vehicle ID (appears {count} times)")

        if errors:
            raise InvalidVehicleError(errors)

    def validate_routable(self, packages: List[Package], vehicles: List[Vehicle]):
        unroutable = ShipmentConstraintChecker.find_unroutable(packages, vehicles)
        if unroutable:
            raise UnroutablePackageError(unroutable)

    def validate(self, packages: List[Package], vehicles: List[Vehicle]):
        """Run every input check in order: packages, fleet, routability"""
        self.validate_packages(packages)
        self.validate_vehicles(vehicles)
        self.validate_routable(packages, vehicles)


class PlanValidator:
    """Validates the invariants of a finished schedule"""

    def validate_plan(
        self, packages: List[Package], vehicles: List[Vehicle], shipments: List[Shipment]
    ) -> Tuple[bool, List[str]]:
        """
        Validate all invariants for a set of shipments
        Returns: (is_valid, list_of_violations)
        """
        violations = []

        # 1. Coverage
        violations.extend(self._check_coverage(packages, shipments))

        # 2. Capacity
        violations.extend(self._check_capacity(vehicles, shipments))

        # 3. Vehicle availability
        violations.extend(self._check_availability(vehicles, shipments))

        if violations:
            logger.warning("Plan failed validation with %d violation(s)", len(violations))

        return len(violations) == 0, violations

    def _check_coverage(self, packages: List[Package], shipments: List[Shipment]) -> List[str]:
        """Every package in exactly one shipment"""
        violations = []
        counts = Counter(pkg_id for s in shipments for pkg_id in s.package_ids)

        for package in packages:
            count = counts.pop(package.id, 0)
            if count == 0:
                violations.append(f"Package {package.id} is not assigned to any shipment")
            elif count > 1:
                violations.append(f"Package {package.id} is assigned to {count} shipments")

        for package_id in counts:
            violations.append(f"Shipment carries unknown package {package_id}")

        return violations

    def _check_capacity(self, vehicles: List[Vehicle], shipments: List[Shipment]) -> List[str]:
        violations = []
        vehicle_dict = {v.id: v for v in vehicles}

        for shipment in shipments:
            vehicle = vehicle_dict.get(shipment.vehicle_id)
            if vehicle is None:
                violations.append(f"Shipment uses unknown vehicle {shipment.vehicle_id}")
            elif not ShipmentConstraintChecker.shipment_within_capacity(shipment, vehicle):
                violations.append(
                    f"Capacity exceeded on vehicle {vehicle.id}: "
                    f"{shipment.total_weight:.2f} > {vehicle.max_carriable_weight}"
                )

        return violations

    def _check_availability(self, vehicles: List[Vehicle], shipments: List[Shipment]) -> List[str]:
        """Consecutive trips of one vehicle never overlap"""
        violations = []
        start_times = {v.id: v.available_time for v in vehicles}
        by_vehicle: Dict[int, List[Shipment]] = {}
        for shipment in shipments:
            by_vehicle.setdefault(shipment.vehicle_id, []).append(shipment)

        for vehicle_id, trips in by_vehicle.items():
            trips.sort(key=lambda s: s.departure_time)
            if trips[0].departure_time < start_times.get(vehicle_id, 0.0):
                violations.append(f"Vehicle {vehicle_id} departs before it is available")
            for previous, current in zip(trips, trips[1:]):
                if current.overlaps(previous):
                    violations.append(
                        f"Vehicle {vehicle_id} departs at {current.departure_time:.2f} "
                        f"before returning at {previous.return_time:.2f}"
                    )

        return violations
