"""
Data Loading Utilities
"""
import json
import csv
from typing import List
from ..models import Package, Vehicle


class DataLoader:
    """Load data from various formats"""

    @staticmethod
    def _offer_code(value) -> str:
        if value is None:
            return None
        value = str(value).strip()
        return value or None

    @staticmethod
    def load_packages_from_json(file_path: str) -> List[Package]:
        """Load packages from JSON file"""
        with open(file_path, "r") as f:
            data = json.load(f)

        packages = []
        for item in data:
            package = Package(
                id=str(item["id"]),
                weight=float(item["weight"]),
                distance=float(item["distance"]),
                offer_code=DataLoader._offer_code(item.get("offer_code")),
            )
            packages.append(package)

        return packages

    @staticmethod
    def load_packages_from_csv(file_path: str) -> List[Package]:
        """Load packages from CSV file (columns: id, weight, distance[, offer_code])"""
        packages = []

        with open(file_path, "r", newline="") as f:
            reader = csv.DictReader(f)
            for row in reader:
                package = Package(
                    id=row["id"].strip(),
                    weight=float(row["weight"]),
                    distance=float(row["distance"]),
                    offer_code=DataLoader._offer_code(row.get("offer_code")),
                )
                packages.append(package)

        return packages

    @staticmethod
    def load_vehicles_from_json(file_path: str) -> List[Vehicle]:
        """Load vehicles from JSON file"""
        with open(file_path, "r") as f:
            data = json.load(f)

        vehicles = []
        for item in data:
            vehicle = Vehicle(
                id=int(item["id"]),
                max_speed=float(item["max_speed"]),
                max_carriable_weight=float(item["max_carriable_weight"]),
                available_time=float(item.get("available_time", 0.0)),
                name=item.get("name", ""),
            )
            vehicles.append(vehicle)

        return vehicles

    @staticmethod
    def load_vehicles_from_csv(file_path: str) -> List[Vehicle]:
        """Load vehicles from CSV file"""
        vehicles = []

        with open(file_path, "r", newline="") as f:
            reader = csv.DictReader(f)
            for row in reader:
                vehicle = Vehicle(
                    id=int(row["id"]),
                    max_speed=float(row["max_speed"]),
                    max_carriable_weight=float(row["max_carriable_weight"]),
                    available_time=float(row.get("available_time") or 0.0),
                    name=row.get("name", "") or "",
                )
                vehicles.append(vehicle)

        return vehicles

    @staticmethod
    def save_plan_to_json(plan, file_path: str):
        """Save plan to JSON file"""
        with open(file_path, "w") as f:
            json.dump(plan.to_dict(), f, indent=2)

    @staticmethod
    def save_plan_to_csv(plan, file_path: str):
        """Save plan to CSV file (one row per package)"""
        with open(file_path, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(
                [
                    "trip_id",
                    "vehicle_id",
                    "package_id",
                    "original_cost",
                    "discount",
                    "total_cost",
                    "departure_time",
                    "estimated_delivery_time",
                    "return_time",
                ]
            )

            for trip_idx, shipment in enumerate(plan.shipments):
                for package_id in shipment.package_ids:
                    result = plan.result_for(package_id)
                    writer.writerow(
                        [
                            f"T{trip_idx + 1}",
                            shipment.vehicle_id,
                            package_id,
                            round(result.original_cost, 2),
                            round(result.discount, 2),
                            round(result.total_cost, 2),
                            round(shipment.departure_time, 2),
                            round(result.estimated_delivery_time, 2),
                            round(shipment.return_time, 2),
                        ]
                    )
