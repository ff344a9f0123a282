"""
Custom Data Loader for Your Input Files
Loads packages and vehicles from spreadsheets exported to CSV and plans them
"""
import os
import pandas as pd
from courier_dispatch import CourierDispatchEngine, Package, Vehicle
from courier_dispatch.utils import DataLoader, format_delivery_report


class CustomDataLoader:
    """Load and process custom input data"""

    def __init__(self, input_dir="input"):
        self.input_dir = input_dir

    def load_packages_from_csv(self, filename="packages.csv"):
        """
        Load packages from CSV file
        Expected columns: id, weight, distance
        Optional: offer_code
        """
        filepath = os.path.join(self.input_dir, filename)

        if not os.path.exists(filepath):
            print(f"❌ File not found: {filepath}")
            return []

        df = pd.read_csv(filepath, dtype={"id": str})
        packages = []

        print(f"📦 Loading packages from {filename}...")
        print(f"   Found {len(df)} packages")

        for _, row in df.iterrows():
            offer_code = None
            if "offer_code" in df.columns and pd.notna(row.get("offer_code")):
                offer_code = str(row["offer_code"]).strip() or None

            package = Package(
                id=str(row["id"]).strip(),
                weight=float(row["weight"]),
                distance=float(row["distance"]),
                offer_code=offer_code,
            )
            packages.append(package)

        print(f"   ✓ Loaded {len(packages)} packages successfully")
        return packages

    def load_vehicles_from_csv(self, filename="vehicles.csv"):
        """
        Load vehicles from CSV
        Expected columns: id, max_speed, max_carriable_weight
        Optional: name, available_time
        """
        filepath = os.path.join(self.input_dir, filename)

        if not os.path.exists(filepath):
            print(f"❌ File not found: {filepath}")
            return []

        df = pd.read_csv(filepath)
        vehicles = []

        print(f"🚛 Loading vehicles from {filename}...")
        print(f"   Found {len(df)} vehicles")

        for _, row in df.iterrows():
            name = row.get("name", "")
            available_time = row.get("available_time", 0.0)
            vehicle = Vehicle(
                id=int(row["id"]),
                max_speed=float(row["max_speed"]),
                max_carriable_weight=float(row["max_carriable_weight"]),
                available_time=float(available_time) if pd.notna(available_time) else 0.0,
                name=str(name) if pd.notna(name) else "",
            )
            vehicles.append(vehicle)

        print(f"   ✓ Loaded {len(vehicles)} vehicles successfully")
        return vehicles

    def load_all_data(self):
        packages = self.load_packages_from_csv()
        vehicles = self.load_vehicles_from_csv()
        return packages, vehicles


def main(base_delivery_cost=100.0):
    loader = CustomDataLoader(input_dir="input")
    packages, vehicles = loader.load_all_data()

    if not packages or not vehicles:
        print("❌ Failed to load data. Exiting.")
        return None

    plan = CourierDispatchEngine().plan(packages, vehicles, base_delivery_cost)

    print()
    print(format_delivery_report(plan))

    os.makedirs("output", exist_ok=True)
    DataLoader.save_plan_to_json(plan, "output/delivery_plan.json")
    plan.to_dataframe().to_csv("output/delivery_results.csv", index=False)
    print("\n💾 Saved output/delivery_plan.json and output/delivery_results.csv")

    return plan


if __name__ == "__main__":
    main()
