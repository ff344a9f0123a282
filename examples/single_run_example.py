"""
Example: Single Planning Run
Demonstrates pricing and scheduling a set of packages with the dispatch engine
"""
import os

from courier_dispatch import CourierDispatchEngine, OfferCatalog
from courier_dispatch.trace import RecordingTraceSink, TraceEventKind
from courier_dispatch.utils import DataLoader, format_hours


def main():
    print("=" * 60)
    print("Courier Dispatch Example")
    print("=" * 60)

    # Step 1: Load data
    print("\n1. Loading data...")
    packages = DataLoader.load_packages_from_json("examples/sample_data/packages.json")
    vehicles = DataLoader.load_vehicles_from_json("examples/sample_data/vehicles.json")
    catalog = OfferCatalog.from_yaml("examples/sample_data/offers.yaml")

    print(f"   Loaded {len(packages)} packages")
    print(f"   Loaded {len(vehicles)} vehicles")
    print(f"   Loaded {len(catalog)} offers")

    # Step 2: Plan
    print("\n2. Planning deliveries...")
    engine = CourierDispatchEngine(catalog)
    trace = RecordingTraceSink()
    plan = engine.plan(packages, vehicles, base_delivery_cost=100, trace=trace)

    print(f"✓ Plan found: {plan.total_trips} trips")
    print(f"  Last delivery: {format_hours(plan.completion_time)}")
    print(f"  Fleet back at depot: {format_hours(plan.fleet_return_time)}")
    print(f"  Average utilization: {plan.get_average_utilization():.1f}%")
    print(f"  Clock advances while waiting: {len(trace.events_of(TraceEventKind.TIME_ADVANCED))}")

    # Print trips
    for i, shipment in enumerate(plan.shipments):
        print(f"\n  Trip {i+1} (vehicle {shipment.vehicle_id}):")
        print(f"    Packages: {' + '.join(shipment.package_ids)}")
        print(f"    Load: {shipment.total_weight:.1f}kg ({plan.get_shipment_utilization(shipment):.1f}%)")
        print(f"    Departs {shipment.departure_time:.2f}h, delivers by {shipment.delivery_time:.2f}h, back {shipment.return_time:.2f}h")

    # Print results
    print("\n3. Results")
    print("-" * 60)
    for result in plan.results:
        print(f"  {result.package_id}: discount {result.discount:.0f}, total {result.total_cost:.0f}, eta {result.estimated_delivery_time:.2f}h")

    # Step 4: Save results
    os.makedirs("examples/output", exist_ok=True)
    DataLoader.save_plan_to_json(plan, "examples/output/plan.json")
    DataLoader.save_plan_to_csv(plan, "examples/output/plan.csv")
    print("\n   ✓ Plan saved to examples/output/plan.json and plan.csv")


if __name__ == "__main__":
    main()
