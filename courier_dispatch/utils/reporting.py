"""
Plain-text delivery report
"""
from ..models import DeliveryPlan
from .timing import format_hours


def format_delivery_report(plan: DeliveryPlan) -> str:
    lines = ["=== DELIVERY SERVICE REPORT ===", ""]

    summary = plan.get_schedule_summary()
    lines.append("SUMMARY:")
    lines.append(f"Total Packages: {summary['total_packages']}")
    lines.append(f"Total Vehicles: {summary['total_vehicles']}")
    lines.append(f"Total Trips: {summary['estimated_trips']}")
    lines.append(f"Base Delivery Cost: ${plan.base_delivery_cost:g}")
    lines.append(f"Last Delivery: {format_hours(plan.completion_time)}")
    lines.append("")

    lines.append("PACKAGE DETAILS:")
    for result in plan.results:
        shipment = plan.shipment_for(result.package_id)
        package = next(p for p in shipment.packages if p.id == result.package_id)
        lines.append(
            f"{result.package_id}: Weight={package.weight:g}kg, Distance={package.distance:g}km, "
            f"Cost=${result.total_cost:.2f}, Time={result.estimated_delivery_time:.2f}hrs, "
            f"Vehicle={result.vehicle_id}"
        )
    lines.append("")

    lines.append("VEHICLE UTILIZATION:")
    for vehicle_id, trips in plan.get_trips_per_vehicle().items():
        if not trips:
            lines.append(f"Vehicle {vehicle_id}: idle")
            continue
        for trip in trips:
            lines.append(
                f"Vehicle {vehicle_id}: {len(trip)} packages, {trip.total_weight:g}kg, "
                f"Efficiency: {plan.get_shipment_utilization(trip):.1f}%, "
                f"out {trip.departure_time:.2f}h -> back {trip.return_time:.2f}h"
            )
    lines.append("")

    costs = plan.cost_totals()
    lines.append("COST BREAKDOWN:")
    lines.append(f"Original Cost: ${costs['original_cost']:.2f}")
    lines.append(f"Total Discount: ${costs['total_discount']:.2f}")
    lines.append(f"Final Cost: ${costs['final_cost']:.2f}")
    lines.append(f"Savings: ${costs['savings']:.2f}")

    return "\n".join(lines)
