"""
Run Delivery Planning on Batch Text Input
Reads the batch format from a file (or stdin), prices and schedules every package,
and prints one result line per package
"""
import argparse
import logging
import sys

from courier_dispatch import CourierDispatchEngine, OfferCatalog
from courier_dispatch.errors import BatchFormatError, PlanningError
from courier_dispatch.trace import LoggingTraceSink
from courier_dispatch.utils import DataLoader, parse_batch_input, format_batch_output, format_delivery_report


def build_parser():
    parser = argparse.ArgumentParser(description="Price packages and schedule their delivery")
    parser.add_argument("input", nargs="?", help="Batch input file (reads stdin when omitted)")
    parser.add_argument("--offers", help="YAML offer table (defaults to the built-in offers)")
    parser.add_argument("--report", action="store_true", help="Print the full delivery report after the results")
    parser.add_argument("--json", dest="json_path", help="Save the plan as JSON")
    parser.add_argument("--csv", dest="csv_path", help="Save the per-package schedule as CSV")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log planner events")
    return parser


def run_delivery_plan(text, offers_path=None, report=False, json_path=None, csv_path=None, verbose=False):
    """Plan one batch input; returns the printable output"""
    batch = parse_batch_input(text)

    catalog = OfferCatalog.from_yaml(offers_path) if offers_path else OfferCatalog.default()
    engine = CourierDispatchEngine(catalog)
    trace = LoggingTraceSink() if verbose else None

    plan = engine.plan(batch.packages, batch.vehicles, batch.base_delivery_cost, trace=trace)

    output = format_batch_output(plan.results)
    if report:
        output += "\n\n" + format_delivery_report(plan)

    if json_path:
        DataLoader.save_plan_to_json(plan, json_path)
    if csv_path:
        DataLoader.save_plan_to_csv(plan, csv_path)

    return output


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.input:
        with open(args.input, "r") as f:
            text = f.read()
    else:
        text = sys.stdin.read()

    try:
        output = run_delivery_plan(
            text,
            offers_path=args.offers,
            report=args.report,
            json_path=args.json_path,
            csv_path=args.csv_path,
            verbose=args.verbose,
        )
    except BatchFormatError as exc:
        print(f"❌ Invalid input: {exc}", file=sys.stderr)
        return 2
    except PlanningError as exc:
        print(f"❌ Planning failed [{exc.kind.value}]: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"❌ Invalid input: {exc}", file=sys.stderr)
        return 2

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
