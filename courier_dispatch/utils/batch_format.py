"""
Line-oriented batch text format

Input:
    <base_cost> <package_count>
    <id> <weight> <distance> [<offer_code>]      (package_count lines)
    <vehicle_count> <max_speed> <max_carriable_weight>

Output, one line per package:
    <id> <discount> <total_cost> <estimated_delivery_time>
"""
import math
from dataclasses import dataclass, field
from typing import List

from ..models import DeliveryResult, Package, Vehicle
from ..errors import BatchFormatError
from .. import config
from .timing import round_half_up


@dataclass
class BatchInput:
    base_delivery_cost: float
    packages: List[Package] = field(default_factory=list)
    vehicles: List[Vehicle] = field(default_factory=list)


def _number(token: str, what: str, line_number: int) -> float:
    try:
        value = float(token)
    except ValueError:
        raise BatchFormatError(f"{what} must be a number, got {token!r}", line_number) from None
    if not math.isfinite(value):
        raise BatchFormatError(f"{what} must be a finite number, got {token!r}", line_number)
    return value


def _count(token: str, what: str, line_number: int) -> int:
    value = _number(token, what, line_number)
    if value != int(value) or value < 0:
        raise BatchFormatError(f"{what} must be a non-negative integer, got {token!r}", line_number)
    return int(value)


def parse_batch_input(text: str) -> BatchInput:
    """Parse batch text into packages and an identical-vehicle fleet (ids 1..N)"""
    # (physical line number, tokens) for every non-blank line
    lines = [(number, line.split()) for number, line in enumerate(text.splitlines(), start=1) if line.strip()]

    if not lines:
        raise BatchFormatError("empty input")

    line_number, header = lines[0]
    if len(header) != 2:
        raise BatchFormatError("expected '<base_cost> <package_count>'", line_number)
    base_cost = _number(header[0], "base cost", line_number)
    package_count = _count(header[1], "package count", line_number)

    if len(lines) < package_count + 2:
        raise BatchFormatError(
            f"expected {package_count} package lines followed by a fleet line, got {len(lines)} lines in total"
        )

    packages = []
    for line_number, tokens in lines[1 : package_count + 1]:
        if len(tokens) not in (3, 4):
            raise BatchFormatError("expected '<id> <weight> <distance> [<offer_code>]'", line_number)
        packages.append(
            Package(
                id=tokens[0],
                weight=_number(tokens[1], "weight", line_number),
                distance=_number(tokens[2], "distance", line_number),
                offer_code=tokens[3] if len(tokens) == 4 else None,
            )
        )

    line_number, tokens = lines[package_count + 1]
    if len(tokens) != 3:
        raise BatchFormatError("expected '<vehicle_count> <max_speed> <max_carriable_weight>'", line_number)
    if len(lines) > package_count + 2:
        extra_line, _ = lines[package_count + 2]
        raise BatchFormatError(
            f"unexpected content after the fleet line; declared package count is {package_count}", extra_line
        )
    vehicle_count = _count(tokens[0], "vehicle count", line_number)
    max_speed = _number(tokens[1], "max speed", line_number)
    max_weight = _number(tokens[2], "max carriable weight", line_number)

    vehicles = [
        Vehicle(id=i, max_speed=max_speed, max_carriable_weight=max_weight)
        for i in range(1, vehicle_count + 1)
    ]

    return BatchInput(base_delivery_cost=base_cost, packages=packages, vehicles=vehicles)


def format_result_line(result: DeliveryResult) -> str:
    discount = int(round_half_up(result.discount))
    total_cost = int(round_half_up(result.total_cost))
    eta = f"{result.estimated_delivery_time:.{config.TIME_DECIMALS}f}"
    return f"{result.package_id} {discount} {total_cost} {eta}"


def format_batch_output(results: List[DeliveryResult]) -> str:
    return "\n".join(format_result_line(r) for r in results)
