"""
Cost Calculator
"""
from typing import Dict, Iterable, List

from ..models import CostBreakdown, Package
from ..errors import InvalidPackageError
from ..constraints import is_positive_number
from .. import config
from .offer_catalog import OfferCatalog


class CostCalculator:
    """
    Prices packages against an injected offer catalog.

    original = base + weight * RATE_PER_KG + distance * RATE_PER_KM
    discount = original * offer% / 100 when the offer applies, else 0
    total    = original - discount
    """

    def __init__(self, catalog: OfferCatalog = None):
        self.catalog = catalog if catalog is not None else OfferCatalog.default()

    def price(self, package: Package, base_delivery_cost: float) -> CostBreakdown:
        """Compute the cost breakdown for a single package"""
        errors = []
        if not is_positive_number(package.weight):
            errors.append("Package weight must be a positive number")
        if not is_positive_number(package.distance):
            errors.append("Package distance must be a positive number")
        if errors:
            raise InvalidPackageError({package.id: errors})

        weight_cost = package.weight * config.RATE_PER_KG
        distance_cost = package.distance * config.RATE_PER_KM
        original_cost = base_delivery_cost + weight_cost + distance_cost

        discount = 0.0
        applied_code = None
        if self.catalog.is_eligible(package):
            offer = self.catalog.get_offer(package.offer_code)
            discount = original_cost * offer.discount_percent / 100
            applied_code = offer.code

        return CostBreakdown(
            package_id=package.id,
            base_cost=base_delivery_cost,
            weight_cost=weight_cost,
            distance_cost=distance_cost,
            discount=discount,
            offer_code=applied_code,
        )

    def price_all(self, packages: Iterable[Package], base_delivery_cost: float) -> Dict[str, CostBreakdown]:
        """Price every package, keyed by package id (input order preserved)"""
        return {p.id: self.price(p, base_delivery_cost) for p in packages}

    def calculate_total_delivery_cost(
        self,
        packages: List[Package],
        base_delivery_cost: float,
        include_discounts: bool = True,
    ) -> dict:
        """Summed cost components plus a per-package breakdown"""
        breakdown = []
        totals = {
            "total_base_cost": 0.0,
            "total_weight_cost": 0.0,
            "total_distance_cost": 0.0,
            "total_discount": 0.0,
            "total_final_cost": 0.0,
        }

        for package in packages:
            cost = self.price(package, base_delivery_cost)
            discount = cost.discount if include_discounts else 0.0
            final_cost = cost.original_cost - discount

            breakdown.append(
                {
                    "package_id": package.id,
                    "base_cost": cost.base_cost,
                    "weight_cost": cost.weight_cost,
                    "distance_cost": cost.distance_cost,
                    "discount": discount,
                    "final_cost": final_cost,
                }
            )

            totals["total_base_cost"] += cost.base_cost
            totals["total_weight_cost"] += cost.weight_cost
            totals["total_distance_cost"] += cost.distance_cost
            totals["total_discount"] += discount
            totals["total_final_cost"] += final_cost

        totals["breakdown"] = breakdown
        return totals
