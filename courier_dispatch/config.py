"""
Pricing constants and offer table configuration.

The per-kg and per-km rates are fixed domain constants. The offer table is
external configuration: the built-in default below, or a YAML file of the form

    offers:
      - code: OFR001
        discount: 10
        min_distance: 0
        max_distance: 200
        min_weight: 70
        max_weight: 200
"""
from typing import Iterable, List

import yaml

from .models import Offer

RATE_PER_KG = 10
"""Cost added per kg of package weight."""

RATE_PER_KM = 5
"""Cost added per km of delivery distance."""

TIME_DECIMALS = 2
"""Decimal places used when reporting delivery times."""

DEFAULT_OFFERS = [
    {"code": "OFR001", "discount": 10, "min_distance": 0, "max_distance": 200, "min_weight": 70, "max_weight": 200},
    {"code": "OFR002", "discount": 7, "min_distance": 50, "max_distance": 150, "min_weight": 100, "max_weight": 250},
    {"code": "OFR003", "discount": 5, "min_distance": 50, "max_distance": 250, "min_weight": 10, "max_weight": 150},
]

_OFFER_KEYS = ("code", "discount", "min_distance", "max_distance", "min_weight", "max_weight")


def offers_from_dicts(items: Iterable[dict]) -> List[Offer]:
    """Build Offer objects from plain mappings"""
    offers = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise ValueError(f"Offer #{index + 1} must be a mapping, got {type(item).__name__}")

        missing = [key for key in _OFFER_KEYS if key not in item]
        if missing:
            raise ValueError(f"Offer #{index + 1} is missing keys: {', '.join(missing)}")

        offer = Offer(
            code=str(item["code"]).strip(),
            discount_percent=float(item["discount"]),
            min_distance=float(item["min_distance"]),
            max_distance=float(item["max_distance"]),
            min_weight=float(item["min_weight"]),
            max_weight=float(item["max_weight"]),
        )
        if not offer.code:
            raise ValueError(f"Offer #{index + 1} has a blank code")
        if not 0 <= offer.discount_percent <= 100:
            raise ValueError(f"Offer {offer.code}: discount must be between 0 and 100")
        if offer.min_distance > offer.max_distance or offer.min_weight > offer.max_weight:
            raise ValueError(f"Offer {offer.code}: range minimum exceeds maximum")
        offers.append(offer)

    return offers


def load_offer_table(file_path: str) -> List[Offer]:
    """Load the offer table from a YAML file"""
    with open(file_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict) or not isinstance(data.get("offers"), list):
        raise ValueError(f"{file_path}: expected a top-level 'offers' list")

    return offers_from_dicts(data["offers"])
