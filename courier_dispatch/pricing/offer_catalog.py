"""
Offer Catalog - read-only lookup over the discount rules
"""
from types import MappingProxyType
from typing import Iterable, List, Optional

from ..models import Offer, Package
from .. import config


class OfferCatalog:
    """Static table of discount rules"""

    def __init__(self, offers: Iterable[Offer]):
        table = {}
        for offer in offers:
            if offer.code in table:
                raise ValueError(f"Duplicate offer code: {offer.code}")
            table[offer.code] = offer
        self._offers = MappingProxyType(table)

    @classmethod
    def default(cls) -> "OfferCatalog":
        return cls(config.offers_from_dicts(config.DEFAULT_OFFERS))

    @classmethod
    def from_yaml(cls, file_path: str) -> "OfferCatalog":
        return cls(config.load_offer_table(file_path))

    def get_offer(self, code: Optional[str]) -> Optional[Offer]:
        if not code:
            return None
        return self._offers.get(code.strip())

    def is_eligible(self, package: Package) -> bool:
        """
        True iff the package's code is known and its weight and distance
        both fall inside the offer's ranges. Unknown or absent codes are
        simply not eligible.
        """
        offer = self.get_offer(package.offer_code)
        if offer is None:
            return False
        return offer.applies_to(package.weight, package.distance)

    def list_offers(self) -> List[Offer]:
        return sorted(self._offers.values(), key=lambda o: o.code)

    def __contains__(self, code):
        return code in self._offers

    def __len__(self):
        return len(self._offers)

    def __str__(self):
        return f"OfferCatalog({', '.join(self._offers)})"
