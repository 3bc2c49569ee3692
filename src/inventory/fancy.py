from collections import Counter
from typing import Dict, List, Optional

from inventory.base import Inventory
from inventory.models import Barcode, Product, Quality, qualities_high_to_low
from utils.logger import get_logger

_logger = get_logger(__name__)


class FancyInventory(Inventory):
    """
    Keeps a count per (barcode, quality) so products can be stocked and
    removed in any quantity.

    Products with the same barcode and quality are interchangeable, so only
    the counts are stored and units are rebuilt on removal.
    """

    def __init__(self) -> None:
        self._stock: Dict[Barcode, Counter] = {b: Counter() for b in Barcode}

    def add_product(
        self, barcode: Barcode, quality: Quality, quantity: Optional[int] = None
    ) -> None:
        count = 1 if quantity is None else quantity
        for _ in range(count):
            self._stock[barcode][quality] += 1
        _logger.debug(f"Stocked {count} x {barcode.name} ({quality.name})")

    def exists_product(self, barcode: Barcode) -> bool:
        return self.get_stocked_quantity(barcode) > 0

    def remove_product(
        self, barcode: Barcode, quantity: Optional[int] = None
    ) -> List[Product]:
        """
        Remove up to ``quantity`` units (one if omitted), taking the highest
        quality tiers first. Returns fewer units than requested when stock
        runs out.
        """
        wanted = 1 if quantity is None else quantity
        counts = self._stock[barcode]
        removed: List[Product] = []

        for quality in qualities_high_to_low():
            if len(removed) >= wanted:
                break
            take = min(counts[quality], wanted - len(removed))
            if take <= 0:
                continue
            counts[quality] -= take
            if not counts[quality]:
                del counts[quality]
            removed.extend(Product(barcode, quality) for _ in range(take))

        _logger.debug(f"Removed {len(removed)}/{wanted} x {barcode.name}")
        return removed

    def get_all_products(self) -> List[Product]:
        """Every unit held, grouped by barcode in catalogue order."""
        products: List[Product] = []
        for barcode in Barcode:
            for quality, count in self._stock[barcode].items():
                products.extend(Product(barcode, quality) for _ in range(count))
        return products

    def get_stocked_quantity(self, barcode: Barcode) -> int:
        return sum(self._stock[barcode].values())
