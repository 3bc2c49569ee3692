from typing import List, Optional

from core.errors import FailedTransactionError, InvalidStockRequestError
from inventory.base import Inventory
from inventory.models import Barcode, Product, Quality, qualities_high_to_low
from utils.logger import get_logger

_logger = get_logger(__name__)


class BasicInventory(Inventory):
    """
    Stores every unit individually and only handles one unit per operation.
    """

    def __init__(self) -> None:
        self._products: List[Product] = []

    def add_product(
        self, barcode: Barcode, quality: Quality, quantity: Optional[int] = None
    ) -> None:
        if quantity is not None and quantity != 1:
            _logger.warning(f"Rejected stocking {quantity} x {barcode.name}")
            raise InvalidStockRequestError(
                "Current inventory is not fancy enough. "
                "Please supply products one at a time."
            )
        self._products.append(Product(barcode, quality))
        _logger.debug(f"Stocked {barcode.name} ({quality.name})")

    def exists_product(self, barcode: Barcode) -> bool:
        for product in self._products:
            if product.barcode is barcode:
                return True
        return False

    def remove_product(
        self, barcode: Barcode, quantity: Optional[int] = None
    ) -> List[Product]:
        if quantity is not None:
            _logger.warning(f"Rejected removing {quantity} x {barcode.name}")
            raise FailedTransactionError(
                "Current inventory is not fancy enough. "
                "Please purchase products one at a time."
            )

        for quality in qualities_high_to_low():
            for index, product in enumerate(self._products):
                if product.barcode is barcode and product.quality is quality:
                    del self._products[index]
                    _logger.debug(f"Removed {barcode.name} ({quality.name})")
                    return [product]
        return []

    def get_all_products(self) -> List[Product]:
        return list(self._products)
