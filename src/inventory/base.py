from abc import ABC, abstractmethod
from typing import List, Optional

from inventory.models import Barcode, Product, Quality


class Inventory(ABC):
    """
    Common interface of the inventory strategies.

    Passing ``quantity=None`` selects the single-unit form of an operation, an
    explicit integer selects the bulk form. Strategies that cannot handle a
    request raise their own error instead of callers checking the type.
    """

    @abstractmethod
    def add_product(
        self, barcode: Barcode, quality: Quality, quantity: Optional[int] = None
    ) -> None:
        """
        Add one unit (or ``quantity`` units) of the product to the inventory.

        :raises InvalidStockRequestError: if the strategy cannot stock that quantity.
        """

    @abstractmethod
    def exists_product(self, barcode: Barcode) -> bool:
        """True iff at least one unit with the barcode is in stock."""

    @abstractmethod
    def remove_product(
        self, barcode: Barcode, quantity: Optional[int] = None
    ) -> List[Product]:
        """
        Remove the highest quality unit (or up to ``quantity`` units) with the
        barcode. Returns the removed units, empty if none are stocked.

        :raises FailedTransactionError: if the strategy cannot remove in bulk.
        """

    @abstractmethod
    def get_all_products(self) -> List[Product]:
        """Return a copy of every unit currently held."""
