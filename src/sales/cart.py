from typing import List

from inventory.models import Product


class Cart:
    """
    Products a customer intends to buy, in the order they were added.
    """

    def __init__(self) -> None:
        self._products: List[Product] = []

    def add_product(self, product: Product) -> None:
        self._products.append(product)

    def get_contents(self) -> List[Product]:
        """Shallow copy of the cart contents, in insertion order."""
        return list(self._products)

    def set_empty(self) -> None:
        self._products.clear()

    def is_empty(self) -> bool:
        return not self._products

    def __len__(self) -> int:
        return len(self._products)
