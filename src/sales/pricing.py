# pure pricing helpers shared by every transaction kind

from typing import Dict, Iterable, List, Mapping, Optional

from inventory.models import Barcode, Product

Discounts = Mapping[Barcode, int]


def group_by_type(purchases: Iterable[Product]) -> Dict[Barcode, List[Product]]:
    """
    Group purchased units by barcode. Keys follow first-purchase order and
    only barcodes that were actually purchased appear.
    """
    grouped: Dict[Barcode, List[Product]] = {}
    for product in purchases:
        grouped.setdefault(product.barcode, []).append(product)
    return grouped


def purchase_quantity(purchases: Iterable[Product], barcode: Barcode) -> int:
    return sum(1 for p in purchases if p.barcode is barcode)


def purchase_subtotal(
    purchases: Iterable[Product],
    barcode: Barcode,
    discounts: Optional[Discounts] = None,
) -> int:
    """
    Price in cents of every purchased unit of ``barcode``.

    With a discount configured for the barcode the subtotal is
    ``ceil(quantity * base_price * (100 - discount) / 100)``, always rounded up
    to the next whole cent.
    """
    undiscounted = purchase_quantity(purchases, barcode) * barcode.base_price
    if not discounts or barcode not in discounts:
        return undiscounted
    # ceiling division keeps the rounding exact
    return -(-undiscounted * (100 - discounts[barcode]) // 100)


def undiscounted_total(purchases: Iterable[Product]) -> int:
    return sum(p.base_price for p in purchases)


def transaction_total(
    purchases: Iterable[Product], discounts: Optional[Discounts] = None
) -> int:
    """
    Total in cents. Without a discount map this is the sum of base prices;
    with one it is the sum of the (rounded up) per-type subtotals.
    """
    purchases = list(purchases)
    if discounts is None:
        return undiscounted_total(purchases)
    return sum(
        purchase_subtotal(purchases, barcode, discounts)
        for barcode in group_by_type(purchases)
    )
