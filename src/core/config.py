# runtime settings, read from environment variables
import os
from typing import Dict, Optional

from inventory.base import Inventory
from inventory.basic import BasicInventory
from inventory.fancy import FancyInventory
from inventory.models import Barcode

INVENTORY_ENV = "FARM_INVENTORY"
DISCOUNTS_ENV = "FARM_SALE_DISCOUNTS"

DEFAULT_INVENTORY = "fancy"
DEFAULT_SALE_DISCOUNTS = "MILK:10,WOOL:25"

INVENTORY_KINDS = {
    "basic": BasicInventory,
    "fancy": FancyInventory,
}


def configured_inventory_kind() -> str:
    return (os.getenv(INVENTORY_ENV) or DEFAULT_INVENTORY).strip().lower()


def make_inventory(kind: Optional[str] = None) -> Inventory:
    """
    Build the inventory named by ``kind``, or by $FARM_INVENTORY when omitted.
    """
    kind = (kind or configured_inventory_kind()).strip().lower()
    try:
        return INVENTORY_KINDS[kind]()
    except KeyError:
        raise ValueError(
            f"Unknown inventory kind {kind!r}, expected one of "
            f"{', '.join(INVENTORY_KINDS)}"
        ) from None


def parse_discounts(text: str) -> Dict[Barcode, int]:
    """
    Parse "BARCODE:percent" pairs separated by commas, e.g. "MILK:10,WOOL:25".
    Blank entries are ignored. Percentages must lie within 0..100.
    """
    discounts: Dict[Barcode, int] = {}
    for entry in text.split(","):
        entry = entry.strip()
        if not entry:
            continue
        name, sep, percent = entry.partition(":")
        if not sep:
            raise ValueError(f"Discount entry {entry!r} is not BARCODE:percent")
        try:
            barcode = Barcode[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown barcode {name.strip()!r}") from None
        amount = int(percent)
        if not 0 <= amount <= 100:
            raise ValueError(f"Discount for {barcode.name} must be within 0..100")
        discounts[barcode] = amount
    return discounts


def sale_discounts() -> Dict[Barcode, int]:
    return parse_discounts(os.getenv(DISCOUNTS_ENV, DEFAULT_SALE_DISCOUNTS))
