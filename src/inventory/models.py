# provide the product catalogue and product value type

from dataclasses import dataclass
from enum import Enum, IntEnum


class Barcode(Enum):
    """
    Fixed catalogue of stock types. Declaration order matters: it is used for
    receipt/stock ordering and for breaking popularity ties.
    """

    EGG = ("egg", 50)
    MILK = ("milk", 440)
    JAM = ("jam", 670)
    WOOL = ("wool", 3000)

    def __init__(self, display_name: str, base_price: int):
        self.display_name = display_name
        self.base_price = base_price  # cents


class Quality(IntEnum):
    """Quality tiers, lowest to highest."""

    REGULAR = 1
    SILVER = 2
    GOLD = 3
    IRIDIUM = 4


def qualities_high_to_low() -> list[Quality]:
    return sorted(Quality, reverse=True)


@dataclass(frozen=True)
class Product:
    barcode: Barcode
    quality: Quality = Quality.REGULAR

    @property
    def display_name(self) -> str:
        return self.barcode.display_name

    @property
    def base_price(self) -> int:
        return self.barcode.base_price

    def __str__(self) -> str:
        return f"{self.display_name}: {self.base_price}c *{self.quality.name}*"
