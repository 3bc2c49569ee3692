# demo customers and stock for the terminal app

from core.farm import Farm
from customers.address_book import AddressBook
from customers.models import Customer
from inventory.base import Inventory
from inventory.models import Barcode, Quality

DEMO_CUSTOMERS = [
    ("Ali", 33651111, "UQ"),
    ("Sarah", 33652222, "1 Cow Lane"),
    ("Joe", 33653333, "7 Hay Street"),
]

# (barcode, quality, quantity)
DEMO_STOCK = [
    (Barcode.EGG, Quality.REGULAR, 6),
    (Barcode.EGG, Quality.GOLD, 2),
    (Barcode.MILK, Quality.REGULAR, 3),
    (Barcode.MILK, Quality.IRIDIUM, 1),
    (Barcode.JAM, Quality.SILVER, 2),
    (Barcode.WOOL, Quality.REGULAR, 1),
]


def build_demo_farm(inventory: Inventory) -> Farm:
    """
    Farm with a few customers and some stock. Stock is added one unit at a
    time so any inventory kind can be used.
    """
    farm = Farm(inventory, AddressBook())
    for name, phone, address in DEMO_CUSTOMERS:
        farm.save_customer(Customer(name, phone, address))
    for barcode, quality, quantity in DEMO_STOCK:
        for _ in range(quantity):
            farm.stock_product(barcode, quality)
    return farm
