import os
import sys
import unittest
from unittest import mock

# Ensure project src/ is on sys.path for imports
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
src_path = os.path.join(ROOT, "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from core import config  # noqa: E402
from core.errors import (  # noqa: E402
    CustomerNotFoundError,
    DuplicateCustomerError,
    FailedTransactionError,
    InvalidStockRequestError,
)
from core.farm import Farm  # noqa: E402
from core.seed import DEMO_CUSTOMERS, DEMO_STOCK, build_demo_farm  # noqa: E402
from customers.address_book import AddressBook  # noqa: E402
from customers.models import Customer  # noqa: E402
from inventory.basic import BasicInventory  # noqa: E402
from inventory.fancy import FancyInventory  # noqa: E402
from inventory.models import Barcode, Product, Quality  # noqa: E402
from sales.transaction import Transaction  # noqa: E402


class AddressBookTestCase(unittest.TestCase):
    def setUp(self):
        self.book = AddressBook()
        self.ali = Customer("Ali", 33651111, "UQ")

    def test_add_and_lookup(self):
        self.book.add_customer(self.ali)
        self.assertTrue(self.book.contains_customer(self.ali))
        self.assertIs(self.book.get_customer("Ali", 33651111), self.ali)
        self.assertEqual(self.book.get_all_records(), [self.ali])

    def test_duplicate_ignores_address(self):
        self.book.add_customer(self.ali)
        with self.assertRaises(DuplicateCustomerError):
            self.book.add_customer(Customer("Ali", 33651111, "Somewhere else"))
        self.assertEqual(len(self.book.get_all_records()), 1)

    def test_lookup_miss(self):
        self.book.add_customer(self.ali)
        with self.assertRaises(CustomerNotFoundError):
            self.book.get_customer("Ali", 1)
        with self.assertRaises(CustomerNotFoundError):
            self.book.get_customer("Bob", 33651111)

    def test_records_are_copies(self):
        self.book.add_customer(self.ali)
        self.book.get_all_records().clear()
        self.assertEqual(len(self.book.get_all_records()), 1)

    def test_customer_identity(self):
        other = Customer("Ali", 33651111, "Elsewhere")
        self.assertEqual(self.ali, other)
        self.assertEqual(hash(self.ali), hash(other))
        self.assertIsNot(self.ali.cart, other.cart)
        self.assertEqual(str(self.ali), "Name: Ali | Phone Number: 33651111 | Address: UQ")


class FancyFarmTestCase(unittest.TestCase):
    def setUp(self):
        self.farm = Farm(FancyInventory(), AddressBook())
        self.customer = Customer("Ali", 33651111, "UQ")
        self.farm.save_customer(self.customer)

    def test_end_to_end_checkout(self):
        self.farm.stock_product(Barcode.EGG, Quality.REGULAR, 5)
        self.farm.stock_product(Barcode.MILK, Quality.GOLD)

        self.farm.start_transaction(Transaction(self.customer))
        self.assertEqual(self.farm.add_to_cart(Barcode.EGG, 2), 2)
        self.assertEqual(self.farm.add_to_cart(Barcode.MILK), 1)
        self.assertTrue(self.farm.checkout())

        history = self.farm.get_transaction_history()
        last = history.get_last_transaction()
        self.assertEqual(last.get_total(), 2 * 50 + 440)
        self.assertEqual(history.get_total_transactions_made(), 1)
        self.assertEqual(history.get_total_products_sold(), 3)
        self.assertFalse(self.farm.get_transaction_manager().has_ongoing_transaction())
        self.assertTrue(self.customer.cart.is_empty())
        self.assertEqual(len(self.farm.get_all_stock()), 3)

    def test_add_to_cart_takes_what_is_available(self):
        self.farm.stock_product(Barcode.JAM, Quality.SILVER, 2)
        self.farm.start_transaction(Transaction.categorised(self.customer))
        self.assertEqual(self.farm.add_to_cart(Barcode.JAM, 5), 2)
        self.assertEqual(self.farm.add_to_cart(Barcode.JAM), 0)
        self.assertEqual(self.farm.add_to_cart(Barcode.WOOL, 3), 0)
        self.assertEqual(
            self.customer.cart.get_contents(), [Product(Barcode.JAM, Quality.SILVER)] * 2
        )

    def test_add_to_cart_requires_transaction(self):
        self.farm.stock_product(Barcode.EGG, Quality.REGULAR)
        with self.assertRaises(FailedTransactionError):
            self.farm.add_to_cart(Barcode.EGG)
        self.assertEqual(len(self.farm.get_all_stock()), 1)

    def test_bad_quantities(self):
        with self.assertRaises(InvalidStockRequestError):
            self.farm.stock_product(Barcode.EGG, Quality.REGULAR, 0)
        self.farm.start_transaction(Transaction(self.customer))
        with self.assertRaises(InvalidStockRequestError):
            self.farm.add_to_cart(Barcode.EGG, 0)

    def test_second_transaction_rejected(self):
        self.farm.start_transaction(Transaction(self.customer))
        with self.assertRaises(FailedTransactionError):
            self.farm.start_transaction(Transaction(Customer("Joe", 1, "x")))

    def test_empty_checkout_not_recorded(self):
        self.farm.start_transaction(Transaction(self.customer))
        self.assertFalse(self.farm.checkout())
        self.assertEqual(self.farm.get_transaction_history().get_total_transactions_made(), 0)
        with self.assertRaises(FailedTransactionError):
            self.farm.get_last_receipt()
        with self.assertRaises(FailedTransactionError):
            self.farm.checkout()

    def test_last_receipt(self):
        self.farm.stock_product(Barcode.MILK, Quality.REGULAR, 2)
        self.farm.start_transaction(Transaction.special_sale(self.customer, {Barcode.MILK: 10}))
        self.farm.add_to_cart(Barcode.MILK, 2)
        self.farm.checkout()

        receipt_md = self.farm.get_last_receipt()
        self.assertIn("**Customer:** Ali", receipt_md)
        self.assertIn("$7.92", receipt_md)
        self.assertIn("**You saved:** $0.88", receipt_md)

    def test_customers(self):
        with self.assertRaises(DuplicateCustomerError):
            self.farm.save_customer(Customer("Ali", 33651111, "Elsewhere"))
        self.assertIs(self.farm.get_customer("Ali", 33651111), self.customer)
        with self.assertRaises(CustomerNotFoundError):
            self.farm.get_customer("Nobody", 0)
        self.assertEqual(self.farm.get_all_customers(), [self.customer])


class BasicFarmTestCase(unittest.TestCase):
    def setUp(self):
        self.farm = Farm(BasicInventory(), AddressBook())
        self.customer = Customer("Sarah", 33652222, "1 Cow Lane")

    def test_bulk_stock_rejected(self):
        self.farm.stock_product(Barcode.WOOL, Quality.GOLD, 1)
        with self.assertRaises(InvalidStockRequestError):
            self.farm.stock_product(Barcode.WOOL, Quality.GOLD, 3)
        self.assertEqual(len(self.farm.get_all_stock()), 1)

    def test_bulk_purchase_rejected(self):
        self.farm.stock_product(Barcode.EGG, Quality.REGULAR)
        self.farm.stock_product(Barcode.EGG, Quality.IRIDIUM)
        self.farm.start_transaction(Transaction(self.customer))

        with self.assertRaises(FailedTransactionError):
            self.farm.add_to_cart(Barcode.EGG, 2)
        self.assertEqual(self.farm.add_to_cart(Barcode.EGG, 1), 1)
        self.assertEqual(
            self.customer.cart.get_contents(), [Product(Barcode.EGG, Quality.IRIDIUM)]
        )

    def test_bulk_purchase_rejected_without_stock(self):
        self.farm.start_transaction(Transaction(self.customer))
        with self.assertRaises(FailedTransactionError):
            self.farm.add_to_cart(Barcode.EGG, 3)
        self.assertEqual(self.farm.add_to_cart(Barcode.EGG), 0)
        self.assertTrue(self.customer.cart.is_empty())


class ConfigTestCase(unittest.TestCase):
    def test_parse_discounts(self):
        self.assertEqual(
            config.parse_discounts("milk:10, WOOL:25,"),
            {Barcode.MILK: 10, Barcode.WOOL: 25},
        )
        self.assertEqual(config.parse_discounts(""), {})
        for bad in ("MILK", "CHEESE:10", "EGG:101", "EGG:-1", "EGG:ten"):
            with self.assertRaises(ValueError):
                config.parse_discounts(bad)

    def test_make_inventory(self):
        self.assertIsInstance(config.make_inventory("basic"), BasicInventory)
        self.assertIsInstance(config.make_inventory(" Fancy "), FancyInventory)
        with self.assertRaises(ValueError):
            config.make_inventory("deluxe")

    def test_environment(self):
        with mock.patch.dict(
            os.environ, {"FARM_INVENTORY": "basic", "FARM_SALE_DISCOUNTS": "JAM:5"}
        ):
            self.assertEqual(config.configured_inventory_kind(), "basic")
            self.assertIsInstance(config.make_inventory(), BasicInventory)
            self.assertEqual(config.sale_discounts(), {Barcode.JAM: 5})

        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(config.configured_inventory_kind(), "fancy")
            self.assertEqual(
                config.sale_discounts(), {Barcode.MILK: 10, Barcode.WOOL: 25}
            )

    def test_demo_farm_works_with_either_inventory(self):
        for inventory in (BasicInventory(), FancyInventory()):
            farm = build_demo_farm(inventory)
            self.assertEqual(len(farm.get_all_customers()), len(DEMO_CUSTOMERS))
            self.assertEqual(len(farm.get_all_stock()), sum(q for _, _, q in DEMO_STOCK))


if __name__ == "__main__":
    unittest.main()
