import os
import sys
import unittest
from unittest import mock

# Ensure project src/ is on sys.path for imports
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
src_path = os.path.join(ROOT, "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from core.farm import Farm  # noqa: E402
from customers.address_book import AddressBook  # noqa: E402
from customers.models import Customer  # noqa: E402
from inventory.fancy import FancyInventory  # noqa: E402
from inventory.models import Barcode, Product, Quality  # noqa: E402
from main import FarmShopApp  # noqa: E402
from sales.history import TransactionHistory  # noqa: E402
from sales.transaction import Transaction  # noqa: E402
from utils.messages import StockChangedMessage  # noqa: E402
from utils.state import GlobalState  # noqa: E402
from views.base_screen import Sidebar  # noqa: E402
from views.modal_resize import MIN_HEIGHT, MIN_WIDTH, is_too_small  # noqa: E402
from views.scr_sales_report import build_report  # noqa: E402


class SalesReportTestCase(unittest.TestCase):
    def test_empty_report(self):
        md = build_report(TransactionHistory())
        self.assertIn("- Transactions: 0", md)
        self.assertIn("- Gross Earnings: $0.00", md)
        self.assertIn("- Most Popular Product: egg", md)
        self.assertIn("- Highest Grossing Transaction: -", md)
        self.assertIn("| wool | 0 | $0.00 | 0.0% |", md)

    def test_report_with_sale(self):
        customer = Customer("Joe", 33653333, "7 Hay Street")
        transaction = Transaction.special_sale(customer, {Barcode.WOOL: 25})
        customer.cart.add_product(Product(Barcode.WOOL))
        transaction.finalise()
        history = TransactionHistory()
        history.record_transaction(transaction)

        md = build_report(history)
        self.assertIn("- Gross Earnings: $22.50", md)
        self.assertIn("- Highest Grossing Transaction: Joe, $22.50", md)
        self.assertIn("- Most Popular Product: wool", md)
        self.assertIn("| wool | 1 | $30.00 | 25.0% |", md)


class ResizePromptTestCase(unittest.TestCase):
    def test_is_too_small(self):
        self.assertFalse(is_too_small(MIN_WIDTH, MIN_HEIGHT))
        self.assertTrue(is_too_small(MIN_WIDTH - 1, MIN_HEIGHT))
        self.assertTrue(is_too_small(MIN_WIDTH, MIN_HEIGHT - 1))


class SidebarRefreshTestCase(unittest.IsolatedAsyncioTestCase):
    async def test_sidebar_refreshes_after_stocking(self):
        farm = Farm(FancyInventory(), AddressBook())
        app = FarmShopApp(GlobalState(farm=farm, inventory_kind="fancy"))
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            with mock.patch.object(Sidebar, "refresh_info") as refresh_info:
                farm.stock_product(Barcode.EGG, Quality.GOLD, 2)
                app.screen.post_message(StockChangedMessage())
                await pilot.pause()
            refresh_info.assert_called()


if __name__ == "__main__":
    unittest.main()
