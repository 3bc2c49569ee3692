from typing import List, Optional

from core.errors import (
    DuplicateCustomerError,
    FailedTransactionError,
    InvalidStockRequestError,
)
from customers.address_book import AddressBook
from customers.models import Customer
from inventory.base import Inventory
from inventory.models import Barcode, Product, Quality
from sales.history import TransactionHistory
from sales.manager import TransactionManager
from sales.transaction import Transaction
from utils.logger import get_logger

_logger = get_logger(__name__)


class Farm:
    """
    Top-level model: owns the inventory, the customer address book, the
    transaction manager and the sales history, and coordinates them.
    """

    def __init__(self, inventory: Inventory, address_book: AddressBook) -> None:
        self._inventory = inventory
        self._address_book = address_book
        self._manager = TransactionManager()
        self._history = TransactionHistory()

    # ---------------------------
    # Accessors
    # ---------------------------

    def get_inventory(self) -> Inventory:
        return self._inventory

    def get_all_customers(self) -> List[Customer]:
        return self._address_book.get_all_records()

    def get_all_stock(self) -> List[Product]:
        return list(self._inventory.get_all_products())

    def get_transaction_manager(self) -> TransactionManager:
        return self._manager

    def get_transaction_history(self) -> TransactionHistory:
        return self._history

    # ---------------------------
    # Customers
    # ---------------------------

    def save_customer(self, customer: Customer) -> None:
        """
        :raises DuplicateCustomerError: if the customer is already recorded.
        """
        if self._address_book.contains_customer(customer):
            raise DuplicateCustomerError(str(customer))
        self._address_book.add_customer(customer)

    def get_customer(self, name: str, phone_number: int) -> Customer:
        """
        :raises CustomerNotFoundError: if no such customer is recorded.
        """
        return self._address_book.get_customer(name, phone_number)

    # ---------------------------
    # Stock
    # ---------------------------

    def stock_product(
        self, barcode: Barcode, quality: Quality, quantity: Optional[int] = None
    ) -> None:
        """
        Add stock to the inventory. Quantities above one are only accepted by
        inventories that support bulk stocking.

        :raises InvalidStockRequestError: for a quantity below one, or a bulk
            quantity the inventory cannot handle.
        """
        if quantity is not None and quantity < 1:
            raise InvalidStockRequestError("Quantity must be at least 1.")
        self._inventory.add_product(barcode, quality, quantity)
        _logger.info(f"Stocked {quantity or 1} x {barcode.name} ({quality.name})")

    # ---------------------------
    # Sales
    # ---------------------------

    def start_transaction(self, transaction: Transaction) -> None:
        """
        :raises FailedTransactionError: if a transaction is already ongoing.
        """
        self._manager.set_ongoing_transaction(transaction)

    def add_to_cart(self, barcode: Barcode, quantity: Optional[int] = None) -> int:
        """
        Move products of the given type from the inventory into the cart of
        the shopping customer. Adds as many as are in stock, up to
        ``quantity`` (default one), and returns how many were added.

        :raises FailedTransactionError: if nobody is shopping, or the inventory
            cannot remove more than one product at a time.
        :raises InvalidStockRequestError: if quantity is below one.
        """
        if not self._manager.has_ongoing_transaction():
            raise FailedTransactionError(
                "Cannot add to cart when no customer has started shopping."
            )
        if quantity is not None and quantity < 1:
            raise InvalidStockRequestError("Quantity must be at least 1.")
        if quantity is None or quantity == 1:
            if not self._inventory.exists_product(barcode):
                _logger.info(f"{barcode.name} is out of stock")
                return 0
            products = self._inventory.remove_product(barcode)
        else:
            products = self._inventory.remove_product(barcode, quantity)

        for product in products:
            self._manager.register_pending_purchase(product)
        return len(products)

    def checkout(self) -> bool:
        """
        Close the ongoing transaction, recording it in the history only if
        something was bought. Returns True iff it was recorded.

        :raises FailedTransactionError: if no transaction is ongoing.
        """
        transaction = self._manager.close_current_transaction()
        if not transaction.get_purchases():
            _logger.info("Closed an empty transaction, not recorded")
            return False
        self._history.record_transaction(transaction)
        return True

    def get_last_receipt(self) -> str:
        """
        :raises FailedTransactionError: if no transaction has been recorded.
        """
        last = self._history.get_last_transaction()
        if last is None:
            raise FailedTransactionError("No transactions have been recorded yet.")
        return last.get_receipt()
