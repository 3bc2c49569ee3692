from typing import List, Optional

from core.errors import FailedTransactionError
from inventory.models import Product
from sales.transaction import Transaction
from utils.logger import get_logger

_logger = get_logger(__name__)


class TransactionManager:
    """
    Opens and closes transactions, making sure at most one is in progress.
    """

    def __init__(self) -> None:
        self._transactions: List[Transaction] = []
        self._current: Optional[Transaction] = None

    def get_transactions(self) -> List[Transaction]:
        """Every transaction ever opened, oldest first."""
        return list(self._transactions)

    def get_ongoing_transaction(self) -> Optional[Transaction]:
        return self._current if self.has_ongoing_transaction() else None

    def has_ongoing_transaction(self) -> bool:
        return any(not t.is_finalised() for t in self._transactions)

    def set_ongoing_transaction(self, transaction: Transaction) -> None:
        """
        :raises FailedTransactionError: if a transaction is already in progress.
        """
        if self.has_ongoing_transaction():
            _logger.warning("Refused to open a transaction while one is ongoing")
            raise FailedTransactionError("A transaction is already in progress.")
        self._transactions.append(transaction)
        self._current = transaction
        _logger.info(
            f"Opened {transaction.kind.value} transaction for "
            f"{transaction.get_associated_customer().name}"
        )

    def register_pending_purchase(self, product: Product) -> None:
        """
        Put the product in the cart of the current transaction's customer.
        The product is expected to have come out of the inventory.

        :raises FailedTransactionError: if no transaction is in progress.
        """
        if not self.has_ongoing_transaction():
            raise FailedTransactionError("No transaction is in progress.")
        self._current.get_associated_customer().cart.add_product(product)

    def close_current_transaction(self) -> Transaction:
        """
        Finalise the ongoing transaction and return it.

        :raises FailedTransactionError: if there is nothing to close.
        """
        if not self.has_ongoing_transaction():
            raise FailedTransactionError("No transaction is in progress.")
        transaction = self._current
        transaction.finalise()
        _logger.info(
            f"Closed transaction for {transaction.get_associated_customer().name}, "
            f"total {transaction.get_total()}c"
        )
        return transaction
