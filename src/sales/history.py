from typing import Dict, List, Optional

from core.errors import FailedTransactionError
from inventory.models import Barcode
from sales.transaction import Transaction, TransactionKind
from utils.logger import get_logger

_logger = get_logger(__name__)

# reported as most popular while nothing has been sold
DEFAULT_POPULAR_PRODUCT = Barcode.EGG


class TransactionHistory:
    """
    Append-only record of finalised transactions. Every statistic is
    recomputed from the record when asked for; record order breaks ties.
    """

    def __init__(self) -> None:
        self._transactions: List[Transaction] = []

    def record_transaction(self, transaction: Transaction) -> None:
        """
        :raises FailedTransactionError: if the transaction is still active.
        """
        if not transaction.is_finalised():
            raise FailedTransactionError("Only finalised transactions can be recorded.")
        self._transactions.append(transaction)
        _logger.info(
            f"Recorded transaction #{len(self._transactions)} "
            f"({transaction.get_total()}c)"
        )

    def get_transactions(self) -> List[Transaction]:
        return list(self._transactions)

    def get_last_transaction(self) -> Optional[Transaction]:
        return self._transactions[-1] if self._transactions else None

    def get_gross_earnings(self, barcode: Optional[Barcode] = None) -> int:
        """
        Total income in cents. For a single barcode this is the base price of
        every unit of that type sold, without discounts.
        """
        if barcode is None:
            return sum(t.get_total() for t in self._transactions)
        return sum(
            p.base_price
            for t in self._transactions
            for p in t.get_purchases()
            if p.barcode is barcode
        )

    def get_total_transactions_made(self) -> int:
        return len(self._transactions)

    def get_total_products_sold(self, barcode: Optional[Barcode] = None) -> int:
        if barcode is None:
            return sum(len(t.get_purchases()) for t in self._transactions)
        return sum(t.get_purchase_quantity(barcode) for t in self._transactions)

    def get_products_sold_by_type(self) -> Dict[Barcode, int]:
        return {b: self.get_total_products_sold(b) for b in Barcode}

    def get_highest_grossing_transaction(self) -> Optional[Transaction]:
        """
        Transaction with the highest total; the earliest recorded one wins a
        tie. None when nothing has been recorded.
        """
        best: Optional[Transaction] = None
        best_total = 0
        for transaction in self._transactions:
            total = transaction.get_total()
            if best is None or total > best_total:
                best, best_total = transaction, total
        return best

    def get_most_popular_product(self) -> Barcode:
        """
        Barcode with the most units sold; ties go to the barcode declared
        first in the catalogue.
        """
        sold = self.get_products_sold_by_type()
        if not any(sold.values()):
            return DEFAULT_POPULAR_PRODUCT
        # max keeps the first maximum, i.e. catalogue order breaks ties
        return max(Barcode, key=lambda b: sold[b])

    def get_average_spend_per_visit(self) -> float:
        """Average total per transaction, in cents."""
        count = self.get_total_transactions_made()
        if count == 0:
            return 0.0
        return self.get_gross_earnings() / count

    def get_average_product_discount(self, barcode: Barcode) -> float:
        """
        Sum of the discount percentages special sales applied to the barcode,
        divided by the number of all recorded transactions.
        """
        discounts = sum(
            t.get_discount_amount(barcode)
            for t in self._transactions
            if t.kind is TransactionKind.SPECIAL_SALE
        )
        if discounts <= 0:
            return 0.0
        return discounts / self.get_total_transactions_made()
