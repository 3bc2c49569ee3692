from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Mapping, NamedTuple, Optional, Set, Tuple

from core.errors import FailedTransactionError
from inventory.models import Barcode, Product
from sales import pricing, receipt
from utils.logger import get_logger
from utils.pure import format_cents

if TYPE_CHECKING:
    from customers.models import Customer

_logger = get_logger(__name__)


class TransactionKind(Enum):
    PLAIN = "plain"
    CATEGORISED = "categorised"
    SPECIAL_SALE = "special_sale"


class ReceiptData(NamedTuple):
    headers: List[str]
    rows: List[List[str]]
    total: str
    savings: Optional[str]


PLAIN_HEADERS = ["Item", "Price"]
CATEGORISED_HEADERS = ["Item", "Qty", "Price (ea.)", "Subtotal"]


class Transaction:
    """
    Keeps track of what is to be (or has been) purchased and by whom.

    While active the purchases are whatever sits in the customer's cart.
    ``finalise`` takes a snapshot of the cart, empties it, and from then on
    the transaction only reports that snapshot.

    The kind decides receipt layout and pricing: categorised and special sale
    transactions group purchases by barcode, and special sales apply a
    percentage discount per barcode (rounded up to the cent).
    """

    def __init__(
        self,
        customer: Customer,
        kind: TransactionKind = TransactionKind.PLAIN,
        discounts: Optional[Mapping[Barcode, int]] = None,
    ) -> None:
        if discounts is not None and kind is not TransactionKind.SPECIAL_SALE:
            raise ValueError("Only special sale transactions carry discounts.")
        self._customer = customer
        self._kind = kind
        self._discounts: Optional[Dict[Barcode, int]] = (
            dict(discounts or {}) if kind is TransactionKind.SPECIAL_SALE else None
        )
        # None while observing the cart, the frozen purchases once finalised
        self._snapshot: Optional[Tuple[Product, ...]] = None

    @classmethod
    def categorised(cls, customer: Customer) -> Transaction:
        return cls(customer, TransactionKind.CATEGORISED)

    @classmethod
    def special_sale(
        cls, customer: Customer, discounts: Optional[Mapping[Barcode, int]] = None
    ) -> Transaction:
        """
        Special sale with integer percentage discounts per barcode. Values are
        expected to be within 0..100 but are not checked.
        """
        return cls(customer, TransactionKind.SPECIAL_SALE, discounts or {})

    @property
    def kind(self) -> TransactionKind:
        return self._kind

    def get_associated_customer(self) -> Customer:
        return self._customer

    def is_finalised(self) -> bool:
        return self._snapshot is not None

    def get_purchases(self) -> List[Product]:
        """Copy of the current purchases; changing it does not affect the transaction."""
        if self._snapshot is not None:
            return list(self._snapshot)
        return self._customer.cart.get_contents()

    def finalise(self) -> None:
        """
        Freeze the purchases and empty the customer's cart.

        :raises FailedTransactionError: if the transaction is already finalised.
        """
        if self.is_finalised():
            raise FailedTransactionError("Transaction has already been finalised.")
        cart = self._customer.cart
        self._snapshot = tuple(cart.get_contents())
        cart.set_empty()
        _logger.debug(
            f"Finalised {self._kind.value} transaction for {self._customer.name} "
            f"with {len(self._snapshot)} item(s)"
        )

    def get_total(self) -> int:
        """Total price in cents, recomputed from the current purchases."""
        return pricing.transaction_total(self.get_purchases(), self._discounts)

    # ---------------------------
    # Grouping by product type
    # ---------------------------

    def get_purchased_types(self) -> Set[Barcode]:
        return {p.barcode for p in self.get_purchases()}

    def get_purchases_by_type(self) -> Dict[Barcode, List[Product]]:
        return pricing.group_by_type(self.get_purchases())

    def get_purchase_quantity(self, barcode: Barcode) -> int:
        return pricing.purchase_quantity(self.get_purchases(), barcode)

    def get_purchase_subtotal(self, barcode: Barcode) -> int:
        """Subtotal in cents for the barcode, after any special sale discount."""
        return pricing.purchase_subtotal(
            self.get_purchases(), barcode, self._discounts
        )

    # ---------------------------
    # Discounts
    # ---------------------------

    def get_discounts(self) -> Dict[Barcode, int]:
        return dict(self._discounts or {})

    def get_discount_amount(self, barcode: Barcode) -> int:
        """Discount percentage for the barcode, 0 when none is configured."""
        if not self._discounts:
            return 0
        return self._discounts.get(barcode, 0)

    def get_total_saved(self) -> int:
        return pricing.undiscounted_total(self.get_purchases()) - self.get_total()

    # ---------------------------
    # Receipts
    # ---------------------------

    def get_receipt_data(self) -> ReceiptData:
        if self._kind is TransactionKind.PLAIN:
            headers = list(PLAIN_HEADERS)
            rows = [
                [p.display_name, format_cents(p.base_price)]
                for p in self.get_purchases()
            ]
        else:
            headers = list(CATEGORISED_HEADERS)
            rows = self._categorised_rows()

        savings = None
        if self._kind is TransactionKind.SPECIAL_SALE and self.is_finalised():
            saved = self.get_total_saved()
            if saved > 0:
                savings = format_cents(saved)

        return ReceiptData(headers, rows, format_cents(self.get_total()), savings)

    def _categorised_rows(self) -> List[List[str]]:
        rows: List[List[str]] = []
        for barcode in Barcode:
            quantity = self.get_purchase_quantity(barcode)
            if quantity <= 0:
                continue
            row = [
                barcode.display_name,
                str(quantity),
                format_cents(barcode.base_price),
                format_cents(self.get_purchase_subtotal(barcode)),
            ]
            discount = self.get_discount_amount(barcode)
            if discount > 0:
                row.append(f"Discount applied! {discount}% off {barcode.display_name}")
            rows.append(row)
        return rows

    def get_receipt(self) -> str:
        if not self.is_finalised():
            return receipt.create_active_receipt()
        data = self.get_receipt_data()
        return receipt.create_receipt(
            data.headers,
            data.rows,
            data.total,
            self._customer.name,
            data.savings,
        )

    def __str__(self) -> str:
        status = "Finalised" if self.is_finalised() else "Active"
        customer = str(self._customer).removeprefix("Name")
        products = "[" + ", ".join(str(p) for p in self.get_purchases()) + "]"
        text = (
            f"Transaction {{Customer{customer}, Status: {status}, "
            f"Associated Products: {products}"
        )
        if self._kind is TransactionKind.SPECIAL_SALE:
            discounts = ", ".join(
                f"{b.name}={d}" for b, d in self.get_discounts().items()
            )
            text += f", Discounts: {{{discounts}}}"
        return text + "}"
