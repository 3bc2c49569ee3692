from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Literal, Optional

from core.config import configured_inventory_kind, make_inventory, sale_discounts
from core.farm import Farm
from core.seed import build_demo_farm
from customers.models import Customer
from inventory.models import Barcode
from sales.transaction import Transaction, TransactionKind


@dataclass
class GlobalState:
    """
    Centralized application state shared by screens.

    Fields:
      - farm: the farm model every screen reads and updates
      - inventory_kind: "basic" | "fancy", as configured at startup
      - discounts: discounts applied by special sale transactions
      - customer: the customer picked on the shop screen, if any
    """

    farm: Farm
    inventory_kind: str
    discounts: Dict[Barcode, int] = field(default_factory=dict)
    customer: Optional[Customer] = None

    @classmethod
    def from_environment(cls) -> GlobalState:
        kind = configured_inventory_kind()
        return cls(
            farm=build_demo_farm(make_inventory(kind)),
            inventory_kind=kind,
            discounts=sale_discounts(),
        )

    def ongoing_transaction(self) -> Optional[Transaction]:
        return self.farm.get_transaction_manager().get_ongoing_transaction()

    def start_shopping(
        self, kind: Literal["plain", "categorised", "special_sale"]
    ) -> Transaction:
        """
        Open a transaction of the given kind for the selected customer.
        Raises FailedTransactionError if one is already open.
        """
        if self.customer is None:
            raise ValueError("Pick a customer first.")
        tx_kind = TransactionKind(kind)
        if tx_kind is TransactionKind.SPECIAL_SALE:
            transaction = Transaction.special_sale(self.customer, self.discounts)
        else:
            transaction = Transaction(self.customer, tx_kind)
        self.farm.start_transaction(transaction)
        return transaction
