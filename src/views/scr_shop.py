from typing import List, Optional

from textual import on, work
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.events import ScreenResume
from textual.validation import Number
from textual.widgets import Button, Input, Label, MarkdownViewer, OptionList

from core.errors import FarmError
from customers.models import Customer
from inventory.models import Barcode
from utils.logger import get_logger
from utils.messages import (
    CartChangedMessage,
    ModeSwitchedMessage,
    TransactionRecordedMessage,
)
from utils.pure import format_cents, generate_markdown_table
from views.base_screen import BaseScreen
from views.modal_dialog import DialogModal
from views.modal_receipt import ReceiptModal

_logger = get_logger(__name__)


class ShopScreen(BaseScreen):
    """
    Serve a customer: open a transaction, fill the cart from the inventory,
    check out and show the receipt.
    """

    def __init__(self) -> None:
        super().__init__()
        self._customers: List[Customer] = []

    def compose(self) -> ComposeResult:
        yield from super().compose()
        with Horizontal(id="hort-shop"):
            with Vertical(id="div-customers"):
                yield Label("Customers")
                yield OptionList(id="optlist-customers")
                yield Label("Start shopping as")
                yield Button("Plain", id="btn-start-plain", classes="btn-start")
                yield Button(
                    "Categorised", id="btn-start-categorised", classes="btn-start"
                )
                yield Button(
                    "Special Sale",
                    id="btn-start-special_sale",
                    classes="btn-start",
                    variant="success",
                )
            with Vertical(id="div-cart"):
                yield MarkdownViewer(id="md-cart", show_table_of_contents=False)
                with Horizontal(id="hort-qty"):
                    yield Label("Quantity")
                    yield Input(
                        value="1",
                        id="input-qty",
                        type="integer",
                        validators=[Number(minimum=1)],
                    )
                with Horizontal(id="hort-products"):
                    for barcode in Barcode:
                        yield Button(
                            f"{barcode.display_name.title()} "
                            f"{format_cents(barcode.base_price)}",
                            id=f"btn-add-{barcode.name.lower()}",
                            classes="btn-add",
                        )
                yield Button("Checkout", id="btn-checkout", variant="primary")

    def on_mount(self) -> None:
        self.load_customers()
        self.handle_cart_change()

    @on(ScreenResume)
    @on(ModeSwitchedMessage)
    def load_customers(self) -> None:
        self._customers = self.app.state.farm.get_all_customers()
        opt_list = self.query_one("#optlist-customers", OptionList)
        opt_list.clear_options()
        opt_list.add_options(
            [f"{c.name} ({c.phone_number})" for c in self._customers]
        )

    def on_option_list_option_selected(self, message: OptionList.OptionSelected):
        self.app.state.customer = self._customers[message.option_index]
        self.notify(f"Serving {self.app.state.customer.name}.")

    @on(Button.Pressed, ".btn-start")
    def handle_start(self, event: Button.Pressed) -> None:
        kind = event.button.id.removeprefix("btn-start-")
        try:
            self.app.state.start_shopping(kind)
        except (FarmError, ValueError) as e:
            self.notify(str(e), severity="error")
            return
        self.post_message(CartChangedMessage())

    def _quantity(self) -> Optional[int]:
        qty_input = self.query_one("#input-qty", Input)
        try:
            qty = int(qty_input.value)
        except ValueError:
            qty = 0
        if qty < 1:
            qty_input.focus()
            qty_input.add_class("-invalid")
            self.notify("Quantity must be at least 1.", severity="error")
            return None
        qty_input.remove_class("-invalid")
        return qty

    @on(Button.Pressed, ".btn-add")
    def handle_add(self, event: Button.Pressed) -> None:
        barcode = Barcode[event.button.id.removeprefix("btn-add-").upper()]
        qty = self._quantity()
        if qty is None:
            return
        try:
            added = self.app.state.farm.add_to_cart(barcode, None if qty == 1 else qty)
        except FarmError as e:
            self.notify(str(e), severity="error")
            return

        if added == 0:
            self.notify(f"No {barcode.display_name} in stock.", severity="warning")
        elif added < qty:
            self.notify(
                f"Only {added} {barcode.display_name} available.", severity="warning"
            )
        self.post_message(CartChangedMessage())

    @on(CartChangedMessage)
    def handle_cart_change(self) -> None:
        transaction = self.app.state.ongoing_transaction()
        viewer = self.query_one("#md-cart", MarkdownViewer)
        if transaction is None:
            viewer.document.update(
                "### Cart\n\n_No customer is shopping. Pick a customer and start._"
            )
            return

        data = transaction.get_receipt_data()
        width = len(data.headers)
        rows = [row[:width] for row in data.rows]
        md = (
            f"### Cart: {transaction.get_associated_customer().name} "
            f"({transaction.kind.value.replace('_', ' ')})\n\n"
        )
        if rows:
            md += generate_markdown_table(data.headers, rows, ["l"] + ["r"] * (width - 1))
        else:
            md += "_Cart is empty._"
        md += f"\n\n**Total:** {data.total}"
        viewer.document.update(md)

    @on(Button.Pressed, "#btn-checkout")
    @work()
    async def handle_checkout(self) -> None:
        farm = self.app.state.farm
        transaction = self.app.state.ongoing_transaction()
        if transaction is None:
            self.notify("No customer is shopping.", severity="warning")
            return

        if not await self.app.push_screen_wait(
            DialogModal(
                "Complete the sale? This cannot be undone.",
                primary_text="Yes",
                secondary_text="No",
                tone="positive",
            )
        ):
            return

        try:
            recorded = farm.checkout()
        except FarmError as e:
            _logger.warning(f"Checkout failed: {e}")
            self.notify(str(e), severity="error")
            return

        self.post_message(CartChangedMessage())
        if not recorded:
            self.notify("Nothing was bought, transaction not recorded.")
            return

        self.app.post_message(TransactionRecordedMessage(transaction.get_total()))
        await self.app.push_screen_wait(ReceiptModal(farm.get_last_receipt()))
