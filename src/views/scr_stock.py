from collections import Counter

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.events import ScreenResume
from textual.validation import Number
from textual.widgets import Button, Input, Label, MarkdownViewer, RadioButton, RadioSet

from core.errors import FarmError
from inventory.models import Barcode, Product, Quality
from utils.messages import StockChangedMessage
from utils.pure import generate_markdown_table
from views.base_screen import BaseScreen


class StockScreen(BaseScreen):
    """
    Stock the inventory by barcode, quality and quantity.
    """

    def compose(self) -> ComposeResult:
        yield from super().compose()
        with Vertical():
            yield MarkdownViewer(id="md-stock", show_table_of_contents=False)
            with Horizontal(id="hort-controls"):
                with RadioSet(id="radio-quality"):
                    for quality in Quality:
                        yield RadioButton(
                            quality.name.title(), value=quality is Quality.REGULAR
                        )
                with Vertical():
                    yield Label("Quantity:")
                    yield Input(
                        value="1",
                        id="input-stock-qty",
                        type="integer",
                        validators=[Number(minimum=1)],
                    )
                with Horizontal(id="hort-stock-buttons"):
                    for barcode in Barcode:
                        yield Button(
                            f"Stock {barcode.display_name}",
                            id=f"btn-stock-{barcode.name.lower()}",
                            classes="btn-stock",
                            variant="success",
                        )

    def on_mount(self) -> None:
        self.render_stock()

    @on(ScreenResume)
    @on(StockChangedMessage)
    def render_stock(self) -> None:
        counts = Counter(self.app.state.farm.get_all_stock())
        headers = ["Product"] + [q.name.title() for q in Quality] + ["Total"]
        rows = []
        for barcode in Barcode:
            cells = [counts[Product(barcode, q)] for q in Quality]
            rows.append([barcode.display_name, *cells, sum(cells)])
        md_table = generate_markdown_table(headers, rows, ["l"] + ["r"] * (len(headers) - 1))
        title = f"### Stock ({self.app.state.inventory_kind} inventory)\n\n"
        self.query_one("#md-stock", MarkdownViewer).document.update(title + md_table)

    @on(Button.Pressed, ".btn-stock")
    def handle_stock(self, event: Button.Pressed) -> None:
        barcode = Barcode[event.button.id.removeprefix("btn-stock-").upper()]
        radio_set = self.query_one("#radio-quality", RadioSet)
        index = radio_set.pressed_index if radio_set.pressed_index >= 0 else 0
        quality = list(Quality)[index]

        qty_input = self.query_one("#input-stock-qty", Input)
        try:
            qty = int(qty_input.value)
        except ValueError:
            qty_input.focus()
            qty_input.add_class("-invalid")
            self.notify("Quantity must be a whole number.", severity="error")
            return

        try:
            self.app.state.farm.stock_product(barcode, quality, None if qty == 1 else qty)
        except FarmError as e:
            self.notify(str(e), severity="error")
            return

        qty_input.remove_class("-invalid")
        self.notify(f"Stocked {qty} x {quality.name.title()} {barcode.display_name}.")
        self.post_message(StockChangedMessage())
