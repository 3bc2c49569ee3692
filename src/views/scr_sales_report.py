from textual import on
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.events import ScreenResume
from textual.widgets import MarkdownViewer

from inventory.models import Barcode
from sales.history import TransactionHistory
from utils.messages import ModeSwitchedMessage
from utils.pure import format_cents, generate_markdown_table
from views.base_screen import BaseScreen


def build_report(history: TransactionHistory) -> str:
    """Markdown summary of the sales history."""
    best = history.get_highest_grossing_transaction()
    best_line = (
        f"{best.get_associated_customer().name}, {format_cents(best.get_total())}"
        if best is not None
        else "-"
    )
    popular = history.get_most_popular_product()

    summary_md = (
        "### Sales Summary\n\n"
        f"- Transactions: {history.get_total_transactions_made()}\n"
        f"- Products Sold: {history.get_total_products_sold()}\n"
        f"- Gross Earnings: {format_cents(history.get_gross_earnings())}\n"
        f"- Avg Spend per Visit: "
        f"{format_cents(round(history.get_average_spend_per_visit()))}\n"
        f"- Most Popular Product: {popular.display_name}\n"
        f"- Highest Grossing Transaction: {best_line}\n\n"
    )

    headers = ["Product", "Sold", "Gross (base price)", "Avg Discount"]
    rows = [
        [
            barcode.display_name,
            history.get_total_products_sold(barcode),
            format_cents(history.get_gross_earnings(barcode)),
            f"{history.get_average_product_discount(barcode):.1f}%",
        ]
        for barcode in Barcode
    ]
    table_md = generate_markdown_table(headers, rows, ["l", "r", "r", "r"])
    return summary_md + "### By Product\n\n" + table_md + "\n"


class SalesReportScreen(BaseScreen):
    """
    Sales insights computed from the transaction history.
    """

    def compose(self) -> ComposeResult:
        yield from super().compose()
        with Vertical():
            yield MarkdownViewer(id="md-report", show_table_of_contents=False)

    def on_mount(self) -> None:
        self.handle_reload()

    @on(ScreenResume)
    @on(ModeSwitchedMessage)
    def handle_reload(self) -> None:
        md = build_report(self.app.state.farm.get_transaction_history())
        self.query_one("#md-report", MarkdownViewer).document.update(md)
