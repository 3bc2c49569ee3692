from textual import events, on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, MarkdownViewer


class ReceiptModal(ModalScreen[None]):
    """
    Shows a rendered receipt after checkout.
    """

    def __init__(self, receipt_md: str):
        super().__init__()
        self._receipt_md = receipt_md

    def compose(self) -> ComposeResult:
        with Vertical(id="div-receipt"):
            yield MarkdownViewer(self._receipt_md, show_table_of_contents=False)
            with Horizontal():
                yield Button("Close", id="btn-close", variant="primary")

    def on_mount(self):
        self.query_one("#btn-close").focus()

    def on_key(self, event: events.Key) -> None:
        if event.key == "escape":
            self.dismiss()

    @on(Button.Pressed, "#btn-close")
    def handle_close(self):
        self.dismiss()
