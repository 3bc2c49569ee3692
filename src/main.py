from textual import on
from textual.app import App
from textual.binding import Binding

from utils.logger import get_logger
from utils.messages import QuitRequestedMessage, TransactionRecordedMessage
from utils.pure import format_cents
from utils.state import GlobalState
from views.scr_sales_report import SalesReportScreen
from views.scr_shop import ShopScreen
from views.scr_stock import StockScreen

_logger = get_logger(__name__)


class FarmShopApp(App):
    BINDINGS = [
        Binding("ctrl+t", "switch_light", "Toggle Theme", show=True),
    ]

    MODES = {
        "shop": ShopScreen,
        "stock": StockScreen,
        "report": SalesReportScreen,
    }

    MODE_TITLES = {
        "shop": "Shop",
        "stock": "Stock Management",
        "report": "Sales Report",
    }

    CSS_PATH = "styles/farm.tcss"

    state: GlobalState

    def __init__(self, state: GlobalState | None = None):
        super().__init__()
        self.state = state or GlobalState.from_environment()

    async def on_mount(self) -> None:
        _logger.info(f"Starting farm shop with {self.state.inventory_kind} inventory")
        await self.switch_mode("shop")

    def action_switch_light(self):
        if self.theme == "textual-dark":
            self.theme = "solarized-light"
        else:
            self.theme = "textual-dark"
        self.notify(f"Theme changed to {self.theme}")

    @on(TransactionRecordedMessage)
    def handle_transaction_recorded(self, message: TransactionRecordedMessage):
        self.notify(f"Sale recorded: {format_cents(message.total_cents)}")

    @on(QuitRequestedMessage)
    def handle_quit(self):
        self.exit()


def main() -> None:
    FarmShopApp().run()


if __name__ == "__main__":
    main()
