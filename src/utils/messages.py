from textual.message import Message


class QuitRequestedMessage(Message):
    """
    broadcasted when the app is about to quit
    """

    bubble = True


class CartChangedMessage(Message):
    """
    Fired by the shop screen whenever a transaction is opened, products are
    added to the cart, or the transaction is closed.
    """

    bubble = True


class StockChangedMessage(Message):
    """
    Fired when products are stocked, so stock tables can refresh
    """

    bubble = True


class TransactionRecordedMessage(Message):
    """
    Fired after a checkout recorded a transaction in the history, so the app
    can announce the sale.
    """

    bubble = True

    def __init__(self, total_cents: int) -> None:
        super().__init__()
        self.total_cents = total_cents


class ModeSwitchedMessage(Message):
    """
    fired whenever switch_mode is called
    must be fired from app level
    """

    bubble = True

    def __init__(self, old_mode: str, new_mode: str) -> None:
        super().__init__()
        self.old_mode = old_mode
        self.new_mode = new_mode
