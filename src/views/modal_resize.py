from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Resize
from textual.screen import ModalScreen
from textual.widgets import Label

# smallest terminal that fits the sidebar next to the shop controls
MIN_WIDTH = 90
MIN_HEIGHT = 24


def is_too_small(width: int, height: int) -> bool:
    return width < MIN_WIDTH or height < MIN_HEIGHT


class ResizeScreenPromptModal(ModalScreen[None]):
    """
    Covers the screen until the terminal is at least MIN_WIDTH x MIN_HEIGHT.
    """

    def compose(self) -> ComposeResult:
        with Container(id="div-resize"):
            yield Label(
                f"Enlarge the terminal to at least {MIN_WIDTH}x{MIN_HEIGHT}",
                id="label-resize",
            )
            yield Label("", id="label-resize-size")

    def on_resize(self, event: Resize) -> None:
        if not is_too_small(event.size.width, event.size.height):
            self.dismiss()
            return
        self.query_one("#label-resize-size", Label).update(
            f"Current size: {event.size.width}x{event.size.height}"
        )
