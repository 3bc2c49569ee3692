from textual import on, work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.events import Resize, ScreenResume
from textual.screen import Screen
from textual.widgets import Footer, Header, Label, ListItem, ListView, Markdown

from utils.messages import (
    CartChangedMessage,
    ModeSwitchedMessage,
    StockChangedMessage,
)
from utils.pure import generate_markdown_table
from views.modal_dialog import QuitDialogModal
from views.modal_resize import ResizeScreenPromptModal, is_too_small


class Sidebar(Container):
    init_mode = ""

    def compose(self) -> ComposeResult:
        yield Label("Farm Info", id="label-info-1")
        yield Markdown("", id="md-farminfo")
        yield Label("Menu", id="label-info-2")
        yield ListView(id="list-menu")

    async def on_mount(self):
        self.init_mode = self.app.current_mode

        list_menu: ListView = self.query_one("#list-menu")
        await list_menu.clear()
        await list_menu.extend(
            [
                ListItem(Label(v), id="list-menu-item-" + k)
                for k, v in self.app.MODE_TITLES.items()
            ]
        )
        self.highlight_item(self.init_mode)
        self.refresh_info()

    def refresh_info(self) -> None:
        state = self.app.state
        ongoing = state.ongoing_transaction()
        shopping = ongoing.get_associated_customer().name if ongoing else "-"
        table_rows = [
            ["Inventory", state.inventory_kind.title()],
            ["Customers", len(state.farm.get_all_customers())],
            ["Units in stock", len(state.farm.get_all_stock())],
            ["Now shopping", shopping],
        ]
        md_table_str = generate_markdown_table(None, [["Item", "Value"], *table_rows], ["l", "l"])
        self.query_one("#md-farminfo", Markdown).update(md_table_str)

    async def on_list_view_selected(self, event: ListView.Selected):
        selected_mode = event.item.id.removeprefix("list-menu-item-")
        self.highlight_item(self.init_mode)
        if self.app.current_mode != selected_mode:
            self.post_message(ModeSwitchedMessage(self.app.current_mode, selected_mode))
            await self.app.switch_mode(selected_mode)

    def highlight_item(self, mode_str: str):
        list_menu = self.query_one("#list-menu")
        for item in list_menu.children:
            item.highlighted = item.id == "list-menu-item-" + mode_str


class BaseScreen(Screen):
    """
    Inherited by all screens, contains common elements like
    headers, footers, sidebar, and keybindings.
    """

    BINDINGS = [
        Binding("ctrl+z", "quit", "Quit App", show=True),
    ]

    def __init__(self):
        super().__init__()

        self.configure()

    def configure(
        self,
        header_sub_title: str = "Farm Shop",
        show_sidebar: bool = True,
    ) -> None:
        """
        configure behavior of the base screen
        """
        self.app.title = "Farm Shop"
        self.sub_title = header_sub_title
        for k, v in self.app.MODES.items():
            if isinstance(self, v):
                self.sub_title = self.app.MODE_TITLES.get(k, header_sub_title)

        self._show_sidebar = show_sidebar

    def compose(self) -> ComposeResult:
        if self._show_sidebar:
            yield Sidebar()
        yield Header()
        yield Footer(show_command_palette=False)

    def on_resize(self, event: Resize) -> None:
        if is_too_small(event.size.width, event.size.height) and not isinstance(
            self.app.screen, ResizeScreenPromptModal
        ):
            self.app.push_screen(ResizeScreenPromptModal())

    @on(ScreenResume)
    @on(CartChangedMessage)
    @on(StockChangedMessage)
    def handle_sidebar_refresh(self):
        if self._show_sidebar:
            for sidebar in self.query(Sidebar):
                sidebar.refresh_info()

    @work()
    async def action_quit(self):
        await self.app.push_screen_wait(QuitDialogModal())
