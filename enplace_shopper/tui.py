"""Interactive TUI for ticking off shopping list items."""

from __future__ import annotations

from dataclasses import dataclass, field

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, DataTable, Footer, Header, Label, Static

from .checklist import Checklist
from .ingredient_parser import ParsedIngredient
from .shopping_list import ShoppingCategory


@dataclass
class ChecklistResult:
    """Result from the checklist TUI."""

    confirmed: bool
    checked: set[str] = field(default_factory=set)


class ChecklistScreen(App[ChecklistResult]):
    """Interactive screen for checking off shopping list items."""

    CSS = """
    Screen {
        background: $surface;
    }

    #main-container {
        height: 100%;
        padding: 1;
    }

    #header-info {
        height: auto;
        padding: 1;
        background: $primary-background;
        color: $text;
    }

    #header-title {
        text-style: bold;
        padding-bottom: 1;
    }

    #header-desc {
        color: $text-muted;
    }

    #items-table {
        height: 1fr;
        margin: 1 0;
    }

    #summary {
        height: 3;
        padding: 0 1;
        background: $surface-darken-1;
        content-align: center middle;
    }

    #button-bar {
        height: 3;
        align: center middle;
        padding: 0 1;
    }

    #button-bar Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        Binding("space", "toggle_item", "Toggle"),
        Binding("a", "check_all", "Check All"),
        Binding("n", "check_none", "Check None"),
        Binding("r", "reset", "Reset All"),
        Binding("enter", "confirm", "Save"),
        Binding("q", "quit_cancel", "Cancel"),
        Binding("escape", "quit_cancel", "Cancel"),
    ]

    def __init__(
        self,
        groups: list[ShoppingCategory],
        checklist: Checklist | None = None,
        title: str | None = None,
    ) -> None:
        super().__init__()
        self.rows: list[tuple[str, ParsedIngredient]] = [
            (group.label, item) for group in groups for item in group.items
        ]
        self.list_title = title or "Shopping List"
        # Keys for items not on this list are kept untouched
        self.checked: set[str] = set(checklist.checked) if checklist else set()

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="main-container"):
            with Vertical(id="header-info"):
                yield Label("What have you picked up?", id="header-title")
                yield Label("Checked items are saved for your next shopping trip.", id="header-desc")
            table = DataTable(id="items-table")
            table.cursor_type = "row"
            table.add_columns("", "Category", "Item", "Amount")
            yield table
            yield Static(self._get_summary(), id="summary")
            with Horizontal(id="button-bar"):
                yield Button("Save (enter)", variant="success", id="btn-confirm")
                yield Button("Cancel (q)", variant="error", id="btn-cancel")
        yield Footer()

    def on_mount(self) -> None:
        self.title = self.list_title
        self._refresh_table()

    def _row_keys(self) -> set[str]:
        return {item.key for _, item in self.rows}

    def _get_summary(self) -> str:
        done = sum(1 for _, item in self.rows if item.key in self.checked)
        return f"Checked: {done}/{len(self.rows)}"

    def _refresh_table(self) -> None:
        table = self.query_one("#items-table", DataTable)
        table.clear()

        for label, item in self.rows:
            checkbox = "[x]" if item.key in self.checked else "[ ]"
            table.add_row(checkbox, label, item.name, item.amount)

        summary = self.query_one("#summary", Static)
        summary.update(self._get_summary())

    def toggle_row(self, row_idx: int) -> None:
        """Flip the checked state of one row."""
        if not 0 <= row_idx < len(self.rows):
            return
        key = self.rows[row_idx][1].key
        if key in self.checked:
            self.checked.discard(key)
        else:
            self.checked.add(key)

    def action_toggle_item(self) -> None:
        table = self.query_one("#items-table", DataTable)
        if table.cursor_row is not None:
            row_idx = table.cursor_row
            self.toggle_row(row_idx)
            self._refresh_table()
            # Keep cursor on same row
            table.move_cursor(row=row_idx)

    def action_check_all(self) -> None:
        self.checked |= self._row_keys()
        self._refresh_table()

    def action_check_none(self) -> None:
        self.checked -= self._row_keys()
        self._refresh_table()

    def action_reset(self) -> None:
        self.checked.clear()
        self._refresh_table()

    def action_confirm(self) -> None:
        self.exit(ChecklistResult(confirmed=True, checked=set(self.checked)))

    def action_quit_cancel(self) -> None:
        self.exit(ChecklistResult(confirmed=False))

    @on(DataTable.RowSelected)
    def on_row_selected(self, event: DataTable.RowSelected) -> None:
        """Toggle when a row is clicked or Enter is pressed on it."""
        self.action_toggle_item()

    @on(Button.Pressed, "#btn-confirm")
    def on_confirm_button(self) -> None:
        self.action_confirm()

    @on(Button.Pressed, "#btn-cancel")
    def on_cancel_button(self) -> None:
        self.action_quit_cancel()


def interactive_checklist(
    groups: list[ShoppingCategory],
    checklist: Checklist | None = None,
    title: str | None = None,
) -> ChecklistResult:
    """
    Launch interactive TUI for checking off items.

    Args:
        groups: Category sections from aggregate()
        checklist: Current checklist state
        title: Optional title for the screen

    Returns:
        ChecklistResult with confirmed status and the full set of checked keys
    """
    if not groups:
        return ChecklistResult(confirmed=True, checked=set(checklist.checked) if checklist else set())

    app = ChecklistScreen(groups, checklist, title)
    result = app.run()

    # Handle case where app exits without explicit result
    if result is None:
        return ChecklistResult(confirmed=False)
    return result
