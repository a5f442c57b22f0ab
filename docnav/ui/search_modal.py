"""
Search overlay for the docnav TUI.
"""

import logging
from typing import Callable, List, Optional

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Input, Label, OptionList
from textual.widgets.option_list import Option

from ..search import ResultEntry, SearchFunction, results_for_query

logger = logging.getLogger(__name__)


class SearchScreen(ModalScreen[Optional[str]]):
    """Modal search box with a live result list.

    Dismisses with the chosen document id, or None when closed without a
    choice. The screen underneath cannot scroll or take input while this
    is shown.
    """

    CSS = """
    SearchScreen {
        align: center top;
    }

    #search-dialog {
        margin-top: 3;
        width: 80%;
        max-width: 100;
        height: auto;
        max-height: 80%;
        border: thick $background 80%;
        background: $surface;
        padding: 1 2;
    }

    #search-hint {
        color: $text-muted;
        height: 1;
    }

    OptionList {
        height: auto;
        max-height: 20;
        margin-top: 1;
    }
    """

    BINDINGS = [
        Binding("escape", "close_search", "Close", priority=True),
        Binding("down", "focus_results", "Results", show=False),
    ]

    def __init__(
        self,
        search: SearchFunction,
        *,
        input_id: str = "search-model-input",
        results_id: str = "search-results",
        on_escape: Optional[Callable[[], None]] = None,
    ):
        super().__init__()
        self._search_function = search
        self.input_id = input_id
        self.results_id = results_id
        self._escape_handler = on_escape
        self._result_entries: List[ResultEntry] = []
        self._dismissing = False

    def compose(self) -> ComposeResult:
        with Vertical(id="search-dialog"):
            yield Input(placeholder="Search the docs...", id=self.input_id)
            yield Label("[dim]enter to open, esc to close[/dim]", id="search-hint")
            yield OptionList(id=self.results_id)

    def on_mount(self) -> None:
        self.query_one(f"#{self.input_id}", Input).focus()

    @property
    def entries(self) -> List[ResultEntry]:
        return list(self._result_entries)

    def show_entries(self, entries: List[ResultEntry]) -> None:
        """Replace the result list."""
        self._result_entries = list(entries)
        results = self.query_one(f"#{self.results_id}", OptionList)
        results.clear_options()
        results.add_options(
            [
                Option(entry.label, id=entry.doc_id, disabled=entry.placeholder)
                for entry in self._result_entries
            ]
        )

    def on_input_changed(self, event: Input.Changed) -> None:
        entries = results_for_query(event.value, self._search_function)
        if entries is not None:
            self.show_entries(entries)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        for entry in self._result_entries:
            if not entry.placeholder and entry.doc_id:
                self.close(entry.doc_id)
                return

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        if event.option.id:
            self.close(event.option.id)

    def action_focus_results(self) -> None:
        self.query_one(f"#{self.results_id}", OptionList).focus()

    def action_close_search(self) -> None:
        if self._escape_handler is not None:
            self._escape_handler()
        else:
            self.close(None)

    def close(self, result: Optional[str] = None) -> None:
        """Dismiss once; later calls are ignored."""
        if self._dismissing:
            return
        self._dismissing = True
        logger.debug("Search overlay closed with %r", result)
        self.dismiss(result)
