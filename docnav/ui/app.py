"""
docnav documentation browser.

A sidebar NavTree beside the current document. Expansion state and the
sidebar's scroll offset persist in session storage, so reopening the
browser on the same session shows the tree as it was left.
"""

import logging
from typing import Optional

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import Footer, Header, Markdown, Static

from ..config.constants import DEFAULT_SEARCH_SHORTCUT, TOGGLE_SIDEBAR_KEY
from ..config.ui_config import DEFAULT_ELEMENTS, ElementIds, terminal_prefers_dark
from ..nav.controller import NavigationTreeController
from ..search import SiteSearch
from ..site import Site, SiteDocument
from ..storage import KeyValueStorage, MemoryStorage
from .nav_tree import NavTree
from .search_modal import SearchScreen
from .surface import TextualNavigationSurface
from .themes import register_all_themes

logger = logging.getLogger(__name__)

NARROW_WIDTH = 80  # Below this the sidebar becomes a slide-over
NARROW_CLASS = "-narrow"


class DocnavApp(App[None]):
    """Browse a documentation site with a persistent navigation tree."""

    CSS = """
    #body {
        height: 1fr;
    }

    NavTree {
        width: 32;
        min-width: 20;
        height: 100%;
        background: $panel;
        border-right: solid $primary 30%;
    }

    #content {
        width: 1fr;
        padding: 0 2;
    }

    #doc-title {
        text-style: bold;
        color: $accent;
        margin-top: 1;
    }

    #doc-meta {
        color: $text-muted;
        margin-bottom: 1;
    }

    #body.-narrow NavTree {
        display: none;
    }

    #body.-narrow.-slide-open NavTree {
        display: block;
        width: 100%;
    }

    #body.-narrow.-slide-open #content {
        display: none;
    }
    """

    BINDINGS = [
        Binding(TOGGLE_SIDEBAR_KEY, "toggle_sidebar", "Sidebar"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        site: Site,
        storage: Optional[KeyValueStorage] = None,
        *,
        search_shortcut: str = DEFAULT_SEARCH_SHORTCUT,
        color_scheme: str = "auto",
        theme_name: Optional[str] = None,
        elements: Optional[ElementIds] = None,
        start_doc_id: Optional[str] = None,
    ):
        super().__init__()
        self.site = site
        self.storage = storage if storage is not None else MemoryStorage()
        self.search_shortcut = search_shortcut
        self.color_scheme = color_scheme
        self.explicit_theme = theme_name
        self.elements: ElementIds = elements or {**DEFAULT_ELEMENTS}
        self.start_doc_id = start_doc_id
        self.site_search = SiteSearch(site)
        self.surface = TextualNavigationSurface(self)
        self.controller = NavigationTreeController(
            self.surface,
            self.storage,
            search_shortcut=search_shortcut,
            color_scheme=color_scheme,
            prefers_dark=terminal_prefers_dark,
        )
        self.title = site.title

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="body"):
            yield NavTree(id=self.elements["sidebar"])
            with VerticalScroll(id="content"):
                yield Static(id="doc-title")
                yield Static(id="doc-meta")
                yield Markdown(id="doc-body")
        yield Footer()

    @property
    def nav_tree(self) -> NavTree:
        return self.query_one(NavTree)

    @property
    def body(self) -> Horizontal:
        return self.query_one("#body", Horizontal)

    def on_mount(self) -> None:
        register_all_themes(self)
        if self.explicit_theme:
            self.theme = self.explicit_theme

        self._update_narrow(self.size.width)

        tree = self.nav_tree
        tree.populate_from_site(self.site)

        start = self._start_document()
        if start is not None:
            tree.set_active(start.id)
            self.show_document(start)

        # Everything below must finish before the first user event
        self.controller.initialize()
        tree.focus()

    def _start_document(self) -> Optional[SiteDocument]:
        if self.start_doc_id:
            doc = self.site.find(self.start_doc_id)
            if doc is not None:
                return doc
            logger.warning("Start document %r not found", self.start_doc_id)
        return self.site.first_document()

    def on_resize(self, event: events.Resize) -> None:
        self._update_narrow(event.size.width)

    def _update_narrow(self, width: int) -> None:
        for body in self.query("#body"):
            body.set_class(width < NARROW_WIDTH, NARROW_CLASS)

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def show_document(self, doc: SiteDocument) -> None:
        self.query_one("#doc-title", Static).update(doc.title)
        meta = []
        if doc.published:
            meta.append(doc.published.isoformat())
        if doc.description:
            meta.append(doc.description)
        if doc.edit_link:
            meta.append(f"edit: {doc.edit_link}")
        self.query_one("#doc-meta", Static).update(" · ".join(meta))
        self.query_one("#doc-body", Markdown).update(doc.body)
        self.sub_title = doc.title

    def open_document(self, doc_id: str) -> None:
        """Navigate to doc_id: make it active, show it, and reveal it in the tree."""
        doc = self.site.find(doc_id)
        if doc is None:
            logger.warning("Cannot open unknown document %r", doc_id)
            return
        tree = self.nav_tree
        tree.set_active(doc_id)
        self.show_document(doc)
        self.controller.reveal(doc_id)
        node = tree.find_node(doc_id)
        if node is not None:
            tree.call_after_refresh(tree.move_cursor, node)

    # ------------------------------------------------------------------
    # Tree events
    # ------------------------------------------------------------------

    def on_nav_tree_toggle_requested(self, event: NavTree.ToggleRequested) -> None:
        self.controller.on_toggle(event.doc_id)

    def on_nav_tree_scrolled(self, event: NavTree.Scrolled) -> None:
        if self.controller.initialized:
            self.controller.on_scroll(event.offset)

    def on_tree_node_selected(self, event: NavTree.NodeSelected) -> None:
        node = event.node
        if node.data is None:
            return
        if node.allow_expand:
            self.controller.on_toggle(node.data.id)
        self.nav_tree.set_active(node.data.id)
        self.show_document(node.data)
        if self.controller.mobile_menu_open:
            self.controller.close_mobile_menu()

    def on_tree_node_expanded(self, event: NavTree.NodeExpanded) -> None:
        self._reconcile(event.node)

    def on_tree_node_collapsed(self, event: NavTree.NodeCollapsed) -> None:
        self._reconcile(event.node)

    def _reconcile(self, node) -> None:
        """Fold a widget-initiated expand/collapse into the controller."""
        if node.data is None or not self.controller.initialized:
            return
        doc_id = node.data.id
        if node.is_expanded != self.controller.is_expanded(doc_id):
            self.controller.on_toggle(doc_id)

    # ------------------------------------------------------------------
    # Keys, search and sidebar
    # ------------------------------------------------------------------

    def on_key(self, event: events.Key) -> None:
        if self.controller.handle_key(event.key):
            event.stop()
            event.prevent_default()

    def make_search_screen(self) -> SearchScreen:
        return SearchScreen(
            self.site_search,
            input_id=self.elements["search_input"],
            results_id=self.elements["search_results"],
            on_escape=lambda: self.controller.handle_key("escape"),
        )

    def on_search_closed(self, doc_id: Optional[str]) -> None:
        self.surface.search_closed()
        self.controller.close_search()
        if doc_id:
            self.open_document(doc_id)

    def action_toggle_sidebar(self) -> None:
        self.controller.toggle_mobile_menu()
