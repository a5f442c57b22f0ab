"""
Textual implementation of the navigation surface.

Maps the sidebar contract onto the browser app: groups are NavTree
nodes, the search overlay is a SearchScreen, and the mobile slide-over
is the sidebar sliding in over the content on narrow terminals.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from .nav_tree import NavTree
from .search_modal import SearchScreen
from .themes import theme_for_scheme

if TYPE_CHECKING:
    from ..nav.controller import NavigationTreeController
    from .app import DocnavApp

logger = logging.getLogger(__name__)

SLIDE_OPEN_CLASS = "-slide-open"


class TextualNavigationSurface:
    """NavigationSurface over a running DocnavApp."""

    def __init__(self, app: DocnavApp):
        self.app = app
        self.controller: Optional[NavigationTreeController] = None
        self._search_screen: Optional[SearchScreen] = None

    @property
    def tree(self) -> NavTree:
        return self.app.nav_tree

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def first_group_id(self) -> Optional[str]:
        return self.tree.first_group_id()

    def active_node_id(self) -> Optional[str]:
        return self.tree.active_id

    def parent_group_of(self, node_id: str) -> Optional[str]:
        return self.tree.parent_id_of(node_id)

    def is_group_expanded(self, group_id: str) -> bool:
        node = self.tree.find_node(group_id)
        return node is not None and node.is_expanded

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def set_group_expanded(self, group_id: str, expanded: bool) -> None:
        node = self.tree.find_node(group_id)
        if node is None or not node.allow_expand:
            return
        if expanded and not node.is_expanded:
            node.expand()
        elif not expanded and node.is_expanded:
            node.collapse()

    def set_scroll_position(self, offset: float) -> None:
        # Layout is not final until the expanded nodes have been laid out
        self.tree.call_after_refresh(self.tree.scroll_to, y=offset, animate=False)

    def apply_color_scheme(self, dark: bool) -> None:
        if self.app.explicit_theme:
            return
        self.app.theme = theme_for_scheme(dark)

    def set_search_overlay_open(self, is_open: bool) -> None:
        if is_open:
            if self._search_screen is None:
                self._search_screen = self.app.make_search_screen()
                self.app.push_screen(self._search_screen, self.app.on_search_closed)
            return
        screen, self._search_screen = self._search_screen, None
        if screen is not None:
            screen.close(None)

    def set_mobile_menu_open(self, is_open: bool) -> None:
        self.app.body.set_class(is_open, SLIDE_OPEN_CLASS)

    def attach(self, controller: NavigationTreeController) -> None:
        self.controller = controller

    def search_closed(self) -> None:
        """The overlay dismissed itself; forget it."""
        self._search_screen = None
