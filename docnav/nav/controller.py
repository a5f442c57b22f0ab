"""
Navigation tree controller.

Owns the expansion set and scroll offset of a documentation sidebar,
restores them from session storage on load, keeps the active page's
ancestors open, and persists every change immediately.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from ..config.constants import (
    CLOSE_SEARCH_KEY,
    DEFAULT_SEARCH_SHORTCUT,
    EXPANDED_GROUPS_KEY,
    SIDEBAR_SCROLL_KEY,
)
from ..config.ui_config import terminal_prefers_dark
from ..exceptions import StorageError
from ..storage import KeyValueStorage
from .protocols import NavigationSurface
from .state import (
    ancestors_of,
    ensure_groups,
    parse_expanded_groups,
    parse_scroll_position,
    seed_expanded_groups,
    serialize_expanded_groups,
    serialize_scroll_position,
    toggle_group,
)

logger = logging.getLogger(__name__)


class NavigationTreeController:
    """Drives a NavigationSurface from persisted session state.

    Construct one per page load (or per browser session in the terminal
    app) and call initialize() once the surface is rendered.
    """

    def __init__(
        self,
        surface: NavigationSurface,
        storage: KeyValueStorage,
        *,
        search_shortcut: str = DEFAULT_SEARCH_SHORTCUT,
        color_scheme: str = "auto",
        prefers_dark: Callable[[], bool] = terminal_prefers_dark,
    ):
        self.surface = surface
        self.storage = storage
        self.search_shortcut = search_shortcut.lower()
        self.color_scheme = color_scheme
        self._prefers_dark = prefers_dark

        self._expanded: List[str] = []
        self._scroll_position: float = 0.0
        self._search_open = False
        self._mobile_menu_open = False
        self._initialized = False

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def expanded_groups(self) -> List[str]:
        """Current expansion set, in persisted order."""
        return list(self._expanded)

    @property
    def scroll_position(self) -> float:
        return self._scroll_position

    @property
    def search_open(self) -> bool:
        return self._search_open

    @property
    def mobile_menu_open(self) -> bool:
        return self._mobile_menu_open

    @property
    def initialized(self) -> bool:
        return self._initialized

    def is_expanded(self, group_id: str) -> bool:
        return group_id in self._expanded

    # ------------------------------------------------------------------
    # Storage access; failures never escape
    # ------------------------------------------------------------------

    def _read(self, key: str) -> Optional[str]:
        try:
            return self.storage.get_item(key)
        except StorageError as e:
            logger.warning("Could not read %s from session storage: %s", key, e)
            return None

    def _write(self, key: str, value: str) -> None:
        try:
            self.storage.set_item(key, value)
        except StorageError as e:
            logger.warning("Could not write %s to session storage: %s", key, e)

    def _persist_expanded(self) -> None:
        self._write(EXPANDED_GROUPS_KEY, serialize_expanded_groups(self._expanded))

    def _load_expanded(self) -> Optional[List[str]]:
        raw = self._read(EXPANDED_GROUPS_KEY)
        groups = parse_expanded_groups(raw)
        if raw is not None and groups is None:
            logger.info("Discarding malformed expanded groups state: %r", raw)
        return groups

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """Restore state onto the surface and start routing its events."""
        first_group = self.surface.first_group_id()
        if first_group is None:
            logger.debug("Sidebar has no menu group to expand by default")

        self._expanded = seed_expanded_groups(self._load_expanded(), first_group)

        active = self.surface.active_node_id()
        if active is not None:
            self._expanded = ensure_groups(
                self._expanded, ancestors_of(active, self.surface)
            )

        for group_id in self._expanded:
            self.surface.set_group_expanded(group_id, True)
        self._persist_expanded()

        offset = parse_scroll_position(self._read(SIDEBAR_SCROLL_KEY))
        if offset is not None:
            self._scroll_position = offset
            self.surface.set_scroll_position(offset)

        self.surface.apply_color_scheme(self.use_dark_scheme())
        self.surface.attach(self)
        self._initialized = True
        logger.info(
            "Navigation initialized: active=%s expanded=%s", active, self._expanded
        )

    def reload(self) -> List[str]:
        """Re-read the expansion set from storage without touching the surface."""
        self._expanded = self._load_expanded() or []
        return self.expanded_groups

    def use_dark_scheme(self) -> bool:
        """Whether the dark highlight theme applies."""
        if self.color_scheme == "dark":
            return True
        if self.color_scheme == "light":
            return False
        return self._prefers_dark()

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def on_toggle(self, group_id: Optional[str]) -> None:
        """Flip a group between expanded and collapsed, then persist."""
        if not group_id:
            return
        self._expanded = toggle_group(self._expanded, group_id)
        self.surface.set_group_expanded(group_id, group_id in self._expanded)
        self._persist_expanded()

    def reveal(self, node_id: str) -> List[str]:
        """Open every group enclosing node_id.

        Used when the active page changes without a reload. Returns the
        group ids that were newly expanded.
        """
        ancestors = ancestors_of(node_id, self.surface)
        added = [group_id for group_id in ancestors if group_id not in self._expanded]
        for group_id in ancestors:
            self.surface.set_group_expanded(group_id, True)
        if added:
            self._expanded = ensure_groups(self._expanded, added)
            self._persist_expanded()
        return added

    def on_scroll(self, offset: float) -> None:
        """Record the navigation panel's scroll offset."""
        self._scroll_position = max(0.0, float(offset))
        self._write(SIDEBAR_SCROLL_KEY, serialize_scroll_position(self._scroll_position))

    def handle_key(self, key: str) -> bool:
        """Route a key-up event. Returns True when the key was handled."""
        key = key.lower()
        if key == CLOSE_SEARCH_KEY:
            was_open = self._search_open
            self.close_search()
            return was_open
        if key == f"ctrl+{self.search_shortcut}":
            self.open_search()
            return True
        return False

    def open_search(self) -> None:
        self._search_open = True
        self.surface.set_search_overlay_open(True)

    def close_search(self) -> None:
        self._search_open = False
        self.surface.set_search_overlay_open(False)

    def toggle_mobile_menu(self) -> None:
        self._mobile_menu_open = not self._mobile_menu_open
        self.surface.set_mobile_menu_open(self._mobile_menu_open)

    def close_mobile_menu(self) -> None:
        self._mobile_menu_open = False
        self.surface.set_mobile_menu_open(False)
