"""
Navigation surface over a rendered HTML page.

Implements the sidebar DOM contract with BeautifulSoup so the controller
can run against static pages: expand the right groups before a page is
served, or inspect what a page would show for a given session.

Expected markup (groups may wrap their content or sit beside it):

    <nav id="left-sidebar">
      <div class="content-menu">
        <li class="menu" data-doc-id="intro">
          <a class="sidebar-nav-item">Intro</a><span class="menu-arrow"></span>
          <ul class="menu-group hidden" data-group-id="intro">
            <li class="menu" data-doc-id="setup">...</li>
          </ul>
        </li>
      </div>
    </nav>
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

from bs4 import BeautifulSoup, Tag

from ..config.constants import (
    ACTIVE_CLASS,
    CONTENT_MENU_CLASS,
    DOC_ID_ATTR,
    GROUP_ID_ATTR,
    HIDDEN_CLASS,
    HIGHLIGHT_DARK_TITLE,
    HIGHLIGHT_LIGHT_TITLE,
    MENU_ARROW_CLASS,
    MENU_CLASS,
    MENU_GROUP_CLASS,
    NAV_ITEM_CLASS,
    ROTATE_CLASS,
    SCROLL_LOCK_CLASS,
    SCROLL_TOP_ATTR,
)
from ..config.ui_config import DEFAULT_ELEMENTS, ElementIds
from ..exceptions import PageError
from .state import parse_scroll_position, serialize_scroll_position

if TYPE_CHECKING:
    from .controller import NavigationTreeController

logger = logging.getLogger(__name__)


def _classes(tag: Tag) -> List[str]:
    value = tag.get("class") or []
    if isinstance(value, str):
        return value.split()
    return list(value)


def has_class(tag: Tag, name: str) -> bool:
    return name in _classes(tag)


def add_class(tag: Tag, name: str) -> None:
    classes = _classes(tag)
    if name not in classes:
        classes.append(name)
        tag["class"] = classes


def remove_class(tag: Tag, name: str) -> None:
    classes = _classes(tag)
    if name in classes:
        classes = [c for c in classes if c != name]
        if classes:
            tag["class"] = classes
        else:
            del tag["class"]


def closest(tag: Optional[Tag], class_name: str) -> Optional[Tag]:
    """The tag itself or its nearest ancestor carrying class_name."""
    if tag is None:
        return None
    if has_class(tag, class_name):
        return tag
    return tag.find_parent(class_=class_name)


class HtmlNavigationSurface:
    """NavigationSurface backed by a parsed HTML document."""

    def __init__(self, html: str, elements: Optional[ElementIds] = None):
        self.soup = BeautifulSoup(html, "html.parser")
        self.elements: ElementIds = elements or {**DEFAULT_ELEMENTS}
        self.controller: Optional[NavigationTreeController] = None

    @classmethod
    def from_path(cls, path: Path, elements: Optional[ElementIds] = None) -> HtmlNavigationSurface:
        """Parse a rendered page from disk."""
        try:
            html = path.read_text(encoding="utf-8")
        except OSError as e:
            raise PageError("Failed to read page", path=str(path)) from e
        return cls(html, elements)

    def render(self) -> str:
        """The document with every applied change."""
        return str(self.soup)

    def write(self, path: Path) -> None:
        try:
            path.write_text(self.render(), encoding="utf-8")
        except OSError as e:
            raise PageError("Failed to write page", path=str(path)) from e

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def _by_id(self, key: str) -> Optional[Tag]:
        return self.soup.find(id=self.elements[key])  # type: ignore[literal-required]

    @property
    def sidebar(self) -> Optional[Tag]:
        return self._by_id("sidebar")

    def _menu_for(self, node_id: str) -> Optional[Tag]:
        return self.soup.find(class_=MENU_CLASS, attrs={DOC_ID_ATTR: node_id})

    def _groups_for(self, group_id: str) -> List[Tag]:
        return self.soup.find_all(attrs={GROUP_ID_ATTR: group_id})

    def _arrows_for(self, group_id: str) -> List[Tag]:
        arrows = []
        for menu in self.soup.find_all(attrs={DOC_ID_ATTR: group_id}):
            arrow = menu.find(class_=MENU_ARROW_CLASS)
            if arrow is not None:
                arrows.append(arrow)
        return arrows

    def first_group_id(self) -> Optional[str]:
        sidebar = self.sidebar
        if sidebar is None:
            return None
        content_menu = sidebar.find(class_=CONTENT_MENU_CLASS)
        if content_menu is None:
            return None
        group = content_menu.find(class_=MENU_GROUP_CLASS)
        if group is None:
            return None
        return group.get(GROUP_ID_ATTR) or None

    def active_node_id(self) -> Optional[str]:
        for item in self.soup.find_all(class_=NAV_ITEM_CLASS):
            if has_class(item, ACTIVE_CLASS):
                menu = closest(item, MENU_CLASS)
                if menu is None:
                    return None
                return menu.get(DOC_ID_ATTR) or None
        return None

    def parent_group_of(self, node_id: str) -> Optional[str]:
        start = self._menu_for(node_id)
        if start is None:
            # A group with no menu entry of its own: step out from its content
            groups = self._groups_for(node_id)
            start = groups[0] if groups else None
        if start is None:
            return None
        enclosing = start.find_parent(class_=MENU_GROUP_CLASS)
        if enclosing is None:
            return None
        return enclosing.get(GROUP_ID_ATTR) or None

    def group_ids(self) -> List[str]:
        """Every group id in document order."""
        ids = []
        for group in self.soup.find_all(class_=MENU_GROUP_CLASS):
            group_id = group.get(GROUP_ID_ATTR)
            if group_id and group_id not in ids:
                ids.append(group_id)
        return ids

    def is_group_expanded(self, group_id: str) -> bool:
        """True when every content node is visible and every arrow rotated."""
        groups = self._groups_for(group_id)
        arrows = self._arrows_for(group_id)
        if not groups and not arrows:
            return False
        return all(not has_class(g, HIDDEN_CLASS) for g in groups) and all(
            has_class(a, ROTATE_CLASS) for a in arrows
        )

    def scroll_position(self) -> Optional[float]:
        sidebar = self.sidebar
        if sidebar is None:
            return None
        return parse_scroll_position(sidebar.get(SCROLL_TOP_ATTR))

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def set_group_expanded(self, group_id: str, expanded: bool) -> None:
        for group in self._groups_for(group_id):
            if expanded:
                remove_class(group, HIDDEN_CLASS)
            else:
                add_class(group, HIDDEN_CLASS)
        for arrow in self._arrows_for(group_id):
            if expanded:
                add_class(arrow, ROTATE_CLASS)
            else:
                remove_class(arrow, ROTATE_CLASS)

    def set_scroll_position(self, offset: float) -> None:
        sidebar = self.sidebar
        if sidebar is not None:
            sidebar[SCROLL_TOP_ATTR] = serialize_scroll_position(offset)

    def apply_color_scheme(self, dark: bool) -> None:
        dark_link = self.soup.find("link", attrs={"title": HIGHLIGHT_DARK_TITLE})
        light_link = self.soup.find("link", attrs={"title": HIGHLIGHT_LIGHT_TITLE})
        enabled, disabled = (dark_link, light_link) if dark else (light_link, dark_link)
        if enabled is not None and enabled.has_attr("disabled"):
            del enabled["disabled"]
        if disabled is not None:
            disabled["disabled"] = "disabled"

    def set_search_overlay_open(self, is_open: bool) -> None:
        overlay = self._by_id("search_overlay")
        search_input = self._by_id("search_input")
        body = self.soup.body
        if overlay is not None:
            (remove_class if is_open else add_class)(overlay, HIDDEN_CLASS)
        if body is not None:
            (add_class if is_open else remove_class)(body, SCROLL_LOCK_CLASS)
        if search_input is not None:
            if is_open:
                search_input["autofocus"] = "autofocus"
            elif search_input.has_attr("autofocus"):
                del search_input["autofocus"]

    def set_mobile_menu_open(self, is_open: bool) -> None:
        menu = self._by_id("mobile_menu")
        backdrop = self._by_id("backdrop")
        toggle = self._by_id("mobile_toggle")
        slide = self._by_id("mobile_slide")
        if menu is not None:
            (add_class if is_open else remove_class)(menu, "translate-x-0")
            (remove_class if is_open else add_class)(menu, "translate-x-full")
        if backdrop is not None:
            (add_class if is_open else remove_class)(backdrop, "opacity-100")
            (remove_class if is_open else add_class)(backdrop, "opacity-0")
            (add_class if is_open else remove_class)(backdrop, "bg-gray-500")
        if toggle is not None:
            (add_class if is_open else remove_class)(toggle, HIDDEN_CLASS)
        if slide is not None:
            (remove_class if is_open else add_class)(slide, "invisible")

    # ------------------------------------------------------------------
    # Event routing
    # ------------------------------------------------------------------

    def attach(self, controller: NavigationTreeController) -> None:
        self.controller = controller

    def click(self, tag: Tag) -> None:
        """Dispatch a click on a nav item, an arrow or a mobile control."""
        if self.controller is None:
            return
        element_id = tag.get("id")
        if element_id == self.elements["mobile_toggle"]:
            self.controller.toggle_mobile_menu()
            return
        if element_id == self.elements["mobile_close"]:
            self.controller.close_mobile_menu()
            return
        menu = closest(tag, MENU_CLASS)
        if menu is None:
            logger.debug("Click outside any menu ignored")
            return
        self.controller.on_toggle(menu.get(DOC_ID_ATTR))

    def click_node(self, node_id: str) -> None:
        """Dispatch a click on the nav item of node_id."""
        menu = self._menu_for(node_id)
        if menu is None:
            return
        item = menu.find(class_=NAV_ITEM_CLASS) or menu
        self.click(item)

    def scroll(self, offset: float) -> None:
        self.set_scroll_position(offset)
        if self.controller is not None:
            self.controller.on_scroll(offset)

    def key_up(self, key: str) -> bool:
        if self.controller is None:
            return False
        return self.controller.handle_key(key)
