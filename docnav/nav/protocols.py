"""
Protocols for navigation surfaces.

These protocols define what a rendering surface must provide for the
navigation controller to drive it. Every operation on an element the
surface does not have is a no-op; lookups return None.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .controller import NavigationTreeController


@runtime_checkable
class StructuralLookup(Protocol):
    """Reads the navigation hierarchy off whatever is rendered."""

    def parent_group_of(self, node_id: str) -> Optional[str]:
        """Id of the group enclosing node_id, or None at a root."""
        ...


@runtime_checkable
class NavigationSurface(StructuralLookup, Protocol):
    """
    The rendering surface the controller drives.

    This is the minimal interface: sidebar tree, highlight theme,
    search overlay and mobile slide-over.
    """

    def first_group_id(self) -> Optional[str]:
        """Id of the first top-level group in the sidebar."""
        ...

    def active_node_id(self) -> Optional[str]:
        """Id of the node for the page currently shown."""
        ...

    def set_group_expanded(self, group_id: str, expanded: bool) -> None:
        """Show or hide the group's content and rotate its arrow to match."""
        ...

    def set_scroll_position(self, offset: float) -> None:
        """Scroll the navigation panel to offset."""
        ...

    def apply_color_scheme(self, dark: bool) -> None:
        """Enable exactly one of the dark/light highlight themes."""
        ...

    def set_search_overlay_open(self, is_open: bool) -> None:
        """Show or hide the search overlay, locking body scroll while shown."""
        ...

    def set_mobile_menu_open(self, is_open: bool) -> None:
        """Slide the mobile navigation in or out."""
        ...

    def attach(self, controller: NavigationTreeController) -> None:
        """Route the surface's click, scroll and key events to controller."""
        ...
