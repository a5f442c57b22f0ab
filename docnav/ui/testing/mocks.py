"""
Mock implementations for testing.

These mocks stand in for a rendered surface and a storage backend,
allowing fast unit tests of controller logic.
"""

from typing import Dict, List, Optional, Set, Tuple

from ...exceptions import StorageUnavailableError
from ...storage import KeyValueStorage


class MockNavigationSurface:
    """Mock NavigationSurface.

    Holds the hierarchy as a parent map and tracks the visual state the
    controller applies. Groups are nodes that are somebody's parent.

    Example:
        ```python
        mock = MockNavigationSurface.from_parents({"a": None, "b": "a"})
        mock.set_group_expanded("a", True)
        assert mock.expanded == {"a"}
        assert mock.set_group_calls == [("a", True)]
        ```
    """

    def __init__(
        self,
        parents: Optional[Dict[str, Optional[str]]] = None,
        *,
        active: Optional[str] = None,
        first_group: Optional[str] = None,
    ):
        self.parents: Dict[str, Optional[str]] = dict(parents or {})
        self.active = active
        self._first_group = first_group

        # Visual state
        self.hidden: Set[str] = set(self.groups())
        self.rotated: Set[str] = set()
        self.scroll_top: Optional[float] = None
        self.dark: Optional[bool] = None
        self.search_open = False
        self.mobile_open = False
        self.controller = None

        # Call tracking
        self.set_group_calls: List[Tuple[str, bool]] = []
        self.attach_calls: int = 0

    @classmethod
    def from_parents(
        cls, parents: Dict[str, Optional[str]], active: Optional[str] = None
    ) -> "MockNavigationSurface":
        return cls(parents, active=active)

    def groups(self) -> List[str]:
        """Ids that have children, in insertion order."""
        seen = []
        for parent in self.parents.values():
            if parent is not None and parent not in seen:
                seen.append(parent)
        return seen

    @property
    def expanded(self) -> Set[str]:
        """Groups shown open: content visible and arrow rotated."""
        return {g for g in self.groups() if g not in self.hidden and g in self.rotated}

    def first_group_id(self) -> Optional[str]:
        if self._first_group is not None:
            return self._first_group
        for group in self.groups():
            if self.parents.get(group) is None:
                return group
        return None

    def active_node_id(self) -> Optional[str]:
        return self.active

    def parent_group_of(self, node_id: str) -> Optional[str]:
        return self.parents.get(node_id)

    def set_group_expanded(self, group_id: str, expanded: bool) -> None:
        self.set_group_calls.append((group_id, expanded))
        if expanded:
            self.hidden.discard(group_id)
            self.rotated.add(group_id)
        else:
            self.hidden.add(group_id)
            self.rotated.discard(group_id)

    def set_scroll_position(self, offset: float) -> None:
        self.scroll_top = offset

    def apply_color_scheme(self, dark: bool) -> None:
        self.dark = dark

    def set_search_overlay_open(self, is_open: bool) -> None:
        self.search_open = is_open

    def set_mobile_menu_open(self, is_open: bool) -> None:
        self.mobile_open = is_open

    def attach(self, controller) -> None:
        self.attach_calls += 1
        self.controller = controller


class FailingStorage(KeyValueStorage):
    """Storage whose every call fails, like a browser with storage disabled."""

    def __init__(self):
        self.attempted_writes: List[Tuple[str, str]] = []

    def get_item(self, key: str) -> Optional[str]:
        raise StorageUnavailableError("Storage disabled", key=key)

    def set_item(self, key: str, value: str) -> None:
        self.attempted_writes.append((key, value))
        raise StorageUnavailableError("Storage disabled", key=key)

    def remove_item(self, key: str) -> None:
        raise StorageUnavailableError("Storage disabled", key=key)
