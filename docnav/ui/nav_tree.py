"""NavTree: Tree[SiteDocument] sidebar for the documentation browser.

TreeNode objects persist for the life of the app; expansion changes go
through the navigation controller so the widget and the persisted
expansion set never disagree. The tree only reports what the user did.
"""

import logging
from typing import Dict, List, Optional

from rich.text import Text
from textual.binding import Binding
from textual.message import Message
from textual.widgets import Tree
from textual.widgets._tree import TreeNode

from ..site import Site, SiteDocument

logger = logging.getLogger(__name__)


class NavTree(Tree[SiteDocument]):
    """Sidebar tree of the site's documents.

    Each TreeNode.data holds a SiteDocument. Groups are documents with
    sidebar children; everything else is a leaf.
    """

    BINDINGS = [
        Binding("space", "toggle_group", "Toggle", show=False),
    ]

    class ToggleRequested(Message):
        """The user asked to flip a group."""

        def __init__(self, doc_id: str) -> None:
            self.doc_id = doc_id
            super().__init__()

    class Scrolled(Message):
        """The sidebar's vertical scroll offset changed."""

        def __init__(self, offset: float) -> None:
            self.offset = offset
            super().__init__()

    def __init__(self, *, id: Optional[str] = None, classes: Optional[str] = None):
        super().__init__("Documentation", id=id, classes=classes)
        self.show_root = False
        self.auto_expand = False  # The controller decides expand/collapse
        self._doc_nodes: Dict[str, TreeNode[SiteDocument]] = {}
        self._active_id: Optional[str] = None

    # ------------------------------------------------------------------
    # Population
    # ------------------------------------------------------------------

    def _make_label(self, doc: SiteDocument) -> Text:
        if doc.id == self._active_id:
            return Text(doc.title, style="bold underline")
        return Text(doc.title)

    def populate_from_site(self, site: Site) -> None:
        """Full load: clear the tree and add every sidebar document."""
        self.clear()
        self._doc_nodes = {}
        self._add_children(self.root, site.documents)
        logger.debug("NavTree populated with %d nodes", len(self._doc_nodes))

    def _add_children(
        self, parent: TreeNode[SiteDocument], documents: List[SiteDocument]
    ) -> None:
        for doc in documents:
            if not doc.show_in_sidebar:
                continue
            if doc.is_group:
                node = parent.add(self._make_label(doc), data=doc)
                self._doc_nodes[doc.id] = node
                self._add_children(node, doc.children)
            else:
                self._doc_nodes[doc.id] = parent.add_leaf(self._make_label(doc), data=doc)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def find_node(self, doc_id: str) -> Optional[TreeNode[SiteDocument]]:
        return self._doc_nodes.get(doc_id)

    def first_group_id(self) -> Optional[str]:
        for node in self.root.children:
            if node.allow_expand and node.data is not None:
                return node.data.id
        return None

    def parent_id_of(self, doc_id: str) -> Optional[str]:
        node = self._doc_nodes.get(doc_id)
        if node is None:
            return None
        parent = node.parent
        if parent is None or parent is self.root or parent.data is None:
            return None
        return parent.data.id

    @property
    def active_id(self) -> Optional[str]:
        return self._active_id

    def set_active(self, doc_id: Optional[str]) -> None:
        """Mark doc_id as the page being shown and relabel old and new nodes."""
        previous = self._active_id
        self._active_id = doc_id
        for node_id in (previous, doc_id):
            node = self._doc_nodes.get(node_id) if node_id else None
            if node is not None and node.data is not None:
                node.set_label(self._make_label(node.data))

    # ------------------------------------------------------------------
    # User input
    # ------------------------------------------------------------------

    def action_toggle_group(self) -> None:
        node = self.cursor_node
        if node is None or node.data is None or not node.allow_expand:
            return
        self.post_message(self.ToggleRequested(node.data.id))

    def watch_scroll_y(self, old_value: float, new_value: float) -> None:
        super().watch_scroll_y(old_value, new_value)
        if old_value != new_value:
            self.post_message(self.Scrolled(new_value))
