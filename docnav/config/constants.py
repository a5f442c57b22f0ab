"""
Centralized constants for docnav.

Storage keys, CSS class names and element ids used by the navigation
surfaces live here so that both surfaces agree on the same contract.
"""

import os
from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

DOCNAV_CONFIG_DIR = Path(
    os.environ.get("DOCNAV_CONFIG_DIR", Path.home() / ".config" / "docnav")
)

# =============================================================================
# SESSION STORAGE KEYS
# =============================================================================

EXPANDED_GROUPS_KEY = "expandedGroups"
SIDEBAR_SCROLL_KEY = "sidebarScrollPos"

DEFAULT_SESSION_NAME = "default"

# =============================================================================
# DOM CONTRACT: CLASS NAMES
# =============================================================================

HIDDEN_CLASS = "hidden"
ROTATE_CLASS = "rotate"
ACTIVE_CLASS = "active"
MENU_CLASS = "menu"
MENU_GROUP_CLASS = "menu-group"
MENU_ARROW_CLASS = "menu-arrow"
NAV_ITEM_CLASS = "sidebar-nav-item"
CONTENT_MENU_CLASS = "content-menu"
SCROLL_LOCK_CLASS = "overflow-hidden"

GROUP_ID_ATTR = "data-group-id"
DOC_ID_ATTR = "data-doc-id"
SCROLL_TOP_ATTR = "data-scroll-top"

# Alternate highlight stylesheets, selected by <link title="...">
HIGHLIGHT_DARK_TITLE = "highlight_dark"
HIGHLIGHT_LIGHT_TITLE = "highlight_light"

# =============================================================================
# DOM CONTRACT: ELEMENT IDS (overridable through ui_config "elements")
# =============================================================================

DEFAULT_ELEMENT_IDS = {
    "sidebar": "left-sidebar",
    "search_overlay": "search-model",
    "search_input": "search-model-input",
    "search_results": "search-results",
    "mobile_menu": "mobile-menu",
    "mobile_toggle": "toggle",
    "mobile_close": "closeSlider",
    "mobile_slide": "slide",
    "backdrop": "backgroundBackDrop",
}

# =============================================================================
# KEYBOARD
# =============================================================================

DEFAULT_SEARCH_SHORTCUT = "x"  # ctrl+x opens the search overlay
CLOSE_SEARCH_KEY = "escape"
TOGGLE_SIDEBAR_KEY = "ctrl+b"

# =============================================================================
# SEARCH
# =============================================================================

NO_RESULTS_LABEL = "No results found"
NO_RESULTS_LINK = "#"
MAX_SEARCH_RESULTS = 50
