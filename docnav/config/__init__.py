"""Configuration for docnav: constants and persisted UI preferences."""

from .constants import DOCNAV_CONFIG_DIR, EXPANDED_GROUPS_KEY, SIDEBAR_SCROLL_KEY
from .ui_config import (
    ElementIds,
    get_color_scheme,
    get_element_ids,
    get_search_shortcut,
    load_ui_config,
    save_ui_config,
)

__all__ = [
    "DOCNAV_CONFIG_DIR",
    "EXPANDED_GROUPS_KEY",
    "SIDEBAR_SCROLL_KEY",
    "ElementIds",
    "get_color_scheme",
    "get_element_ids",
    "get_search_shortcut",
    "load_ui_config",
    "save_ui_config",
]
