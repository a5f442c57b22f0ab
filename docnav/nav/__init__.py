"""
Navigation tree: expansion state, controller and surface contract.

The controller is surface-agnostic; docnav ships an HTML surface
(nav.html_surface) and a Textual one (ui.surface).
"""

from .controller import NavigationTreeController
from .protocols import NavigationSurface, StructuralLookup
from .state import ancestors_of, toggle_group

__all__ = [
    "NavigationTreeController",
    "NavigationSurface",
    "StructuralLookup",
    "ancestors_of",
    "toggle_group",
]
