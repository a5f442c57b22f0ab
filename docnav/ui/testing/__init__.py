"""
Testing utilities for docnav navigation surfaces.

MockNavigationSurface records what the controller asks of it, so
controller behaviour can be tested without Textual or HTML:

    ```python
    from docnav.ui.testing import MockNavigationSurface

    surface = MockNavigationSurface.from_parents(
        {"root": None, "mid": "root", "leaf": "mid"}, active="leaf"
    )
    controller = NavigationTreeController(surface, MemoryStorage())
    controller.initialize()
    assert surface.expanded == {"root", "mid"}
    ```
"""

from .mocks import FailingStorage, MockNavigationSurface

__all__ = [
    "FailingStorage",
    "MockNavigationSurface",
]
