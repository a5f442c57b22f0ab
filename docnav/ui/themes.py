"""
docnav TUI Theme Definitions.

Two themes, one per color scheme: the terminal counterpart of the
page's highlight_dark / highlight_light stylesheets.
"""

from typing import Any

from textual.theme import Theme

DOCNAV_DARK = Theme(
    name="docnav-dark",
    primary="#0178D4",      # Blue
    secondary="#004578",    # Darker blue
    accent="#38BDF8",       # Sky - active node
    foreground="#e0e0e0",
    background="#121212",
    surface="#1e1e1e",
    panel="#252526",        # Sidebar background
    boost="#2d2d2d",
    success="#4EBF71",
    warning="#ffa62b",
    error="#ba3c5b",
    dark=True,
)

DOCNAV_LIGHT = Theme(
    name="docnav-light",
    primary="#0969DA",
    secondary="#8250DF",
    accent="#0E7490",       # Cyan - active node
    foreground="#1F2328",
    background="#FFFFFF",
    surface="#F6F8FA",
    panel="#F0F2F5",
    boost="#DFE3E8",
    success="#1A7F37",
    warning="#9A6700",
    error="#CF222E",
    dark=False,
)

DOCNAV_THEMES = {
    "docnav-dark": DOCNAV_DARK,
    "docnav-light": DOCNAV_LIGHT,
}


def register_all_themes(app: Any) -> None:
    """Register the docnav themes with a Textual app."""
    for theme in DOCNAV_THEMES.values():
        app.register_theme(theme)


def theme_for_scheme(dark: bool) -> str:
    return "docnav-dark" if dark else "docnav-light"
