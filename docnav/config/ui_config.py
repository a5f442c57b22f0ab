"""
docnav UI Configuration.

Handles persistence of UI preferences: color scheme, search shortcut and
the element ids the navigation surfaces look up.
Config is stored in ~/.config/docnav/ui_config.json
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, TypedDict

from ..exceptions import ConfigurationError
from .constants import DEFAULT_ELEMENT_IDS, DEFAULT_SEARCH_SHORTCUT, DOCNAV_CONFIG_DIR

logger = logging.getLogger(__name__)

COLOR_SCHEMES = ("auto", "light", "dark")
LIGHT_BACKGROUNDS = ("7", "15")


class ElementIds(TypedDict):
    """Element ids of the page regions the controller drives."""

    sidebar: str
    search_overlay: str
    search_input: str
    search_results: str
    mobile_menu: str
    mobile_toggle: str
    mobile_close: str
    mobile_slide: str
    backdrop: str


DEFAULT_ELEMENTS: ElementIds = {**DEFAULT_ELEMENT_IDS}  # type: ignore[typeddict-item]

DEFAULT_CONFIG: dict[str, Any] = {
    "theme": None,
    "color_scheme": "auto",
    "search_shortcut": DEFAULT_SEARCH_SHORTCUT,
    "elements": {**DEFAULT_ELEMENTS},
}


def get_ui_config_path() -> Path:
    """
    Get path to UI config file.

    Returns:
        Path to ~/.config/docnav/ui_config.json
    """
    DOCNAV_CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    return DOCNAV_CONFIG_DIR / "ui_config.json"


def load_ui_config() -> dict[str, Any]:
    """
    Load UI configuration from file.

    Returns:
        Config dict, or defaults if file doesn't exist or is invalid
    """
    path = get_ui_config_path()
    if path.exists():
        try:
            config = json.loads(path.read_text())
            if not isinstance(config, dict):
                logger.warning("Ignoring non-object UI config at %s", path)
                return dict(DEFAULT_CONFIG)
            # Merge with defaults to handle missing keys
            return {**DEFAULT_CONFIG, **config}
        except (json.JSONDecodeError, OSError):
            return dict(DEFAULT_CONFIG)
    return dict(DEFAULT_CONFIG)


def save_ui_config(config: dict[str, Any]) -> None:
    """
    Save UI configuration to file.

    Args:
        config: Configuration dict to save
    """
    path = get_ui_config_path()
    try:
        path.write_text(json.dumps(config, indent=2) + "\n")
    except OSError as e:
        logger.warning("Could not save UI config to %s: %s", path, e)


def get_color_scheme() -> str:
    """
    Get the color scheme preference.

    Returns:
        "auto", "light" or "dark"; unknown values read as "auto"
    """
    scheme = load_ui_config().get("color_scheme", "auto")
    return scheme if scheme in COLOR_SCHEMES else "auto"


def set_color_scheme(scheme: str) -> None:
    """Set and persist the color scheme preference."""
    if scheme not in COLOR_SCHEMES:
        raise ConfigurationError(
            f"Color scheme must be one of {', '.join(COLOR_SCHEMES)}",
            key="color_scheme",
            value=scheme,
        )
    config = load_ui_config()
    config["color_scheme"] = scheme
    save_ui_config(config)


def _is_valid_shortcut(letter: Any) -> bool:
    return isinstance(letter, str) and len(letter) == 1 and letter.isascii() and letter.isalpha()


def get_search_shortcut() -> str:
    """
    Get the letter that opens the search overlay together with ctrl.

    Returns:
        Lowercase letter, or the default when the stored value is invalid
    """
    letter = load_ui_config().get("search_shortcut", DEFAULT_SEARCH_SHORTCUT)
    if not _is_valid_shortcut(letter):
        return DEFAULT_SEARCH_SHORTCUT
    return letter.lower()


def set_search_shortcut(letter: str) -> None:
    """Set and persist the search shortcut letter."""
    if not _is_valid_shortcut(letter):
        raise ConfigurationError(
            "Search shortcut must be a single letter",
            key="search_shortcut",
            value=letter,
        )
    config = load_ui_config()
    config["search_shortcut"] = letter.lower()
    save_ui_config(config)


def get_element_ids() -> ElementIds:
    """Get element ids, merged with defaults."""
    raw = load_ui_config().get("elements", {})
    if not isinstance(raw, dict):
        return {**DEFAULT_ELEMENTS}
    merged = {**DEFAULT_ELEMENTS}
    for key, value in raw.items():
        if key in merged and isinstance(value, str) and value:
            merged[key] = value  # type: ignore[literal-required]
    return merged


def get_theme() -> str | None:
    """
    Get the explicitly chosen theme name, if any.

    Returns:
        Theme name, or None to derive it from the color scheme
    """
    theme = load_ui_config().get("theme")
    return str(theme) if theme else None


def set_theme(theme_name: str) -> None:
    """
    Set and persist theme preference.

    Args:
        theme_name: Name of theme to set
    """
    config = load_ui_config()
    config["theme"] = theme_name
    save_ui_config(config)


def terminal_prefers_dark() -> bool:
    """
    Guess whether the terminal background is dark.

    COLORFGBG is "fg;bg" (sometimes "fg;default;bg"); a background of 7 or
    15 is a light terminal. Anything else, including no hint, reads as dark.
    """
    terminal_bg = os.environ.get("COLORFGBG", "").split(";")[-1]
    return terminal_bg not in LIGHT_BACKGROUNDS
