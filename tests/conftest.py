"""Shared pytest fixtures for docnav tests."""

import logging
import textwrap

import pytest

from docnav.site import parse_site
from docnav.storage import MemoryStorage
from docnav.utils.logging_utils import CLI_HANDLER_NAME, TUI_HANDLER_NAME


SAMPLE_PAGE = textwrap.dedent(
    """\
    <html>
    <head>
      <link rel="stylesheet" title="highlight_dark" href="/css/dark.css">
      <link rel="stylesheet" title="highlight_light" href="/css/light.css" disabled="disabled">
    </head>
    <body>
      <button id="toggle">Menu</button>
      <div id="slide" class="invisible">
        <div id="backgroundBackDrop" class="opacity-0"></div>
        <div id="mobile-menu" class="translate-x-full"><button id="closeSlider">x</button></div>
      </div>
      <nav id="left-sidebar">
        <div class="content-menu">
          <ul>
            <li class="menu" data-doc-id="intro">
              <a class="sidebar-nav-item" href="/intro/">Introduction</a><span class="menu-arrow"></span>
              <ul class="menu-group hidden" data-group-id="intro">
                <li class="menu" data-doc-id="install"><a class="sidebar-nav-item" href="/intro/install/">Install</a></li>
              </ul>
            </li>
            <li class="menu" data-doc-id="components">
              <a class="sidebar-nav-item" href="/components/">Components</a><span class="menu-arrow"></span>
              <ul class="menu-group hidden" data-group-id="components">
                <li class="menu" data-doc-id="lifecycle">
                  <a class="sidebar-nav-item" href="/components/lifecycle/">Lifecycle</a><span class="menu-arrow"></span>
                  <ul class="menu-group hidden" data-group-id="lifecycle">
                    <li class="menu" data-doc-id="on-init"><a class="sidebar-nav-item active" href="/components/lifecycle/on-init/">OnInit</a></li>
                  </ul>
                </li>
              </ul>
            </li>
            <li class="menu" data-doc-id="routing">
              <a class="sidebar-nav-item" href="/routing/">Routing</a><span class="menu-arrow"></span>
              <ul class="menu-group hidden" data-group-id="routing">
                <li class="menu" data-doc-id="route-params"><a class="sidebar-nav-item" href="/routing/params/">Route parameters</a></li>
              </ul>
            </li>
          </ul>
        </div>
      </nav>
      <div id="search-model" class="hidden">
        <input id="search-model-input">
        <ul id="search-results"></ul>
      </div>
    </body>
    </html>
    """
)


SAMPLE_MANIFEST = {
    "title": "Blazor University",
    "edit_root": "https://github.com/example/site/edit/main/input",
    "documents": [
        {
            "id": "intro",
            "title": "Introduction",
            "description": "Where to start",
            "published": "2019-08-01",
            "body": "# Introduction\n\nWelcome.",
            "children": [
                {"id": "install", "title": "Install", "body": "Run the installer."},
            ],
        },
        {
            "id": "components",
            "title": "Components",
            "description": "Building blocks of the UI",
            "children": [
                {
                    "id": "lifecycle",
                    "title": "Lifecycle",
                    "children": [
                        {
                            "id": "on-init",
                            "title": "OnInit",
                            "description": "First lifecycle hook",
                        },
                    ],
                },
            ],
        },
        {
            "id": "routing",
            "title": "Routing",
            "children": [
                {"id": "route-params", "title": "Route parameters"},
                {"id": "drafts", "title": "Drafts", "ShowInSidebar": False},
            ],
        },
    ],
}


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep every test away from the real ~/.config/docnav."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setattr(
        "docnav.config.ui_config.get_ui_config_path",
        lambda: config_dir / "ui_config.json",
    )
    monkeypatch.setattr("docnav.storage.DOCNAV_CONFIG_DIR", config_dir)
    monkeypatch.delenv("COLORFGBG", raising=False)
    return config_dir


@pytest.fixture
def sample_page():
    return SAMPLE_PAGE


@pytest.fixture
def sample_site():
    return parse_site(SAMPLE_MANIFEST)


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture(autouse=True)
def restore_logging():
    """Drop the handlers docnav installs and restore levels afterwards."""
    root = logging.getLogger()
    docnav_logger = logging.getLogger("docnav")
    root_level, docnav_level = root.level, docnav_logger.level
    yield
    for handler in list(root.handlers):
        if handler.get_name() in (CLI_HANDLER_NAME, TUI_HANDLER_NAME):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(root_level)
    docnav_logger.setLevel(docnav_level)
