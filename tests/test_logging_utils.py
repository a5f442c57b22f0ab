"""Tests for CLI and TUI logging setup."""

import logging
from logging.handlers import RotatingFileHandler

from docnav.utils.logging_utils import (
    CLI_HANDLER_NAME,
    TUI_HANDLER_NAME,
    setup_cli_logging,
    setup_tui_logging,
)


def named_handlers(name):
    return [h for h in logging.getLogger().handlers if h.get_name() == name]


def test_cli_logging_installs_one_stderr_handler():
    setup_cli_logging()
    setup_cli_logging(verbose=True)

    assert len(named_handlers(CLI_HANDLER_NAME)) == 1
    assert logging.getLogger("docnav").level == logging.DEBUG


def test_tui_logging_replaces_cli_handler(tmp_path):
    # The CLI callback runs before browse sets up the TUI
    setup_cli_logging()
    logger = setup_tui_logging("docnav.main", log_dir=tmp_path)

    assert named_handlers(CLI_HANDLER_NAME) == []
    handlers = named_handlers(TUI_HANDLER_NAME)
    assert len(handlers) == 1
    assert isinstance(handlers[0], RotatingFileHandler)

    logger.info("Browsing site")
    handlers[0].flush()
    assert "Browsing site" in (tmp_path / "tui.log").read_text()


def test_tui_logging_is_idempotent(tmp_path):
    setup_tui_logging("docnav.main", log_dir=tmp_path)
    setup_tui_logging("docnav.main", log_dir=tmp_path, verbose=True)

    assert len(named_handlers(TUI_HANDLER_NAME)) == 1
    assert logging.getLogger("docnav").level == logging.DEBUG
